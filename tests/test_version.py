"""Test version string formatting."""

from cosmo import version
from cosmo.version import BuildInfo, get_version_string


def test_unknown_build(monkeypatch):
    for name in ("_from_git_repo", "_from_embedded_file", "_from_direct_url"):
        monkeypatch.setattr(version, name, lambda: None)
    assert get_version_string() == "unknown unknown"


def test_short_commit_and_dirty_flag(monkeypatch):
    info = BuildInfo(commit="0123456789abcdef", date="2024-05-01T10:00:00+00:00", dirty=True)
    monkeypatch.setattr(version, "get_build_info", lambda: info)
    assert get_version_string() == "0123456-dirty 2024-05-01T10:00:00+00:00"


def test_embedded_file_used_when_git_missing(monkeypatch):
    monkeypatch.setattr(version, "_from_git_repo", lambda: None)
    embedded = BuildInfo(commit="feedface00", date=None, dirty=False)
    monkeypatch.setattr(version, "_from_embedded_file", lambda: embedded)
    assert get_version_string() == "feedfac unknown"
