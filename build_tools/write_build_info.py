"""Write cosmo/_build_info.py with the commit the package is built from.

Run directly before building without hatch, or let hatch_build.py call
``write_build_info`` during the build.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

TARGET = Path("cosmo") / "_build_info.py"


def _run_git(args: list[str], cwd: Path) -> str | None:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, OSError):
        # Building outside a git checkout is fine; the fields stay None
        return None
    return out.decode().strip() or None


def write_build_info(project_root: Path) -> Path:
    """Write the build info module under ``project_root`` and return its path."""
    commit = _run_git(["rev-parse", "HEAD"], cwd=project_root)
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=project_root)
    target_path = project_root / TARGET
    target_path.write_text(
        "# Auto-generated at build time.\n"
        f"COMMIT = {commit!r}\n"
        f"DATE = {date!r}\n",
        encoding="utf-8",
    )
    return target_path


if __name__ == "__main__":
    print(write_build_info(Path(__file__).resolve().parents[1]))
