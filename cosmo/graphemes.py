"""Grapheme-cluster helpers.

Columns in the editor are grapheme indices, not code point or byte indices,
so that combining sequences and emoji stay intact when the working line is
edited. Every helper here accepts any integer index and never raises.
"""

from __future__ import annotations

import grapheme


def split(text: str) -> list[str]:
    """Return the grapheme clusters of ``text``."""
    return list(grapheme.graphemes(text))


def length(text: str) -> int:
    """Number of grapheme clusters in ``text``."""
    return grapheme.length(text)


def grapheme_at(text: str, index: int) -> str:
    """Return the grapheme at ``index``, or "" when there is none."""
    if index < 0:
        return ""
    for i, cluster in enumerate(grapheme.graphemes(text)):
        if i == index:
            return cluster
    return ""


def insert_at(text: str, index: int, s: str) -> str:
    """Insert ``s`` before the grapheme at ``index``.

    An index at or past the end appends; a negative index prepends.
    """
    prefix = grapheme.slice(text, 0, max(0, index))
    return prefix + s + text[len(prefix):]


def remove_at(text: str, index: int) -> str:
    """Remove the grapheme at ``index``; out-of-range indices are a no-op."""
    if index < 0:
        return text
    clusters = split(text)
    if index >= len(clusters):
        return text
    del clusters[index]
    return "".join(clusters)


def window(text: str, left: int, right: int) -> str:
    """Inclusive grapheme slice ``[left, right]`` used for horizontal scrolling."""
    if right < left:
        return ""
    return grapheme.slice(text, max(0, left), right + 1)
