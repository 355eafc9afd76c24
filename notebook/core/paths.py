"""
Path Helpers.

Pure functions for slash-delimited tree paths. Segments are matched
verbatim: no case folding, no Unicode normalization, no globbing.
"""

from collections.abc import Sequence

SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    """
    Split a path into its non-empty segments.

    A leading separator marks the root and is not a segment. Trailing and
    doubled separators are ignored, so "/a//b/" and "a/b" both give ["a", "b"].

    Args:
        path: Slash-delimited path

    Returns:
        Ordered list of segments; empty for the root
    """
    return [segment for segment in path.split(SEPARATOR) if segment]


def split_leaf(path: str) -> tuple[list[str], str]:
    """
    Split a path into its parent segments and final segment.

    Returns:
        Tuple of (parent segments, leaf title). The leaf is "" for the root.
    """
    segments = split_path(path)
    if not segments:
        return [], ""
    return segments[:-1], segments[-1]


def join_path(segments: Sequence[str]) -> str:
    """Build an absolute path from segments."""
    return SEPARATOR + SEPARATOR.join(segments)
