"""src/uriparser/uri/path.py

Path segment handling: split, join and dot-segment removal.

A path is held as a list of segments plus a flag for the leading slash.
The leading slash never appears as an empty first segment; a trailing
slash is kept as a trailing empty segment so ``/a/`` stays ``["a", ""]``.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

__all__ = [
    "split_path",
    "join_path",
    "path_segments",
    "remove_dot_segments",
    "canonical_path",
]

_DOT_SEGMENTS = (".", "..")


def split_path(text: str, is_absolute: Optional[bool] = None) -> List[str]:
    """
    Split path text into segments.

    Args:
        text: Raw path text.
        is_absolute: Whether the path carries a leading slash. Derived from
            ``text`` when omitted.

    Returns:
        A new list of segments. ``"/"`` and ``""`` both give ``[]``.
    """
    if is_absolute is None:
        is_absolute = text.startswith("/")
    if is_absolute and text.startswith("/"):
        text = text[1:]
    if not text:
        return []
    return text.split("/")


def join_path(
    segments: Sequence[str], is_absolute: bool, has_authority: bool = False
) -> str:
    """
    Join segments back into path text.

    The leading slash is emitted when the path is absolute, or when it is
    non-empty and follows an authority.
    """
    text = "/".join(segments)
    if is_absolute or (has_authority and text):
        return "/" + text
    return text


def path_segments(text: str) -> List[str]:
    """Segments of ``text`` regardless of a leading slash."""
    return split_path(text)


def remove_dot_segments(
    segments: Iterable[str], is_absolute: bool, keep_leading_parents: bool = False
) -> List[str]:
    """
    Collapse ``.`` and ``..`` segments (RFC 3986 section 5.2.4).

    Args:
        segments: Input segments; never modified.
        is_absolute: Whether the path has a leading slash. ``..`` never climbs
            above the root of an absolute path.
        keep_leading_parents: For relative paths, keep ``..`` segments that
            have nothing left to remove instead of dropping them.

    Returns:
        A new list of segments.
    """
    keep = keep_leading_parents and not is_absolute
    output: List[str] = []
    last = None
    for segment in segments:
        last = segment
        if segment == ".":
            continue
        if segment == "..":
            if output and output[-1] != "..":
                output.pop()
            elif keep:
                output.append(segment)
            continue
        output.append(segment)

    # "a/b/.." names the directory "a/", not the document "a".
    if last in _DOT_SEGMENTS and (not output or output[-1] != ".."):
        output.append("")

    if output == [""]:
        return [".", ""] if keep else []
    return output


def canonical_path(
    segments: Sequence[str], is_absolute: bool
) -> Tuple[List[str], bool]:
    """
    Return the segments and flag that parsing the joined text would give.

    A relative path whose first segment is empty joins to text starting with
    a slash, which parses as an absolute path without that segment.
    """
    segments = list(segments)
    if is_absolute or segments[:1] != [""]:
        return segments, is_absolute
    segments = segments[1:]
    if segments == [""]:
        segments = []
    return segments, True
