"""src/uriparser/uri/resolve.py

Reference resolution (RFC 3986 section 5.2) and its inverse.

Both operations build a fresh URI and never touch their arguments.
"""

# pylint: disable=protected-access

from typing import TYPE_CHECKING, List, Optional

from uriparser.uri.path import canonical_path, remove_dot_segments

if TYPE_CHECKING:  # pragma: no cover
    from uriparser.uri.components import URI

__all__ = ["merge", "route_from"]


def _rooted(uri: "URI") -> bool:
    """Paths following an authority always start at the root."""
    return uri.path_absolute or uri._host is not None


def _set_path(target: "URI", segments: List[str], absolute: bool) -> None:
    segments = remove_dot_segments(segments, absolute)
    if target._host is None:
        segments, absolute = canonical_path(segments, absolute)
    target.path_segments = segments
    target.path_absolute = absolute


def merge(base: "URI", ref: "URI") -> "URI":
    """
    Resolve ``ref`` against ``base``.

    Args:
        base: The base URI.
        ref: The reference to resolve.

    Returns:
        The target URI. Excess ``..`` segments clamp at the root.
    """
    target = ref.copy()

    if ref.scheme is not None:
        _set_path(target, ref._segments, ref.path_absolute)
        return target

    target.scheme = base.scheme

    if ref._host is not None:
        _set_path(target, ref._segments, ref.path_absolute)
        return target

    target.userinfo = base.userinfo
    target._host = base._host
    target._port = base._port

    if not ref._segments and not ref.path_absolute:
        target.path_segments = base._segments
        target.path_absolute = base.path_absolute
        if ref.query is None:
            target.query = base.query
    elif ref.path_absolute:
        _set_path(target, ref._segments, True)
    elif base._host is not None and not base._segments:
        _set_path(target, ref._segments, True)
    else:
        _set_path(target, base._segments[:-1] + ref._segments, _rooted(base))

    return target


def _fold(value: Optional[str]) -> Optional[str]:
    return None if value is None else value.lower()


def _same_origin(target: "URI", base: "URI") -> bool:
    return (
        _fold(target.scheme) == _fold(base.scheme)
        and _fold(target._host) == _fold(base._host)
        and target.userinfo == base.userinfo
        and target._port == base._port
    )


def _reference(target: "URI", segments: List[str], absolute: bool) -> "URI":
    result = target.copy()
    result.scheme = None
    result.userinfo = None
    result._host = None
    result._port = None
    result.path_segments = segments
    result.path_absolute = absolute
    return result


def _same_document(target: "URI", base: "URI") -> "URI":
    result = _reference(target, [], False)
    if target.query == base.query:
        # An empty reference inherits the base query.
        result.query = None
    return result


def route_from(target: "URI", base: "URI", domain_root: bool = False) -> "URI":
    """
    Compute a reference ``r`` such that ``merge(base, r) == target``.

    Args:
        target: The URI the reference must lead to.
        base: The base the reference will be resolved against.
        domain_root: Return a root-relative path instead of a path-relative
            one whenever the target path is rooted.

    Returns:
        A new URI. ``target`` itself (copied) when scheme or authority differ.
    """
    if not _same_origin(target, base):
        return target.copy()

    target_segments = target._segments
    base_segments = base._segments

    if not target_segments and not target.path_absolute:
        if (
            not base_segments
            and not base.path_absolute
            and (target.query is not None or base.query is None)
        ):
            return _same_document(target, base)
        # Only a network-path reference can clear the base path.
        result = target.copy()
        if result._host is not None:
            result.scheme = None
        return result

    if _rooted(target) != _rooted(base):
        if _rooted(target):
            return _reference(target, target_segments, True)
        return target.copy()

    if (
        target_segments == base_segments
        and target.path_absolute == base.path_absolute
        and (target.query is not None or base.query is None)
    ):
        return _same_document(target, base)

    if domain_root and _rooted(target):
        return _reference(target, target_segments, True)

    directory = base_segments[:-1]
    common = 0
    for left, right in zip(target_segments[:-1], directory):
        if left != right:
            break
        common += 1

    segments = [".."] * (len(directory) - common) + target_segments[common:]
    if not segments or segments == [""]:
        # An empty path would mean the base document itself.
        segments = [".", ""]
    elif segments[0] == "":
        # A leading empty segment would read back as the root.
        segments.insert(0, ".")
    return _reference(target, segments, False)
