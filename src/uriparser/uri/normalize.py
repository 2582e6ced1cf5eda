"""src/uriparser/uri/normalize.py

Syntax-based normalization (RFC 3986 section 6.2.2) with per-component
opt-out.
"""

# pylint: disable=protected-access

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from uriparser.syntax.percent import (
    normalize_percent_encodings,
    uppercase_percent_encodings,
)
from uriparser.uri.path import canonical_path, remove_dot_segments

if TYPE_CHECKING:  # pragma: no cover
    from uriparser.uri.components import URI

__all__ = ["DEFAULT_PORTS", "NormalizeOptions", "build_options", "normalize_components"]

DEFAULT_PORTS: Dict[str, int] = {
    "ftp": 21,
    "gemini": 1965,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}


@dataclass
class NormalizeOptions:
    """
    Which components normalization may touch.

    Attributes:
        scheme: Lower-case the scheme.
        userinfo: Upper-case percent-encodings in the userinfo.
        host: Lower-case the host and drop an empty or default port.
        path: Decode unreserved percent-encodings, upper-case the rest and
            remove dot segments.
        query: Upper-case percent-encodings in the query.
        fragment: Upper-case percent-encodings in the fragment.
    """

    scheme: bool = True
    userinfo: bool = True
    host: bool = True
    path: bool = True
    query: bool = True
    fragment: bool = True

    @classmethod
    def none(cls) -> "NormalizeOptions":
        """Options with every component disabled."""
        return cls(**{field.name: False for field in dataclasses.fields(cls)})

    @classmethod
    def only(cls, *names: str) -> "NormalizeOptions":
        """Options with just the named components enabled."""
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = set(names) - known
        if unknown:
            raise ValueError(f"Unknown URI components: {', '.join(sorted(unknown))}")
        return dataclasses.replace(cls.none(), **{name: True for name in names})


def build_options(
    options: Optional[NormalizeOptions] = None, **flags: bool
) -> NormalizeOptions:
    """Fold keyword flags over ``options`` (all enabled when omitted)."""
    if options is None:
        options = NormalizeOptions()
    if flags:
        options = dataclasses.replace(options, **flags)
    return options


def normalize_components(uri: "URI", options: NormalizeOptions) -> None:
    """Normalize ``uri`` in place. Disabled components are left untouched."""
    if options.scheme and uri.scheme is not None:
        uri.scheme = uri.scheme.lower()

    if options.userinfo and uri.userinfo is not None:
        uri.userinfo = uppercase_percent_encodings(uri.userinfo)

    if options.host and uri._host is not None:
        uri._host = uppercase_percent_encodings(uri._host.lower())
        if uri._port == "":
            uri._port = None
        elif uri._port is not None and uri.scheme is not None:
            if DEFAULT_PORTS.get(uri.scheme.lower()) == uri.port_number:
                uri._port = None

    if options.path:
        rooted = uri.path_absolute or uri._host is not None
        segments = [normalize_percent_encodings(s) for s in uri._segments]
        # A relative-path reference keeps the ".." segments it cannot resolve.
        keep = uri.scheme is None and not rooted
        segments = remove_dot_segments(segments, rooted, keep)
        if not rooted and segments[:1] == [""]:
            if keep:
                # "./" keeps a leading empty segment from reading as the root.
                segments.insert(0, ".")
            else:
                segments, uri.path_absolute = canonical_path(segments, False)
        uri.path_segments = segments

    if options.query and uri.query is not None:
        uri.query = uppercase_percent_encodings(uri.query)

    if options.fragment and uri.fragment is not None:
        uri.fragment = uppercase_percent_encodings(uri.fragment)
