"""src/uriparser/uri/__init__.py

URI value type, resolution and normalization.
"""

from uriparser.uri.components import URI, compose, parse
from uriparser.uri.normalize import DEFAULT_PORTS, NormalizeOptions
from uriparser.uri.path import (
    canonical_path,
    join_path,
    path_segments,
    remove_dot_segments,
    split_path,
)
from uriparser.uri.resolve import merge, route_from

__all__ = [
    "URI",
    "parse",
    "compose",
    "merge",
    "route_from",
    "NormalizeOptions",
    "DEFAULT_PORTS",
    "split_path",
    "join_path",
    "path_segments",
    "remove_dot_segments",
    "canonical_path",
]
