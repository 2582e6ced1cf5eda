"""src/uriparser/__init__.py

uriparser - RFC 3986 URI references for Python.

uriparser parses URI-references into a mutable value type and implements the
reference-resolution family on top of it. It is built entirely on Python's
standard library.

Key Features:
    - Strict RFC 3986 parsing with the failing remainder reported
    - Reference resolution (merge) and relativization (route_from)
    - Syntax-based normalization with per-component opt-out
    - Filename to ``file:`` URI conversion (POSIX and Windows)
    - ``application/x-www-form-urlencoded`` codec

Example:
    Resolving and relativizing::

        from uriparser import parse

        base = parse("file:///one/two/three")
        target = base + "../TWO"
        str(target)                                 # 'file:///one/TWO'
        str(target - base)                          # '../TWO'
        str(target.route_from(base, domain_root=True))  # '/one/TWO'

    Normalizing::

        uri = parse("HTTP://EXAMPLE.org:80/a/./b/../c")
        str(uri.normalize())                        # 'http://example.org/a/c'
        str(uri.normalize(path=False))              # 'http://example.org/a/./b/../c'

    Form data::

        from uriparser import decode_www_form, encode_www_form

        encode_www_form([("a", "1"), ("c", "x yz")])  # 'a=1&c=x+yz'
        decode_www_form("a=1&b=&c")  # [('a', '1'), ('b', ''), ('c', None)]
"""

# pylint: disable=redefined-builtin

from uriparser.exceptions import (
    ConversionError,
    SyntaxError,
    UnsupportedInputError,
    URIParserError,
)
from uriparser.syntax.grammar import ParsedComponents, parse_syntax
from uriparser.syntax.percent import escape, unescape
from uriparser.uri.components import URI, compose, parse
from uriparser.uri.normalize import DEFAULT_PORTS, NormalizeOptions
from uriparser.uri.path import (
    canonical_path,
    join_path,
    path_segments,
    remove_dot_segments,
    split_path,
)
from uriparser.uri.resolve import merge as resolve
from uriparser.uri.resolve import route_from as relativize
from uriparser.utils.filename import filename_to_uri_string, uri_string_to_filename
from uriparser.utils.form import (
    decode_www_form,
    decode_www_form_component,
    encode_www_form,
    encode_www_form_component,
)
from uriparser.version import __version__

__all__ = [
    "URI",
    "parse",
    "compose",
    "parse_syntax",
    "ParsedComponents",
    "resolve",
    "relativize",
    "NormalizeOptions",
    "DEFAULT_PORTS",
    "split_path",
    "join_path",
    "path_segments",
    "remove_dot_segments",
    "canonical_path",
    "filename_to_uri_string",
    "uri_string_to_filename",
    "encode_www_form",
    "decode_www_form",
    "encode_www_form_component",
    "decode_www_form_component",
    "escape",
    "unescape",
    "URIParserError",
    "SyntaxError",
    "ConversionError",
    "UnsupportedInputError",
    "__version__",
]
