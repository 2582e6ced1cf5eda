"""src/uriparser/syntax/grammar.py

RFC 3986 URI-reference scanner.

Splits a URI-reference into its raw component slices without decoding
anything. Scanning stops at the first character that cannot continue the
grammar; leftover input is reported as a SyntaxError.
"""

# pylint: disable=redefined-builtin

import ipaddress
import logging
import re
import string
from typing import NamedTuple, Optional, Tuple

from uriparser.exceptions import SyntaxError, UnsupportedInputError
from uriparser.syntax.percent import SUB_DELIMS, UNRESERVED

__all__ = ["ParsedComponents", "parse_syntax"]

logger = logging.getLogger(__name__)

_ALPHA = frozenset(string.ascii_letters)
_HEXDIG = frozenset(string.hexdigits)
_DIGIT = frozenset(string.digits)
_SCHEME_CHARS = _ALPHA | _DIGIT | frozenset("+-.")

_REG_NAME_CHARS = UNRESERVED | SUB_DELIMS
_USERINFO_CHARS = _REG_NAME_CHARS | frozenset(":")
_PCHAR_NC = _REG_NAME_CHARS | frozenset("@")
_PCHAR = _PCHAR_NC | frozenset(":")
_QUERY_CHARS = _PCHAR | frozenset("/?")

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
_IPVFUTURE = re.compile(r"[vV][0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+")


class ParsedComponents(NamedTuple):
    """Raw component slices of a URI-reference. Absent components are None."""

    scheme: Optional[str]
    userinfo: Optional[str]
    host: Optional[str]
    port: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]


def _valid_ip_literal(literal: str) -> bool:
    if literal[:1] in ("v", "V"):
        return _IPVFUTURE.fullmatch(literal) is not None
    if "%" in literal:
        # Zone identifiers are not part of RFC 3986.
        return False
    try:
        ipaddress.IPv6Address(literal)
    except ValueError:
        return False
    return True


class _Scanner:
    """Cursor over the input text; each scan_* method advances ``pos``."""

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.end = len(text)

    def error(self, position: Optional[int] = None) -> SyntaxError:
        if position is None:
            position = self.pos
        logger.debug("rejected %r at offset %d", self.text, position)
        return SyntaxError(self.text, position)

    def peek(self, char: str) -> bool:
        return self.pos < self.end and self.text[self.pos] == char

    def scan_chars(self, allowed: frozenset) -> str:
        """Consume characters from ``allowed`` and percent-encoded octets."""
        text = self.text
        start = pos = self.pos
        while pos < self.end:
            char = text[pos]
            if char in allowed:
                pos += 1
            elif (
                char == "%"
                and pos + 2 < self.end
                and text[pos + 1] in _HEXDIG
                and text[pos + 2] in _HEXDIG
            ):
                pos += 3
            else:
                break
        self.pos = pos
        return text[start:pos]

    def scan_scheme(self) -> Optional[str]:
        text = self.text
        if not text or text[0] not in _ALPHA:
            return None
        pos = 1
        while pos < self.end and text[pos] in _SCHEME_CHARS:
            pos += 1
        if pos < self.end and text[pos] == ":":
            self.pos = pos + 1
            return text[:pos]
        return None

    def scan_authority(self) -> Tuple[Optional[str], str, Optional[str]]:
        text = self.text
        start = self.pos

        boundary = self.end
        for delimiter in "/?#":
            index = text.find(delimiter, start)
            if index != -1 and index < boundary:
                boundary = index

        userinfo = None
        at = text.find("@", start, boundary)
        if at != -1:
            self.scan_chars(_USERINFO_CHARS)
            if self.pos != at:
                raise self.error()
            userinfo = text[start:at]
            self.pos = at + 1

        if self.peek("["):
            opening = self.pos
            closing = text.find("]", opening, boundary)
            if closing == -1 or not _valid_ip_literal(text[opening + 1 : closing]):
                raise self.error(opening)
            self.pos = closing + 1
            host = text[opening : self.pos]
        else:
            host = self.scan_chars(_REG_NAME_CHARS)

        port = None
        if self.peek(":"):
            self.pos += 1
            begin = self.pos
            while self.pos < self.end and text[self.pos] in _DIGIT:
                self.pos += 1
            port = text[begin : self.pos]

        return userinfo, host, port

    def scan_segments(self) -> None:
        """*( "/" segment )"""
        while self.peek("/"):
            self.pos += 1
            self.scan_chars(_PCHAR)

    def scan_path(self, has_scheme: bool) -> str:
        start = self.pos
        if self.peek("/"):
            self.scan_segments()
        else:
            # path-noscheme forbids ":" in the first segment.
            self.scan_chars(_PCHAR if has_scheme else _PCHAR_NC)
            if self.pos > start:
                self.scan_segments()
        return self.text[start : self.pos]


def parse_syntax(text: str) -> ParsedComponents:
    """
    Scan ``text`` as an RFC 3986 URI-reference.

    Args:
        text: The URI-reference.

    Returns:
        ParsedComponents with the raw (still percent-encoded) slices.

    Raises:
        UnsupportedInputError: If ``text`` is not a string.
        SyntaxError: If the grammar cannot consume the whole input. The
            error's ``remainder`` is the unparsed tail.
    """
    if not isinstance(text, str):
        raise UnsupportedInputError(
            f"URI must be a string, not {type(text).__name__}"
        )

    scanner = _Scanner(text)
    scheme = scanner.scan_scheme()

    userinfo = host = port = None
    if text.startswith("//", scanner.pos):
        scanner.pos += 2
        userinfo, host, port = scanner.scan_authority()
        path_start = scanner.pos
        scanner.scan_segments()
        path = text[path_start : scanner.pos]
    else:
        path = scanner.scan_path(scheme is not None)

    query = None
    if scanner.peek("?"):
        scanner.pos += 1
        query = scanner.scan_chars(_QUERY_CHARS)

    fragment = None
    if scanner.peek("#"):
        scanner.pos += 1
        fragment = scanner.scan_chars(_QUERY_CHARS)

    if scanner.pos != scanner.end:
        raise scanner.error()

    return ParsedComponents(scheme, userinfo, host, port, path, query, fragment)
