"""src/uriparser/syntax/percent.py

Percent-encoding helpers shared by the grammar, normalizer and codecs.
"""

import re
import string
import urllib.parse

__all__ = [
    "UNRESERVED",
    "SUB_DELIMS",
    "GEN_DELIMS",
    "escape",
    "unescape",
    "uppercase_percent_encodings",
    "normalize_percent_encodings",
]

UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
SUB_DELIMS = frozenset("!$&'()*+,;=")
GEN_DELIMS = frozenset(":/?#[]@")

_PCT_ENCODED = re.compile(r"%([0-9A-Fa-f]{2})")


def escape(text: str, safe: str = "") -> str:
    """
    Percent-encode every character of ``text`` outside the unreserved set.

    Args:
        text: Text to escape. Non-ASCII characters are encoded as UTF-8.
        safe: Extra characters that are left untouched.

    Returns:
        The escaped text, with upper-case hex digits.
    """
    return urllib.parse.quote(text, safe=safe)


def unescape(text: str) -> str:
    """Decode all percent-encoded octets in ``text`` as UTF-8."""
    return urllib.parse.unquote(text)


def uppercase_percent_encodings(text: str) -> str:
    """Upper-case the hex digits of every percent-encoding in ``text``."""
    if "%" not in text:
        return text
    return _PCT_ENCODED.sub(lambda m: "%" + m.group(1).upper(), text)


def _decode_unreserved(match: "re.Match[str]") -> str:
    char = chr(int(match.group(1), 16))
    if char in UNRESERVED:
        return char
    return "%" + match.group(1).upper()


def normalize_percent_encodings(text: str) -> str:
    """
    Decode percent-encoded unreserved characters and upper-case the rest.

    ``%7e`` becomes ``~`` while ``%2f`` becomes ``%2F``.
    """
    if "%" not in text:
        return text
    return _PCT_ENCODED.sub(_decode_unreserved, text)
