"""src/uriparser/syntax/__init__.py

URI grammar and percent-encoding primitives.
"""

from uriparser.syntax.grammar import ParsedComponents, parse_syntax
from uriparser.syntax.percent import escape, unescape

__all__ = ["ParsedComponents", "parse_syntax", "escape", "unescape"]
