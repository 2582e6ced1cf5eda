"""src/uriparser/exceptions.py

uriparser Exceptions hierarchy.
"""

# pylint: disable=redefined-builtin

from typing import Optional


class URIParserError(Exception):
    """Base exception for all uriparser errors."""


class SyntaxError(URIParserError):
    """
    The grammar rejected the input.

    Carries the rejected text, the index at which scanning stopped and the
    unparsed remainder starting at that index.
    """

    def __init__(self, text: str, position: int, message: Optional[str] = None):
        self.text = text
        self.position = position
        self.remainder = text[position:]
        if message is None:
            message = f"URI parse failed at: `{self.remainder}'"
        super().__init__(message)


class ConversionError(URIParserError):
    """Filename to URI (or URI to filename) mapping failed."""


class UnsupportedInputError(URIParserError, TypeError):
    """
    Input has a shape the operation cannot work with.
    For example, form encoding given something other than ordered pairs.
    """
