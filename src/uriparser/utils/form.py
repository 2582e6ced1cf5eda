"""src/uriparser/utils/form.py

``application/x-www-form-urlencoded`` encoding and decoding.
"""

import urllib.parse
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Sequence, Tuple, Union

from uriparser.exceptions import UnsupportedInputError

__all__ = [
    "encode_www_form",
    "decode_www_form",
    "encode_www_form_component",
    "decode_www_form_component",
]

FormPair = Tuple[str, Optional[str]]

# Alphanumerics plus "*-._" stay literal; everything else is escaped.
_SAFE = "*"


def encode_www_form_component(
    value: Union[str, int, float], encoding: str = "utf-8"
) -> str:
    """Escape one key or value; spaces become ``+``."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise UnsupportedInputError(
            f"Cannot form-encode value of type {type(value).__name__}"
        )
    text = value if isinstance(value, str) else str(value)
    return urllib.parse.quote_plus(text, safe=_SAFE, encoding=encoding).replace(
        "~", "%7E"
    )


def decode_www_form_component(text: str, encoding: str = "utf-8") -> str:
    """
    Inverse of encode_www_form_component.

    Raises:
        UnsupportedInputError: If the escaped bytes are not valid ``encoding``.
    """
    try:
        return urllib.parse.unquote_plus(text, encoding=encoding, errors="strict")
    except UnicodeDecodeError as exc:
        raise UnsupportedInputError(
            f"Form component is not valid {encoding}: {text!r}"
        ) from exc


def _pairs(data: Any) -> Iterable[Any]:
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise UnsupportedInputError(
            f"Form data must be ordered pairs, not {type(data).__name__}"
        )
    return data


def encode_www_form(
    data: Union[Sequence[Sequence[Any]], Mapping[Any, Any]], encoding: str = "utf-8"
) -> str:
    """
    Encode ordered key/value pairs as a form-urlencoded string.

    Args:
        data: Sequence of ``(key, value)`` pairs, or a mapping. A value of
            None emits the bare key without ``=``.
        encoding: Character encoding used before percent-escaping.

    Returns:
        The encoded string, e.g. ``"a=1&b=2&c=x+yz"``.

    Raises:
        UnsupportedInputError: If ``data`` is not ordered pairs or holds
            values that cannot be stringified.
    """
    encoded = []
    for pair in _pairs(data):
        if (
            isinstance(pair, (str, bytes))
            or not isinstance(pair, Sequence)
            or len(pair) != 2
        ):
            raise UnsupportedInputError(f"Form pair must have two items: {pair!r}")
        key, value = pair
        item = encode_www_form_component(key, encoding)
        if value is not None:
            item += "=" + encode_www_form_component(value, encoding)
        encoded.append(item)
    return "&".join(encoded)


def decode_www_form(
    query: str, separator: str = "&", encoding: str = "utf-8"
) -> List[FormPair]:
    """
    Decode a form-urlencoded string into ordered pairs.

    A key without ``=`` decodes to ``(key, None)``; ``key=`` decodes to
    ``(key, "")``. Empty pieces between separators are skipped.

    Raises:
        UnsupportedInputError: If ``query`` is not a string.
    """
    if not isinstance(query, str):
        raise UnsupportedInputError(
            f"Form query must be a string, not {type(query).__name__}"
        )

    pairs: List[FormPair] = []
    for piece in query.split(separator):
        if not piece:
            continue
        key, equals, value = piece.partition("=")
        pairs.append(
            (
                decode_www_form_component(key, encoding),
                decode_www_form_component(value, encoding) if equals else None,
            )
        )
    return pairs
