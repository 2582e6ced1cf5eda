"""src/uriparser/utils/filename.py

Conversion between native filenames and ``file:`` URI strings.

POSIX mode maps ``/a b/c`` to ``file:///a%20b/c``. Windows mode maps
``C:\\a b\\c`` to ``file:///C:/a%20b/c`` and UNC paths ``\\\\host\\share``
to ``file://host/share``. Relative filenames become relative references.
"""

# pylint: disable=redefined-builtin

import logging
import re
from typing import List

from uriparser.exceptions import ConversionError, SyntaxError, UnsupportedInputError
from uriparser.syntax.percent import escape, unescape
from uriparser.uri.components import URI

__all__ = ["filename_to_uri_string", "uri_string_to_filename"]

logger = logging.getLogger(__name__)

_DRIVE = re.compile(r"[A-Za-z][:|]")
_WINDOWS_DRIVE = re.compile(r"[A-Za-z]:")
_LEGACY_DRIVE = re.compile(r"^(file:///?[A-Za-z])\|", re.IGNORECASE)
_LOCAL_HOSTS = (None, "", "localhost")


def _fail(message: str) -> ConversionError:
    logger.debug("filename conversion failed: %s", message)
    return ConversionError(message)


def _join_escaped(segments: List[str]) -> str:
    return "/".join(escape(segment) for segment in segments)


def _posix_to_uri(filename: str) -> str:
    if filename.startswith("/"):
        return "file:///" + _join_escaped(filename[1:].split("/"))
    return _join_escaped(filename.split("/"))


def _windows_to_uri(filename: str) -> str:
    path = filename.replace("\\", "/")

    if path.startswith("//"):
        host, _, rest = path[2:].partition("/")
        if not host:
            raise _fail(f"UNC path without host: {filename!r}")
        return f"file://{escape(host)}/" + _join_escaped(rest.split("/"))

    first, separator, rest = path.partition("/")
    if ":" in first:
        if not _WINDOWS_DRIVE.fullmatch(first):
            raise _fail(f"Invalid drive specification: {filename!r}")
        uri = "file:///" + first
        if separator:
            uri += "/" + _join_escaped(rest.split("/"))
        return uri

    if path.startswith("/"):
        return "/" + _join_escaped(path[1:].split("/"))
    return _join_escaped(path.split("/"))


def filename_to_uri_string(filename: str, windows: bool = False) -> str:
    """
    Convert a native filename to a URI string.

    Args:
        filename: POSIX or Windows filename.
        windows: Interpret ``filename`` as a Windows path.

    Returns:
        A ``file:`` URI for absolute filenames, a relative reference otherwise.

    Raises:
        ConversionError: If a Windows drive specification is malformed.
        UnsupportedInputError: If ``filename`` is not a string.
    """
    if not isinstance(filename, str):
        raise UnsupportedInputError(
            f"Filename must be a string, not {type(filename).__name__}"
        )
    if windows:
        return _windows_to_uri(filename)
    return _posix_to_uri(filename)


def uri_string_to_filename(uri_string: str, windows: bool = False) -> str:
    """
    Convert a ``file:`` URI string (or relative reference) to a filename.

    Args:
        uri_string: URI text.
        windows: Produce a Windows filename.

    Returns:
        The percent-decoded filename with native separators.

    Raises:
        ConversionError: If the scheme is not ``file``, the URI does not
            parse, a remote host is given in POSIX mode, or a Windows drive
            cannot be found.
    """
    if windows:
        uri_string = _LEGACY_DRIVE.sub(r"\1:", uri_string)
    try:
        uri = URI.parse(uri_string)
    except SyntaxError as exc:
        raise _fail(f"Not a valid URI: {uri_string!r}") from exc

    if uri.scheme is not None and uri.scheme.lower() != "file":
        raise _fail(f"Not a file URI: {uri_string!r}")

    separators = "/\\" if windows else "/"
    segments = [unescape(segment) for segment in uri.path_segments]
    for segment in segments:
        if any(char in segment for char in separators):
            raise _fail(f"Encoded path separator in {uri_string!r}")

    rooted = uri.path_absolute or uri.host is not None

    if not windows:
        if uri.host not in _LOCAL_HOSTS:
            raise _fail(f"Remote host in file URI: {uri_string!r}")
        return ("/" if rooted else "") + "/".join(segments)

    if uri.host not in _LOCAL_HOSTS:
        return "\\\\" + uri.host + "\\" + "\\".join(segments)

    if uri.scheme is None:
        return ("\\" if rooted else "") + "\\".join(segments)

    if not segments or not _DRIVE.fullmatch(segments[0]):
        raise _fail(f"No drive in file URI: {uri_string!r}")
    return segments[0][0] + ":\\" + "\\".join(segments[1:])
