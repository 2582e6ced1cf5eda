"""src/uriparser/uri/components.py

URI value type and composer.
"""

# pylint: disable=protected-access,too-many-arguments,too-many-instance-attributes

from typing import Any, Iterable, List, Optional, Tuple, Union

from uriparser.exceptions import UnsupportedInputError
from uriparser.syntax.grammar import parse_syntax
from uriparser.uri import normalize as _normalize
from uriparser.uri import resolve as _resolve
from uriparser.uri.path import join_path, split_path
from uriparser.utils.form import decode_www_form

__all__ = ["URI", "parse", "compose"]

PathLike = Union[str, Iterable[str]]


class URI:
    """
    A parsed URI-reference.

    The path is held as a list of segments plus a leading-slash flag; the
    ``path`` text is always derived from them. ``None`` and ``""`` are
    distinct for ``userinfo``, ``query`` and ``fragment``: ``"h?"`` has an
    empty query, ``"h"`` has none.

    Example::

        >>> base = URI.parse("http://a/b/c/d;p?q")
        >>> str(base + "../g")
        'http://a/b/g'
    """

    __slots__ = (
        "scheme",
        "userinfo",
        "_host",
        "_port",
        "_segments",
        "_path_absolute",
        "query",
        "fragment",
    )

    def __init__(
        self,
        scheme: Optional[str] = None,
        userinfo: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[Union[int, str]] = None,
        path: PathLike = "",
        query: Optional[str] = None,
        fragment: Optional[str] = None,
        *,
        path_absolute: Optional[bool] = None,
    ):
        self.scheme = scheme
        self.userinfo = userinfo
        self._host: Optional[str] = None
        self._port: Optional[str] = None
        self._segments: List[str] = []
        self._path_absolute = False
        self.host = host
        self.port = port
        if isinstance(path, str):
            self.path = path
            if path_absolute is not None:
                self._path_absolute = path_absolute
        else:
            self.path_segments = path
            self._path_absolute = bool(path_absolute)
        self.query = query
        self.fragment = fragment

    @classmethod
    def parse(cls, text: str) -> "URI":
        """
        Parse a URI-reference.

        Raises:
            SyntaxError: If ``text`` is not a valid URI-reference.
        """
        parts = parse_syntax(text)
        return cls(
            parts.scheme,
            parts.userinfo,
            parts.host,
            parts.port,
            parts.path,
            parts.query,
            parts.fragment,
        )

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    @property
    def host(self) -> Optional[str]:
        """Host without IP-literal brackets."""
        host = self._host
        if host is not None and host.startswith("[") and host.endswith("]"):
            return host[1:-1]
        return host

    @host.setter
    def host(self, value: Optional[str]) -> None:
        if value is not None and ":" in value and not value.startswith("["):
            value = f"[{value}]"
        self._host = value

    @property
    def port(self) -> Optional[str]:
        """Port text exactly as written, or None."""
        return self._port

    @port.setter
    def port(self, value: Optional[Union[int, str]]) -> None:
        if value is None:
            self._port = None
            return
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise UnsupportedInputError(
                f"Port must be int or str, not {type(value).__name__}"
            )
        value = str(value)
        if value and not value.isdigit():
            raise ValueError(f"Invalid port: {value!r}")
        self._port = value

    @property
    def port_number(self) -> Optional[int]:
        """Port as an integer; None when absent or empty."""
        if not self._port:
            return None
        return int(self._port)

    @property
    def authority(self) -> Optional[str]:
        """``[userinfo@]host[:port]``, or None without a host."""
        if self._host is None:
            return None
        authority = self._host
        if self.userinfo is not None:
            authority = f"{self.userinfo}@{authority}"
        if self._port is not None:
            authority = f"{authority}:{self._port}"
        return authority

    @property
    def path(self) -> str:
        return join_path(self._segments, self._path_absolute, self._host is not None)

    @path.setter
    def path(self, text: str) -> None:
        self._path_absolute = text.startswith("/")
        self._segments = split_path(text, self._path_absolute)

    @property
    def path_segments(self) -> List[str]:
        """A fresh copy of the path segments."""
        return list(self._segments)

    @path_segments.setter
    def path_segments(self, segments: Iterable[str]) -> None:
        self._segments = list(segments)

    @property
    def path_absolute(self) -> bool:
        """Whether the path starts with a slash."""
        return self._path_absolute

    @path_absolute.setter
    def path_absolute(self, value: bool) -> None:
        self._path_absolute = bool(value)

    @property
    def is_absolute(self) -> bool:
        """True when a scheme is present."""
        return self.scheme is not None

    @property
    def is_relative(self) -> bool:
        return self.scheme is None

    @property
    def query_pairs(self) -> List[Tuple[str, Optional[str]]]:
        """The query decoded as ``application/x-www-form-urlencoded`` pairs."""
        if self.query is None:
            return []
        return decode_www_form(self.query)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose(self) -> str:
        """Serialize back to URI-reference text."""
        parts = []
        if self.scheme is not None:
            parts.append(self.scheme + ":")

        has_authority = self._host is not None
        if has_authority:
            parts.append("//" + self.authority)

        path = join_path(self._segments, self._path_absolute, has_authority)
        if not has_authority and self._segments:
            first = self._segments[0]
            if not self._path_absolute and (
                first == "" or (self.scheme is None and ":" in first)
            ):
                # Would otherwise read back as the root or as a scheme.
                path = "./" + path
            elif path.startswith("//"):
                # Would otherwise read back as an authority.
                path = "/." + path
        parts.append(path)

        if self.query is not None:
            parts.append("?" + self.query)
        if self.fragment is not None:
            parts.append("#" + self.fragment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.compose()

    def __repr__(self) -> str:
        return f"URI({self.compose()!r})"

    def _key(self) -> Tuple[Any, ...]:
        return (
            self.scheme,
            self.userinfo,
            self._host,
            self._port,
            tuple(self._segments),
            self._path_absolute,
            self.query,
            self.fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self._key() == other._key()

    # Mutable value; not usable as a dict key.
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def copy(self) -> "URI":
        """Return an equal URI that shares no segment storage with this one."""
        clone = type(self).__new__(type(self))
        clone._assign(self)
        return clone

    def _assign(self, other: "URI") -> None:
        self.scheme = other.scheme
        self.userinfo = other.userinfo
        self._host = other._host
        self._port = other._port
        self._segments = list(other._segments)
        self._path_absolute = other._path_absolute
        self.query = other.query
        self.fragment = other.fragment

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def merge(self, ref: Union["URI", str]) -> "URI":
        """
        Resolve ``ref`` against this URI as base (RFC 3986 section 5.3).

        Neither operand is modified.
        """
        return _resolve.merge(self, _coerce(ref))

    def merge_in_place(self, ref: Union["URI", str]) -> "URI":
        """Resolve ``ref`` against this URI and store the result here."""
        self._assign(_resolve.merge(self, _coerce(ref)))
        return self

    def route_from(self, base: Union["URI", str], domain_root: bool = False) -> "URI":
        """
        Compute a reference that resolves to this URI against ``base``.

        Args:
            base: The base URI the reference will be resolved against.
            domain_root: Prefer root-relative paths (``/a/b``) over
                path-relative ones (``../a/b``).

        Returns:
            A new URI. When scheme or authority differ this URI is returned
            as a copy, since only an absolute reference reaches it.
        """
        return _resolve.route_from(self, _coerce(base), domain_root=domain_root)

    def route_to(self, target: Union["URI", str], domain_root: bool = False) -> "URI":
        """Compute a reference to ``target`` from this URI as base."""
        return _resolve.route_from(_coerce(target), self, domain_root=domain_root)

    __add__ = merge
    __iadd__ = merge_in_place
    __sub__ = route_from

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize_in_place(
        self, options: Optional[_normalize.NormalizeOptions] = None, **flags: bool
    ) -> "URI":
        """
        Normalize this URI in place and return it.

        Args:
            options: Which components to normalize; all by default.
            **flags: Per-component overrides, e.g. ``path=False``.
        """
        _normalize.normalize_components(
            self, _normalize.build_options(options, **flags)
        )
        return self

    def normalize(
        self, options: Optional[_normalize.NormalizeOptions] = None, **flags: bool
    ) -> "URI":
        """Return a normalized copy."""
        return self.copy().normalize_in_place(options, **flags)

    def normalization_needed(
        self, options: Optional[_normalize.NormalizeOptions] = None, **flags: bool
    ) -> bool:
        """True when normalizing would change this URI."""
        return self.normalize(options, **flags) != self


def _coerce(value: Union[URI, str]) -> URI:
    if isinstance(value, URI):
        return value
    if isinstance(value, str):
        return URI.parse(value)
    raise UnsupportedInputError(f"Expected URI or str, not {type(value).__name__}")


def parse(text: str) -> URI:
    """Parse a URI-reference into a URI."""
    return URI.parse(text)


def compose(uri: URI) -> str:
    """Serialize a URI back to text."""
    return uri.compose()
