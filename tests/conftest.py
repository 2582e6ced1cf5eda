import pytest

from uriparser import URI, parse

# Base URI of the RFC 3986 section 5.4 reference resolution examples.
RFC3986_BASE = "http://a/b/c/d;p?q"


@pytest.fixture
def rfc_base() -> URI:
    """Fixture providing the RFC 3986 section 5.4 base URI."""
    return parse(RFC3986_BASE)


@pytest.fixture
def file_base() -> URI:
    """Fixture providing a file URI with a three-segment path."""
    return parse("file:///one/two/three")
