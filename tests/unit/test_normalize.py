"""tests/unit/test_normalize.py

Unit tests for uriparser.uri.normalize and the URI normalization methods.
"""

import pytest

from uriparser import DEFAULT_PORTS, NormalizeOptions, parse


class TestNormalizeOptions:
    """Tests for the NormalizeOptions record."""

    def test_defaults_enable_everything(self):
        """Test that every component is normalized by default."""
        options = NormalizeOptions()
        assert options == NormalizeOptions(True, True, True, True, True, True)

    def test_none(self):
        """Test the all-disabled constructor."""
        options = NormalizeOptions.none()
        assert not any(
            (
                options.scheme,
                options.userinfo,
                options.host,
                options.path,
                options.query,
                options.fragment,
            )
        )

    def test_only(self):
        """Test enabling a subset."""
        options = NormalizeOptions.only("host", "path")
        assert options.host and options.path
        assert not options.scheme and not options.query

    def test_only_rejects_unknown_names(self):
        """Test that misspelled components are reported."""
        with pytest.raises(ValueError, match="hots"):
            NormalizeOptions.only("hots")

    def test_unknown_keyword_flag(self):
        """Test that misspelled keyword flags are reported."""
        with pytest.raises(TypeError):
            parse("http://a").normalize(hots=False)

    def test_default_ports(self):
        """Test the scheme to port table."""
        assert DEFAULT_PORTS["http"] == 80
        assert DEFAULT_PORTS["https"] == 443


class TestNormalize:
    """Tests for URI.normalize() and URI.normalize_in_place()."""

    def test_dot_segments(self):
        """Test that dot segments are removed from a composed URI."""
        uri = parse("http://example.org/one/two/../../one")
        assert str(uri.normalize()) == "http://example.org/one"

    def test_path_disabled(self):
        """Test that a disabled path is left byte-for-byte unchanged."""
        uri = parse("http://example.org/one/two/../../one")
        assert str(uri.normalize(path=False)) == "http://example.org/one/two/../../one"
        uri = parse("http://h/%7e/./x")
        assert uri.normalize(path=False).path == "/%7e/./x"

    def test_host_only(self):
        """Test host-only normalization."""
        uri = parse("HTTP://EXAMPLE.ORG")
        result = uri.normalize(NormalizeOptions.only("host"))
        assert str(result) == "HTTP://example.org"

    def test_host_lowercased(self):
        """Test case folding of the host."""
        assert str(parse("http://EXAMPLE.ORG").normalize()) == "http://example.org"

    def test_scheme_disabled(self):
        """Test that the scheme keeps its case when disabled."""
        assert str(parse("HTTP://a/").normalize(scheme=False)) == "HTTP://a/"

    def test_everything(self):
        """Test all components at once."""
        uri = parse("HTTP://Example.COM:80/a/%7euser/./b/../c?%6a#%7e")
        assert str(uri.normalize()) == "http://example.com/a/~user/c?%6A#%7E"

    def test_userinfo_percent_case(self):
        """Test that userinfo encodings are upper-cased only."""
        assert str(parse("ftp://%7eu@h/").normalize()) == "ftp://%7Eu@h/"

    def test_default_port_dropped(self):
        """Test removal of a port equal to the scheme default."""
        assert str(parse("https://h:443/").normalize()) == "https://h/"
        assert str(parse("http://h:080/").normalize()) == "http://h/"

    def test_other_port_kept(self):
        """Test that a non-default port is kept."""
        assert str(parse("https://h:80/").normalize()) == "https://h:80/"
        assert str(parse("unknown://h:80/").normalize()) == "unknown://h:80/"

    def test_empty_port_dropped(self):
        """Test removal of an empty port."""
        assert str(parse("http://h:/x").normalize()) == "http://h/x"

    def test_percent_encoded_host(self):
        """Test that host encodings are upper-cased after case folding."""
        assert str(parse("http://%7eH/").normalize()) == "http://%7Eh/"

    def test_encoded_dots(self):
        """Test that encoded dots are decoded before removal."""
        assert str(parse("http://h/a/%2E%2E/b").normalize()) == "http://h/b"

    def test_reserved_encodings_kept(self):
        """Test that encoded reserved characters are not decoded."""
        assert str(parse("http://h/a%2fb").normalize()) == "http://h/a%2Fb"

    def test_relative_reference_keeps_parents(self):
        """Test that unresolvable '..' survive in a relative reference."""
        assert str(parse("../../a/./b").normalize()) == "../../a/b"
        assert str(parse("a/../../b").normalize()) == "../b"

    def test_leading_empty_segment_in_relative_reference(self):
        """Test that "./" stays in front of an empty first segment."""
        result = parse(".//a").normalize()
        assert str(result) == ".//a"
        assert result.path_absolute is False
        assert str(parse("x/..//a").normalize()) == ".//a"

    def test_leading_empty_segment_with_scheme(self):
        """Test that a rootless path collapsing to "/..." becomes absolute."""
        result = parse("foo:.//a").normalize()
        assert result == parse("foo:/a")
        assert str(result) == "foo:/a"

    def test_in_place_returns_self(self):
        """Test that the receiver is modified and returned."""
        uri = parse("HTTP://A/b/../c")
        assert uri.normalize_in_place() is uri
        assert str(uri) == "http://a/c"

    def test_copy_leaves_original(self):
        """Test that normalize() does not modify the receiver."""
        uri = parse("HTTP://A/b/../c")
        uri.normalize()
        assert str(uri) == "HTTP://A/b/../c"

    def test_options_and_flags_combined(self):
        """Test that keyword flags override the options record."""
        uri = parse("HTTP://A/b/../c")
        result = uri.normalize(NormalizeOptions.none(), host=True)
        assert str(result) == "HTTP://a/b/../c"

    @pytest.mark.parametrize(
        "text",
        [
            "HTTP://Example.COM:80/a/%7euser/./b/../c?%6a#%7e",
            "http://example.org/one/two/../../one",
            "../../a/./b",
            "./a:b",
            "foo:a/../../b",
            "http://h:/x/.",
            "http://h/a/%2E%2E/%2e",
            "./",
            ".//a",
            "foo:.//a",
            ".",
        ],
    )
    def test_idempotent(self, text):
        """Test that normalizing twice equals normalizing once."""
        once = parse(text).normalize()
        twice = once.normalize()
        assert twice == once
        assert parse(str(once)).normalize() == once

    def test_normalization_needed(self):
        """Test detection of URIs that normalization would change."""
        assert parse("http://a/b").normalization_needed() is False
        assert parse("HTTP://a/b").normalization_needed() is True
        assert parse("HTTP://a/b").normalization_needed(scheme=False) is False
