"""tests/unit/test_filename.py

Unit tests for uriparser.utils.filename.
"""

import pytest

from uriparser.exceptions import ConversionError, UnsupportedInputError
from uriparser.utils.filename import filename_to_uri_string, uri_string_to_filename


class TestPosix:
    """Tests for POSIX filenames."""

    @pytest.mark.parametrize(
        "filename, uri",
        [
            ("/a b/c", "file:///a%20b/c"),
            ("/", "file:///"),
            ("/tmp/100%", "file:///tmp/100%25"),
            ("/tmp/a#b?c", "file:///tmp/a%23b%3Fc"),
            ("/home/\u00e9t\u00e9", "file:///home/%C3%A9t%C3%A9"),
            ("a b/c", "a%20b/c"),
            ("a:b", "a%3Ab"),
        ],
    )
    def test_round_trip(self, filename, uri):
        """Test conversion in both directions."""
        assert filename_to_uri_string(filename) == uri
        assert uri_string_to_filename(uri) == filename

    def test_localhost(self):
        """Test that localhost names the local machine."""
        assert uri_string_to_filename("file://localhost/etc/hosts") == "/etc/hosts"

    def test_remote_host(self):
        """Test that a remote host cannot become a POSIX filename."""
        with pytest.raises(ConversionError):
            uri_string_to_filename("file://remote/etc/hosts")


class TestWindows:
    """Tests for Windows filenames."""

    @pytest.mark.parametrize(
        "filename, uri",
        [
            ("C:\\Windows\\x y", "file:///C:/Windows/x%20y"),
            ("C:\\", "file:///C:/"),
            ("\\\\server\\share\\f.txt", "file://server/share/f.txt"),
            ("a\\b c", "a/b%20c"),
            ("\\rooted\\name", "/rooted/name"),
        ],
    )
    def test_round_trip(self, filename, uri):
        """Test conversion in both directions."""
        assert filename_to_uri_string(filename, windows=True) == uri
        assert uri_string_to_filename(uri, windows=True) == filename

    def test_forward_slashes_accepted(self):
        """Test that forward slashes act as separators."""
        assert filename_to_uri_string("D:/x/y", windows=True) == "file:///D:/x/y"

    def test_legacy_drive_bar(self):
        """Test the 'C|' drive spelling."""
        assert uri_string_to_filename("file:///C|/x", windows=True) == "C:\\x"

    def test_drive_without_authority(self):
        """Test a file URI without '//'."""
        assert uri_string_to_filename("file:/C:/x", windows=True) == "C:\\x"

    @pytest.mark.parametrize("filename", ["CC:\\x", "1:\\x", "C:x"])
    def test_invalid_drive(self, filename):
        """Test that malformed drive specifications are refused."""
        with pytest.raises(ConversionError):
            filename_to_uri_string(filename, windows=True)

    def test_missing_drive(self):
        """Test that a local file URI needs a drive on Windows."""
        with pytest.raises(ConversionError):
            uri_string_to_filename("file:///a/b", windows=True)

    def test_unc_without_host(self):
        """Test that an empty UNC host is refused."""
        with pytest.raises(ConversionError):
            filename_to_uri_string("\\\\\\share", windows=True)


class TestErrors:
    """Tests for conversion failures."""

    def test_wrong_scheme(self):
        """Test that only file URIs convert."""
        with pytest.raises(ConversionError, match="Not a file URI"):
            uri_string_to_filename("http://a/b")

    def test_unparsable_uri(self):
        """Test that syntax errors surface as conversion errors."""
        with pytest.raises(ConversionError) as exc_info:
            uri_string_to_filename("file:///a b")
        assert exc_info.value.__cause__ is not None

    def test_encoded_separator(self):
        """Test that an encoded slash cannot become a separator."""
        with pytest.raises(ConversionError):
            uri_string_to_filename("file:///a%2Fb")
        with pytest.raises(ConversionError):
            uri_string_to_filename("file:///C:/a%5Cb", windows=True)

    def test_non_string_filename(self):
        """Test that only text filenames are accepted."""
        with pytest.raises(UnsupportedInputError):
            filename_to_uri_string(b"/tmp")
