"""Tests for utils/validators.py.

Tests endpoint parsing and IP address validation.
"""

import pytest

from utils.validators import is_valid_ip, is_valid_ipv4, is_valid_ipv6, parse_endpoint


class TestParseEndpoint:
    """Tests for parse_endpoint function."""

    @pytest.mark.parametrize(
        "target,expected",
        [
            ("8.8.8.8", ("8.8.8.8", 80)),
            ("8.8.8.8:53", ("8.8.8.8", 53)),
            ("dns.google", ("dns.google", 80)),
            ("dns.google:443", ("dns.google", 443)),
            ("2001:4860:4860::8888", ("2001:4860:4860::8888", 80)),
            ("[2001:4860:4860::8888]:53", ("2001:4860:4860::8888", 53)),
            ("[::1]", ("::1", 80)),
            ("  1.1.1.1  ", ("1.1.1.1", 80)),
        ],
    )
    def test_valid_targets(self, target, expected):
        """Test accepted endpoint forms."""
        assert parse_endpoint(target, 80) == expected

    @pytest.mark.parametrize(
        "target",
        ["", "   ", "host:", ":80", "host:http", "host:0", "host:70000", "[]:53"],
    )
    def test_invalid_targets(self, target):
        """Test malformed endpoints raise ValueError."""
        with pytest.raises(ValueError):
            parse_endpoint(target, 80)


class TestIsValidIpv4:
    """Tests for is_valid_ipv4 function."""

    def test_valid(self):
        assert is_valid_ipv4("203.0.113.5") is True

    def test_invalid(self):
        assert is_valid_ipv4("256.1.1.1") is False
        assert is_valid_ipv4("2001:db8::1") is False
        assert is_valid_ipv4(None) is False


class TestIsValidIpv6:
    """Tests for is_valid_ipv6 function."""

    def test_valid(self):
        assert is_valid_ipv6("2001:db8::1") is True

    def test_zone_identifier_stripped(self):
        """Test link-local with zone identifier."""
        assert is_valid_ipv6("fe80::1%eth0") is True

    def test_invalid(self):
        assert is_valid_ipv6("203.0.113.5") is False
        assert is_valid_ipv6("") is False


class TestIsValidIp:
    """Tests for is_valid_ip function."""

    def test_either_family(self):
        assert is_valid_ip("203.0.113.5") is True
        assert is_valid_ip("2001:db8::1") is True

    def test_html_body(self):
        """Test error pages are not mistaken for addresses."""
        assert is_valid_ip("<html>") is False
