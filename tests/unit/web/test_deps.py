"""Tests for Authorization header parsing used by the Basic gate."""

import base64

from gatekeeper.web.deps import parse_basic_authorization


def encode(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode()


class TestParseBasicAuthorization:
    def test_valid_pair(self):
        assert parse_basic_authorization(encode(b"admin:12345")) == ("admin", "12345")

    def test_missing_header(self):
        assert parse_basic_authorization(None) is None
        assert parse_basic_authorization("") is None

    def test_other_scheme(self):
        assert parse_basic_authorization("Bearer abc") is None

    def test_no_separator(self):
        assert parse_basic_authorization(encode(b"admin")) is None

    def test_bad_base64(self):
        assert parse_basic_authorization("Basic ###") is None

    def test_non_utf8_payload(self):
        assert parse_basic_authorization(encode(b"\xc3\x28:x")) is None

    def test_utf8_pair(self):
        """Test that non-ASCII credentials decode as UTF-8."""
        assert parse_basic_authorization(encode("jürgen:pässword".encode())) == ("jürgen", "pässword")

    def test_empty_fields(self):
        assert parse_basic_authorization(encode(b":")) == ("", "")

    def test_split_on_first_colon(self):
        assert parse_basic_authorization(encode(b"admin:a:b")) == ("admin", "a:b")
