"""Tests for domain/invite.py."""

from mention_kit.domain.invite import parse_invite


class TestParseInvite:
    def test_https(self):
        assert parse_invite("https://discord.gg/abc") == "abc"

    def test_http(self):
        assert parse_invite("http://discord.gg/abc") == "abc"

    def test_no_scheme(self):
        assert parse_invite("discord.gg/abc") == "abc"

    def test_bare_code(self):
        assert parse_invite("abc") == "abc"

    def test_empty(self):
        assert parse_invite("") == ""

    def test_takes_last_segment(self):
        assert parse_invite("https://discord.com/invite/xyz") == "xyz"

    def test_trailing_slash(self):
        assert parse_invite("discord.gg/") == ""

    def test_query_kept(self):
        assert parse_invite("https://discord.gg/abc?event=1") == "abc?event=1"
