"""Tests for URL and key=value parsing and command construction."""

from __future__ import annotations

import httpx
import pytest

from reqli.arguments import (
    build_get_command,
    build_post_command,
    parse_kv_pair,
    parse_url,
)
from reqli.exceptions import InvalidKeyValueError, InvalidUrlError, InvalidUsageError
from reqli.exit_codes import EXIT_INVALID_USAGE
from reqli.models import GetCommand, KeyValue, PostCommand


# ---------------------------------------------------------------------------
# parse_url
# ---------------------------------------------------------------------------


class TestParseUrl:
    @pytest.mark.parametrize(
        "value",
        ["http://abc.xyz", "https://httpbin.org/post", "http://localhost:8080/a?b=c"],
    )
    def test_absolute_urls_are_accepted(self, value: str) -> None:
        result = parse_url(value)
        assert httpx.URL(result) == httpx.URL(value)

    def test_host_is_preserved(self) -> None:
        assert httpx.URL(parse_url("https://httpbin.org/post")).host == "httpbin.org"

    @pytest.mark.parametrize("value", ["url", "not-a-url", "/just/a/path", "abc.xyz"])
    def test_missing_scheme_is_rejected(self, value: str) -> None:
        with pytest.raises(InvalidUrlError):
            parse_url(value)

    def test_missing_host_is_rejected(self) -> None:
        with pytest.raises(InvalidUrlError):
            parse_url("http://")

    def test_malformed_url_is_rejected(self) -> None:
        with pytest.raises(InvalidUrlError):
            parse_url("http://abc.xyz:notaport")

    def test_error_names_the_url(self) -> None:
        with pytest.raises(InvalidUrlError, match="not-a-url"):
            parse_url("not-a-url")

    def test_invalid_url_is_a_usage_error(self) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            parse_url("url")
        assert exc_info.value.exit_code == EXIT_INVALID_USAGE


# ---------------------------------------------------------------------------
# parse_kv_pair
# ---------------------------------------------------------------------------


class TestParseKvPair:
    def test_simple_pair(self) -> None:
        assert parse_kv_pair("a=1") == KeyValue(key="a", value="1")

    def test_empty_value_is_allowed(self) -> None:
        assert parse_kv_pair("b=") == KeyValue(key="b", value="")

    def test_splits_at_first_equals_sign(self) -> None:
        assert parse_kv_pair("q=a=b") == KeyValue(key="q", value="a=b")

    def test_missing_separator_is_rejected(self) -> None:
        with pytest.raises(InvalidKeyValueError, match="'a'"):
            parse_kv_pair("a")

    def test_empty_key_is_rejected(self) -> None:
        with pytest.raises(InvalidKeyValueError, match="empty key"):
            parse_kv_pair("=value")

    def test_empty_token_is_rejected(self) -> None:
        with pytest.raises(InvalidKeyValueError):
            parse_kv_pair("")

    def test_invalid_pair_exit_code(self) -> None:
        with pytest.raises(InvalidKeyValueError) as exc_info:
            parse_kv_pair("nope")
        assert exc_info.value.exit_code == EXIT_INVALID_USAGE


# ---------------------------------------------------------------------------
# Command construction
# ---------------------------------------------------------------------------


class TestBuildCommands:
    def test_get_command(self) -> None:
        command = build_get_command("http://abc.xyz")
        assert isinstance(command, GetCommand)
        assert command.method == "GET"
        assert httpx.URL(command.url).host == "abc.xyz"

    def test_get_command_rejects_bad_url(self) -> None:
        with pytest.raises(InvalidUrlError):
            build_get_command("not-a-url")

    def test_post_command_keeps_order_and_duplicates(self) -> None:
        command = build_post_command("https://httpbin.org/post", ["a=1", "b=2", "a=3"])
        assert isinstance(command, PostCommand)
        assert [p.key for p in command.pairs] == ["a", "b", "a"]
        assert [p.value for p in command.pairs] == ["1", "2", "3"]

    def test_post_command_without_pairs(self) -> None:
        command = build_post_command("https://httpbin.org/post")
        assert command.pairs == ()
        assert command.json_body() == {}

    def test_post_command_rejects_bad_pair(self) -> None:
        with pytest.raises(InvalidKeyValueError):
            build_post_command("https://httpbin.org/post", ["foo=bar", "oops"])

    def test_post_command_reports_bad_url_first(self) -> None:
        with pytest.raises(InvalidUrlError):
            build_post_command("nope", ["oops"])
