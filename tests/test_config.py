"""Tests for configuration parsing helpers."""

import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import DEFAULT_TIMEOUT, _build_base_url, _parse_log_level, _parse_timeout


class TestParseTimeout:
    @pytest.mark.parametrize(("raw", "expected"), [("30", 30), (" 5 ", 5), (None, DEFAULT_TIMEOUT), ("", DEFAULT_TIMEOUT)])
    def test_values(self, raw, expected: int) -> None:
        assert _parse_timeout(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_falls_back(self, raw: str) -> None:
        assert _parse_timeout(raw) == DEFAULT_TIMEOUT


class TestParseLogLevel:
    def test_names(self) -> None:
        assert _parse_log_level("debug") == logging.DEBUG
        assert _parse_log_level("WARNING") == logging.WARNING

    def test_unknown_and_missing(self) -> None:
        assert _parse_log_level("loud") == logging.INFO
        assert _parse_log_level(None) == logging.INFO


class TestBuildBaseUrl:
    def test_with_token(self) -> None:
        assert _build_base_url("https://api.telegram.org/", "123:ABC") == "https://api.telegram.org/bot123:ABC"

    def test_without_token(self) -> None:
        assert _build_base_url("http://localhost:8081", None) == "http://localhost:8081/bot"
