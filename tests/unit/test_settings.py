"""Tests for renderer configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sqlaqt.settings import DEFAULT_BINOP_MAPPING, DEFAULT_PRIORITIES, RenderSettings


class TestDefaults:
    def test_defaults(self) -> None:
        s = RenderSettings(_env_file=None)
        assert s.quote_identifiers is False
        assert s.quote_chars == ('"', '"')
        assert s.name_separator == "."
        assert s.list_separator == ", "
        assert s.placeholder == "?"
        assert s.priorities == DEFAULT_PRIORITIES
        assert s.binop_mapping == DEFAULT_BINOP_MAPPING

    def test_or_binds_looser_than_and(self) -> None:
        assert DEFAULT_PRIORITIES["or"] > DEFAULT_PRIORITIES["and"]


class TestValidation:
    def test_single_quote_char_expanded(self) -> None:
        assert RenderSettings(quote_chars="`", _env_file=None).quote_chars == ("`", "`")

    def test_one_item_pair_expanded(self) -> None:
        assert RenderSettings(quote_chars=["`"], _env_file=None).quote_chars == ("`", "`")

    def test_asymmetric_pair(self) -> None:
        assert RenderSettings(quote_chars=("[", "]"), _env_file=None).quote_chars == ("[", "]")

    def test_priorities_require_and_or(self) -> None:
        with pytest.raises(ValidationError, match="missing"):
            RenderSettings(priorities={"and": 1}, _env_file=None)

    def test_frozen(self) -> None:
        s = RenderSettings(_env_file=None)
        with pytest.raises(ValidationError):
            s.placeholder = "%s"  # type: ignore[misc]


class TestEnvironment:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SQLAQT_QUOTE_IDENTIFIERS", "true")
        monkeypatch.setenv("SQLAQT_QUOTE_CHARS", '["[", "]"]')
        monkeypatch.setenv("SQLAQT_PLACEHOLDER", "%s")
        s = RenderSettings(_env_file=None)
        assert s.quote_identifiers is True
        assert s.quote_chars == ("[", "]")
        assert s.placeholder == "%s"

    def test_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SQLAQT_PLACEHOLDER", "%s")
        assert RenderSettings(placeholder="$1", _env_file=None).placeholder == "$1"
