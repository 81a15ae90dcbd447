"""Tests for locale_utils.py - locale normalization and Babel lookup."""

from __future__ import annotations

import logging

import pytest
from babel import UnknownLocaleError

from icumsgkit.locale_utils import get_babel_locale, normalize_locale, resolve_babel_locale


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en-US", "en_US"), ("zh_CN", "zh_CN"), ("pt-BR", "pt_BR"), (" de ", "de")],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestGetBabelLocale:
    """Strict lookup."""

    def test_bcp47_code(self) -> None:
        locale = get_babel_locale("zh-CN")

        assert locale.language == "zh"
        assert locale.territory == "CN"

    def test_cached(self) -> None:
        assert get_babel_locale("fr_FR") is get_babel_locale("fr_FR")

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_UNKNOWNREGION")


class TestResolveBabelLocale:
    """Lookup with fallback."""

    def test_known(self) -> None:
        assert resolve_babel_locale("de-DE").language == "de"

    def test_unknown_falls_back_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        resolve_babel_locale.cache_clear()

        with caplog.at_level(logging.WARNING, logger="icumsgkit.locale_utils"):
            locale = resolve_babel_locale("xx_INVALID")

        assert str(locale) == "en_US"
        assert "Falling back to en_US" in caplog.text

    def test_malformed_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        resolve_babel_locale.cache_clear()

        with caplog.at_level(logging.WARNING, logger="icumsgkit.locale_utils"):
            locale = resolve_babel_locale("!!")

        assert str(locale) == "en_US"
        assert caplog.records
