"""Tests for the top-level package namespace."""

from __future__ import annotations

import icumsgkit


class TestPublicApi:
    """Exports and version."""

    def test_all_names_resolve(self) -> None:
        for name in icumsgkit.__all__:
            assert hasattr(icumsgkit, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(icumsgkit.__version__, str)
        assert icumsgkit.__version__

    def test_end_to_end(self) -> None:
        pattern = "Hello, {name}! You have {count, plural, one{# item} other{# items}}."
        entry = icumsgkit.protect_placeholders(pattern)
        restored = icumsgkit.restore_placeholders("{0}: {1}", entry.placeholder_map)

        assert icumsgkit.format_message(restored, {"name": "Ana", "count": 1}) == "Ana: 1 item"
