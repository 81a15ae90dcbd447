"""Tests for protection/kinds.py - placeholder kinds and their registry."""

from __future__ import annotations

import re

import pytest

from icumsgkit.protection.kinds import (
    PlaceholderKind,
    PlaceholderKindRegistry,
    create_default_kind_registry,
    get_shared_kind_registry,
)
from icumsgkit.syntax import BraceIndex

DEFAULT_ORDER = [
    "ICU_Plural",
    "ICU_Select",
    "ICU_Ordinal",
    "ICU_Date",
    "ICU_Time",
    "ICU_Number",
    "Indexed",
    "Named",
]


class TestPlaceholderKind:
    """Single kinds."""

    def test_from_regex_full_match(self) -> None:
        kind = PlaceholderKind.from_regex("Printf", r"\{%[sd]\}")

        assert kind.matches("{%s}")
        assert not kind.matches("{%s} ")
        assert not kind.icu

    def test_from_compiled_regex(self) -> None:
        kind = PlaceholderKind.from_regex("Digits", re.compile(r"\{\d+\}"), icu=True)

        assert kind.matches("{12}")
        assert kind.icu

    @pytest.mark.parametrize(
        ("name", "source"),
        [
            ("ICU_Plural", "{n, plural, one{x} other{y}}"),
            ("ICU_Select", "{g, select, other{y}}"),
            ("ICU_Ordinal", "{n, selectordinal, other{#th}}"),
            ("ICU_Date", "{d, date}"),
            ("ICU_Time", "{t, time, short}"),
            ("ICU_Number", "{p, number, percent}"),
            ("Indexed", "{3}"),
            ("Named", "{player_name}"),
        ],
    )
    def test_default_kind_matches(self, name: str, source: str) -> None:
        registry = create_default_kind_registry()
        kind = registry.get(name)

        assert kind is not None
        assert kind.matches(source)
        assert registry.match(source) is kind

    def test_construct_kind_rejects_other_keyword(self) -> None:
        kind = get_shared_kind_registry().get("ICU_Plural")

        assert kind is not None
        assert not kind.matches("{g, select, other{y}}")

    def test_malformed_construct_matches_nothing(self) -> None:
        assert get_shared_kind_registry().match("{n, plural, one{x} junk}") is None

    def test_named_rejects_leading_digit(self) -> None:
        registry = get_shared_kind_registry()

        assert registry.match("{1abc}") is None

    def test_matches_at_tests_group_in_place(self) -> None:
        text = "Hi {name}, {n, plural, other{#}}!"
        index = BraceIndex(text)
        registry = get_shared_kind_registry()

        named = registry.match_at(index, 3, 9)
        plural = registry.match_at(index, 11, len(text) - 1)

        assert named is not None and named.name == "Named"
        assert plural is not None and plural.name == "ICU_Plural"

    def test_regex_kind_ignores_text_around_group(self) -> None:
        kind = PlaceholderKind.from_regex("Printf", r"\{%[sd]\}")
        index = BraceIndex("x{%s}y")

        assert kind.matches_at(index, 1, 5)
        assert not kind.matches_at(index, 0, 6)

    def test_group_parsed_once_for_all_icu_kinds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[int, int]] = []
        parse = BraceIndex._parse_layout

        def counting(self: BraceIndex, start: int, end: int) -> object:
            calls.append((start, end))
            return parse(self, start, end)

        monkeypatch.setattr(BraceIndex, "_parse_layout", counting)
        source = "{p, number, percent}"

        kind = get_shared_kind_registry().match(source)

        assert kind is not None and kind.name == "ICU_Number"
        assert calls == [(0, len(source))]


class TestPlaceholderKindRegistry:
    """Ordering, freezing and copying."""

    def test_default_order(self) -> None:
        assert [kind.name for kind in create_default_kind_registry()] == DEFAULT_ORDER

    def test_icu_kinds_iterate_first(self) -> None:
        registry = PlaceholderKindRegistry()
        registry.register(PlaceholderKind.from_regex("Simple", r"\{x\}"))
        registry.register(PlaceholderKind.from_regex("Complex", r"\{y\}", icu=True))

        assert [kind.name for kind in registry] == ["Complex", "Simple"]

    def test_register_same_name_replaces_in_place(self) -> None:
        registry = create_default_kind_registry()
        replacement = PlaceholderKind.from_regex("Indexed", r"\{\d\}")
        registry.register(replacement)

        assert [kind.name for kind in registry] == DEFAULT_ORDER
        assert registry.get("Indexed") is replacement
        assert len(registry) == len(DEFAULT_ORDER)

    def test_shared_is_frozen_singleton(self) -> None:
        shared = get_shared_kind_registry()

        assert shared is get_shared_kind_registry()
        assert shared.frozen
        with pytest.raises(TypeError):
            shared.register(PlaceholderKind.from_regex("X", r"\{x\}"))

    def test_copy_is_unfrozen_and_independent(self) -> None:
        shared = get_shared_kind_registry()
        custom = shared.copy()
        custom.register(PlaceholderKind.from_regex("Extra", r"\{x\}"))

        assert not custom.frozen
        assert "Extra" in custom
        assert "Extra" not in shared

    def test_freeze(self) -> None:
        registry = PlaceholderKindRegistry()
        registry.freeze()

        with pytest.raises(TypeError):
            registry.register(PlaceholderKind.from_regex("X", r"\{x\}"))

    def test_empty_registry_matches_nothing(self) -> None:
        assert PlaceholderKindRegistry().match("{name}") is None

    def test_repr(self) -> None:
        assert repr(PlaceholderKindRegistry()) == "PlaceholderKindRegistry(kinds=0)"
        assert repr(get_shared_kind_registry()) == "PlaceholderKindRegistry(kinds=8, frozen)"
