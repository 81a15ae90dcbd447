"""Persisted placeholder maps.

The map file is the only durable artifact of a table export. It is a JSON
object keyed by "<namespace>:<key>:<culture-or-'source'>", each value the
placeholder map protect() produced for that text:

    {
      "ui:greeting:source": {"{0}": "{name}"},
      "ui:greeting:zh-CN": {"{0}": "{name}"}
    }

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from icumsgkit.constants import SOURCE_CULTURE
from icumsgkit.diagnostics import ErrorTemplate, PlaceholderMapError

__all__ = ["PlaceholderMapStore"]

logger = logging.getLogger(__name__)


class PlaceholderMapStore:
    """Placeholder maps keyed by "<namespace>:<key>:<culture>".

    Maps are copied in by set() and handed out as read-only views, so the
    store only changes through set().

    Example:
        >>> store = PlaceholderMapStore()
        >>> store.set(PlaceholderMapStore.map_key("ui", "greeting"), {"{0}": "{name}"})
        >>> dict(store.lookup("ui", "greeting", "fr"))
        {'{0}': '{name}'}
    """

    __slots__ = ("_maps",)

    def __init__(self, maps: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Initialize store, copying maps when given."""
        self._maps: dict[str, dict[str, str]] = {}
        for map_key, placeholder_map in (maps or {}).items():
            self.set(map_key, placeholder_map)

    @staticmethod
    def map_key(namespace: str, key: str, culture: str | None = None) -> str:
        """Build the composite key; culture None addresses the source text."""
        return f"{namespace}:{key}:{culture or SOURCE_CULTURE}"

    def set(self, map_key: str, placeholder_map: Mapping[str, str]) -> None:
        """Store a copy of placeholder_map under map_key."""
        self._maps[map_key] = dict(placeholder_map)

    def get(self, map_key: str) -> Mapping[str, str] | None:
        """Return a read-only view of the map stored under map_key, or None."""
        placeholder_map = self._maps.get(map_key)
        return None if placeholder_map is None else MappingProxyType(placeholder_map)

    def lookup(self, namespace: str, key: str, culture: str) -> Mapping[str, str] | None:
        """Map for restoring a translation into culture.

        The culture's own map wins when it is non-empty; otherwise the
        source map is used, since translators start from the protected
        source text when a culture had no translation at export time.
        """
        culture_map = self.get(self.map_key(namespace, key, culture))
        if culture_map:
            return culture_map
        return self.get(self.map_key(namespace, key))

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON (UTF-8 text, non-ASCII kept as is)."""
        return json.dumps(self._maps, ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> PlaceholderMapStore:
        """Parse JSON produced by to_json().

        Raises:
            PlaceholderMapError: Not valid JSON or not an object of string maps
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PlaceholderMapError(ErrorTemplate.placeholder_map_invalid(str(e))) from e
        if not isinstance(data, dict):
            reason = f"top level is {type(data).__name__}, expected object"
            raise PlaceholderMapError(ErrorTemplate.placeholder_map_invalid(reason))
        for map_key, placeholder_map in data.items():
            if not isinstance(placeholder_map, dict) or not all(
                isinstance(value, str) for value in placeholder_map.values()
            ):
                reason = f"entry {map_key!r} is not an object of strings"
                raise PlaceholderMapError(ErrorTemplate.placeholder_map_invalid(reason))
        return cls(data)

    def save(self, path: str | Path) -> Path:
        """Write the store to path as UTF-8 JSON.

        Raises:
            OSError: File cannot be written
        """
        path = Path(path)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info("Saved %d placeholder map(s) to %s", len(self), path)
        return path

    @classmethod
    def load(cls, path: str | Path) -> PlaceholderMapStore:
        """Read a store written by save().

        Raises:
            OSError: File cannot be read
            PlaceholderMapError: File content has the wrong shape
        """
        path = Path(path)
        store = cls.from_json(path.read_text(encoding="utf-8"))
        logger.info("Loaded %d placeholder map(s) from %s", len(store), path)
        return store

    def __iter__(self) -> Iterator[str]:
        return iter(self._maps)

    def __len__(self) -> int:
        return len(self._maps)

    def __contains__(self, map_key: object) -> bool:
        return map_key in self._maps

    def __getitem__(self, map_key: str) -> Mapping[str, str]:
        return MappingProxyType(self._maps[map_key])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaceholderMapStore):
            return NotImplemented
        return self._maps == other._maps

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PlaceholderMapStore(maps={len(self._maps)})"
