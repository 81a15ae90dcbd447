"""Placeholder protection and restoration for translation round trips.

Python 3.13+.
"""

from .kinds import (
    PlaceholderKind,
    PlaceholderKindRegistry,
    create_default_kind_registry,
    get_shared_kind_registry,
)
from .protector import (
    PlaceholderProtector,
    ReplacementEntry,
    protect_placeholders,
    restore_placeholders,
)

__all__ = [
    "PlaceholderKind",
    "PlaceholderKindRegistry",
    "PlaceholderProtector",
    "ReplacementEntry",
    "create_default_kind_registry",
    "get_shared_kind_registry",
    "protect_placeholders",
    "restore_placeholders",
]
