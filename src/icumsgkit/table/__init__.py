"""Flat translation tables (TSV, CSV, HTML) with placeholder protection.

Python 3.13+. Zero external dependencies.
"""

from .converter import TableConverter, TableExport, export_to_file, import_from_file, map_path_for
from .placeholder_maps import PlaceholderMapStore
from .rows import FlatTableRow, ImportedTranslation, TableEntry

__all__ = [
    "FlatTableRow",
    "ImportedTranslation",
    "PlaceholderMapStore",
    "TableConverter",
    "TableEntry",
    "TableExport",
    "export_to_file",
    "import_from_file",
    "map_path_for",
]
