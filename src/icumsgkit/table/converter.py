"""Flat translation table export and import.

Entries are flattened to rows with placeholders protected, written as TSV,
CSV or an HTML table, and read back with placeholders restored from the
placeholder maps captured at export time.

Column layout:
    Key, Namespace, Category, Source, Context, Comment, <culture>..., MaxLength

Delimited output quotes a field only when it contains the delimiter, a
double quote or a line break; embedded quotes are doubled (RFC 4180).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import csv
import html
import io
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from icumsgkit.constants import (
    COLUMN_KEY,
    COLUMN_MAX_LENGTH,
    COLUMN_NAMESPACE,
    FIXED_COLUMNS,
    LEADING_COLUMNS,
    PLACEHOLDER_MAP_SUFFIX,
)
from icumsgkit.diagnostics import ErrorTemplate, TableFormatError
from icumsgkit.enums import TableFormat
from icumsgkit.protection import PlaceholderProtector, restore_placeholders

from .placeholder_maps import PlaceholderMapStore
from .rows import FlatTableRow, ImportedTranslation, TableEntry

__all__ = [
    "TableConverter",
    "TableExport",
    "export_to_file",
    "import_from_file",
    "map_path_for",
]

logger = logging.getLogger(__name__)

_HTML_HEAD = """\
<html>
<head>
<meta charset='utf-8'>
<style>
table { border-collapse: collapse; }
td, th { border: 1px solid #ccc; padding: 8px; text-align: left; }
th { background-color: #f0f0f0; font-weight: bold; }
</style>
</head>
<body>
<table>
"""

_HTML_TAIL = """\
</table>
</body>
</html>
"""


@dataclass(frozen=True, slots=True)
class TableExport:
    """Rendered table plus the placeholder maps needed to import it back."""

    content: str
    placeholder_maps: PlaceholderMapStore
    row_count: int


def _header(cultures: Sequence[str]) -> list[str]:
    """Column names for the given cultures."""
    return [*LEADING_COLUMNS, *cultures, COLUMN_MAX_LENGTH]


class TableConverter:
    """Converts entries to flat tables and translated tables back to text.

    Example:
        >>> converter = TableConverter()
        >>> entry = TableEntry("ui", "greeting", "Hello, {name}!")
        >>> export = converter.export_tsv([entry], ["zh-CN"])
        >>> export.content.splitlines()[1]
        'greeting\\tui\\tGeneral\\tHello, {0}!\\t\\t\\t\\t'
    """

    __slots__ = ("_protector",)

    def __init__(self, protector: PlaceholderProtector | None = None) -> None:
        """Initialize converter.

        Args:
            protector: Placeholder protector (default: default kind registry)
        """
        self._protector = protector if protector is not None else PlaceholderProtector()

    @property
    def protector(self) -> PlaceholderProtector:
        """Protector used for export."""
        return self._protector

    def flatten(
        self,
        entries: Iterable[TableEntry],
        cultures: Sequence[str],
        *,
        protect: bool = True,
    ) -> tuple[list[FlatTableRow], PlaceholderMapStore]:
        """Flatten entries to rows, protecting placeholders.

        A placeholder map is recorded for every source text and for every
        non-empty translation. Empty translations stay empty.

        Args:
            entries: Entries to export
            cultures: Culture columns, in order
            protect: Replace placeholders with {0}, {1}, ... (default: True)

        Returns:
            Tuple of (rows, placeholder_maps)
        """
        rows: list[FlatTableRow] = []
        maps = PlaceholderMapStore()
        for entry in entries:
            source = entry.source
            if protect:
                protected = self._protector.protect(source)
                source = protected.replaced
                maps.set(maps.map_key(entry.namespace, entry.key), protected.placeholder_map)

            translations: dict[str, str] = {}
            for culture in cultures:
                translation = entry.translations.get(culture, "")
                if protect and translation:
                    protected = self._protector.protect(translation)
                    translation = protected.replaced
                    maps.set(
                        maps.map_key(entry.namespace, entry.key, culture),
                        protected.placeholder_map,
                    )
                translations[culture] = translation

            rows.append(
                FlatTableRow(
                    key=entry.key,
                    namespace=entry.namespace,
                    category=entry.category,
                    source=source,
                    context=entry.context,
                    comment=entry.comment,
                    translations=translations,
                    max_length=entry.max_length,
                )
            )
        return rows, maps

    def export_delimited(
        self,
        entries: Iterable[TableEntry],
        cultures: Sequence[str],
        delimiter: str = "\t",
    ) -> TableExport:
        """Export entries as delimiter-separated text with a header row."""
        rows, maps = self.flatten(entries, cultures)
        buffer = io.StringIO()
        writer = csv.writer(
            buffer, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL, lineterminator="\n"
        )
        writer.writerow(_header(cultures))
        for row in rows:
            writer.writerow(row.cells(cultures))
        return TableExport(content=buffer.getvalue(), placeholder_maps=maps, row_count=len(rows))

    def export_tsv(self, entries: Iterable[TableEntry], cultures: Sequence[str]) -> TableExport:
        """Export entries as tab-separated text."""
        return self.export_delimited(entries, cultures, "\t")

    def export_csv(self, entries: Iterable[TableEntry], cultures: Sequence[str]) -> TableExport:
        """Export entries as comma-separated text (spreadsheet friendly)."""
        return self.export_delimited(entries, cultures, ",")

    def export_html(self, entries: Iterable[TableEntry], cultures: Sequence[str]) -> TableExport:
        """Export entries as an HTML table that spreadsheet applications open."""
        rows, maps = self.flatten(entries, cultures)
        lines = [_HTML_HEAD, "<tr>\n"]
        lines.extend(f"<th>{html.escape(column)}</th>\n" for column in _header(cultures))
        lines.append("</tr>\n")
        for row in rows:
            lines.append("<tr>\n")
            lines.extend(f"<td>{html.escape(cell)}</td>\n" for cell in row.cells(cultures))
            lines.append("</tr>\n")
        lines.append(_HTML_TAIL)
        return TableExport(content="".join(lines), placeholder_maps=maps, row_count=len(rows))

    def export(
        self,
        entries: Iterable[TableEntry],
        cultures: Sequence[str],
        table_format: TableFormat = TableFormat.TSV,
    ) -> TableExport:
        """Export entries in table_format."""
        match TableFormat(table_format):
            case TableFormat.CSV:
                return self.export_csv(entries, cultures)
            case TableFormat.HTML:
                return self.export_html(entries, cultures)
            case _:
                return self.export_tsv(entries, cultures)

    def import_delimited(
        self,
        text: str,
        *,
        delimiter: str = "\t",
        placeholder_maps: PlaceholderMapStore | None = None,
        target_cultures: Sequence[str] | None = None,
    ) -> tuple[ImportedTranslation, ...]:
        """Read translations from a delimited table.

        Every column that is not a fixed column is a culture column. Rows
        shorter than the header and empty cells are skipped. Placeholders
        are restored when a matching map is available.

        Args:
            text: Table content including the header row
            delimiter: Field delimiter (default: tab)
            placeholder_maps: Maps captured at export time
            target_cultures: Cultures to import (default: all culture columns)

        Returns:
            Imported translations in table order

        Raises:
            TableFormatError: Header lacks the Key or Namespace column
        """
        records = [record for record in csv.reader(io.StringIO(text), delimiter=delimiter) if record]
        if len(records) < 2:
            return ()

        columns = [name.strip() for name in records[0]]
        for required in (COLUMN_KEY, COLUMN_NAMESPACE):
            if required not in columns:
                raise TableFormatError(ErrorTemplate.table_header_invalid(required))
        key_index = columns.index(COLUMN_KEY)
        namespace_index = columns.index(COLUMN_NAMESPACE)
        culture_columns = {
            name: index for index, name in enumerate(columns) if name not in FIXED_COLUMNS
        }
        cultures = list(culture_columns) if target_cultures is None else list(target_cultures)

        imported: list[ImportedTranslation] = []
        for record in records[1:]:
            if len(record) < len(columns):
                logger.debug("Skipping short table row: %r", record)
                continue
            key = record[key_index]
            namespace = record[namespace_index]
            for culture in cultures:
                index = culture_columns.get(culture)
                if index is None or not record[index]:
                    continue
                translated = record[index]
                if placeholder_maps is not None:
                    placeholder_map = placeholder_maps.lookup(namespace, key, culture)
                    if placeholder_map:
                        translated = restore_placeholders(translated, placeholder_map)
                imported.append(ImportedTranslation(namespace, key, culture, translated))

        logger.info(
            "Imported %d translation(s) from %d row(s)", len(imported), len(records) - 1
        )
        return tuple(imported)


def map_path_for(table_path: str | Path) -> Path:
    """Placeholder map file beside a table: strings.tsv -> strings.map.json."""
    return Path(table_path).with_suffix(PLACEHOLDER_MAP_SUFFIX)


def export_to_file(
    entries: Iterable[TableEntry],
    path: str | Path,
    cultures: Sequence[str],
    table_format: TableFormat = TableFormat.TSV,
    *,
    converter: TableConverter | None = None,
) -> TableExport:
    """Write a table to path and its placeholder maps beside it.

    Raises:
        OSError: Either file cannot be written
    """
    converter = converter if converter is not None else TableConverter()
    path = Path(path)
    export = converter.export(entries, cultures, table_format)
    path.write_text(export.content, encoding="utf-8")
    export.placeholder_maps.save(map_path_for(path))
    logger.info("Exported %d row(s) as %s to %s", export.row_count, table_format, path)
    return export


def import_from_file(
    path: str | Path,
    target_cultures: Sequence[str] | None = None,
    *,
    converter: TableConverter | None = None,
) -> tuple[ImportedTranslation, ...]:
    """Read translations from a table file.

    The delimiter follows the suffix: ".csv" is comma separated, anything
    else tab separated. Placeholder maps are loaded from the map file
    beside the table when it exists.

    Raises:
        OSError: Table cannot be read
        PlaceholderMapError: Map file content has the wrong shape
        TableFormatError: Table header lacks required columns
    """
    converter = converter if converter is not None else TableConverter()
    path = Path(path)
    map_path = map_path_for(path)
    placeholder_maps = PlaceholderMapStore.load(map_path) if map_path.exists() else None
    delimiter = "," if path.suffix.lower() == TableFormat.CSV.extension else "\t"
    return converter.import_delimited(
        path.read_text(encoding="utf-8"),
        delimiter=delimiter,
        placeholder_maps=placeholder_maps,
        target_cultures=target_cultures,
    )
