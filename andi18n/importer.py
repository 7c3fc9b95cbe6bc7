#!/usr/bin/env python3
"""
Spreadsheet -> strings.xml import pipeline.

The first row of the sheet is the header: its first cell labels the key
column, every following non-blank cell is a locale code. Each later row
holds one key and one translation per locale column:

    key         | en        | fr
    greeting    | hi        | salut
    apples:one  | 1 apple   | 1 pomme
    apples:other| # apples  | # pommes

The whole sheet is turned into resource trees before anything is written,
so a malformed row aborts the import without touching the resource files.
"""

import logging
from pathlib import Path
from typing import Union

from .builder import ResourceTreeBuilder
from .errors import ValidationError
from .model import ResourceTree
from .resources import ResourceWriter
from .rules import RULES, ImportRules
from .tabular import SourceRegistry, TabularSource

logger = logging.getLogger(__name__)

# Column holding the translation keys
KEY_COLUMN = 0


def _locale_columns(header: list[str]) -> list[tuple[int, str]]:
    """Map header cells to (column index, locale), skipping blank headers."""
    columns = []
    seen = set()
    for col, cell in enumerate(header):
        if col == KEY_COLUMN:
            continue
        locale = cell.strip()
        if not locale:
            logger.debug("Skipping column %d with blank header", col + 1)
            continue
        if locale in seen:
            raise ValidationError(f"Duplicate locale column '{locale}' in header", locale=locale)
        seen.add(locale)
        columns.append((col, locale))
    return columns


def import_from(
    source: Union[str, Path, TabularSource, None],
    default_locale: str,
    rules: ImportRules = RULES,
) -> dict[str, ResourceTree]:
    """
    Read a translation spreadsheet into one resource tree per locale.

    Args:
        source: Spreadsheet path, or an already opened TabularSource
        default_locale: Locale written to the unsuffixed `values/` directory
        rules: Conversion constants

    Returns:
        Mapping locale -> ResourceTree, in header column order

    Raises:
        NotFoundError: If the source path is missing or blank
        UnsupportedFormatError: If the source is not a supported spreadsheet
        ValidationError: On the first malformed row, with row/locale context
    """
    if not isinstance(source, TabularSource):
        source = SourceRegistry.open(source)
    logger.info("Importing translations from %s (default locale: %s)", source.path, default_locale)

    rows = source.rows()
    header = next(rows, None)
    if header is None:
        raise ValidationError(f"Spreadsheet {source.path.name} is empty")

    columns = _locale_columns(header)
    if not columns:
        raise ValidationError(f"Spreadsheet {source.path.name} has no locale columns")

    builder = ResourceTreeBuilder(default_locale, rules)
    for _, locale in columns:
        builder.tree(locale)

    # Header is spreadsheet row 1
    for row_number, row in enumerate(rows, start=2):
        if not any(cell.strip() for cell in row):
            continue
        key = row[KEY_COLUMN] if len(row) > KEY_COLUMN else ""

        for col, locale in columns:
            value = row[col] if col < len(row) else ""
            if not value.strip():
                continue
            try:
                builder.add(locale, key, value)
            except ValidationError as e:
                raise e.with_context(row_number, locale) from e

    trees = builder.build()
    for tree in trees.values():
        logger.debug(
            "Locale '%s': %d strings, %d plural groups",
            tree.locale, len(tree.strings), len(tree.plurals),
        )
    return trees


def import_resources(
    source: Union[str, Path, None],
    default_locale: str,
    project_dir: Union[str, Path],
    rules: ImportRules = RULES,
) -> list[Path]:
    """
    Import a spreadsheet and write every locale's strings.xml.

    Returns:
        Written file paths, one per locale
    """
    trees = import_from(source, default_locale, rules)
    writer = ResourceWriter(project_dir, rules)
    return writer.write_all(trees)


def summarize(trees: dict[str, ResourceTree]) -> dict:
    """Per-locale counts for CLI reporting."""
    return {
        locale: {
            "strings": len(tree.strings),
            "plurals": len(tree.plurals),
            "default": tree.is_default_locale,
        }
        for locale, tree in trees.items()
    }
