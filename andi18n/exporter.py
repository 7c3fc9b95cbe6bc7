#!/usr/bin/env python3
"""
strings.xml -> spreadsheet export pipeline.

The inverse of the import: every `values[-<locale>]/strings.xml` of the
project is parsed into a ResourceTree, texts are converted back to
translator syntax, and one `.xls` sheet is written with a `key` column
followed by one column per locale (default locale first).
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from .errors import NotFoundError, ResourceIOError, UnsupportedFormatError
from .model import ResourceTree
from .normalizer import denormalize
from .resources import ResourceWriter, parse
from .rules import RULES, ImportRules
from .tabular import write_xls

logger = logging.getLogger(__name__)

KEY_HEADER = "key"

# values, values-fr, values-fr-rCA, values-b+sr+Latn; not values-night, values-v21
VALUES_DIR_PATTERN = re.compile(r"^values(?:-([a-z]{2,3}(?:-r[A-Z]{2})?|b\+[A-Za-z0-9]+(?:\+[A-Za-z0-9]+)*))?$")


def _locale_for_dir(dir_name: str, default_locale: str) -> Optional[str]:
    """Locale of a resource directory, or None for non-locale qualifiers."""
    match = VALUES_DIR_PATTERN.match(dir_name)
    if match is None:
        return None
    return match.group(1) or default_locale


def load_trees(
    project_dir: Union[str, Path],
    default_locale: str,
    rules: ImportRules = RULES,
) -> dict[str, ResourceTree]:
    """
    Parse every locale's strings.xml under `<project>/src/main/res`.

    Returns:
        Mapping locale -> ResourceTree, default locale first, then sorted

    Raises:
        NotFoundError: If no strings.xml resource file exists
        ResourceIOError: If a resource file cannot be read or parsed
    """
    res_dir = ResourceWriter(project_dir, rules).res_dir
    files = sorted(res_dir.glob(f"values*/{rules.strings_file_name}")) if res_dir.is_dir() else []
    if not files:
        raise NotFoundError(f"No {rules.strings_file_name} resources found under {res_dir}")

    trees: dict[str, ResourceTree] = {}
    for path in files:
        locale = _locale_for_dir(path.parent.name, default_locale)
        if locale is None:
            logger.debug("Skipping non-locale resource directory %s", path.parent.name)
            continue
        try:
            content = path.read_text(encoding="utf-8")
            tree = parse(content, locale, is_default_locale=(locale == default_locale))
        except (OSError, ValueError) as e:
            raise ResourceIOError(f"Cannot read {path}: {e}") from e
        logger.debug("Loaded %d entries for locale '%s' from %s", tree.entry_count(), locale, path)
        trees[locale] = tree

    return dict(sorted(trees.items(), key=lambda item: (not item[1].is_default_locale, item[0])))


def to_rows(trees: dict[str, ResourceTree], rules: ImportRules = RULES) -> tuple[list[str], list[list[str]]]:
    """
    Flatten trees into a header and spreadsheet rows.

    Keys appear in first-seen order across locales; plural items become
    `name:quantity` keys. Missing translations are "".
    """
    locales = list(trees)
    table: dict[str, dict[str, str]] = {}

    for locale, tree in trees.items():
        for key, text in tree.iter_keys(rules.quantity_separator):
            table.setdefault(key, {})[locale] = denormalize(text, rules)

    header = [KEY_HEADER] + locales
    rows = [[key] + [values.get(locale, "") for locale in locales] for key, values in table.items()]
    return header, rows


def export_resources(
    output: Union[str, Path],
    default_locale: str,
    project_dir: Union[str, Path],
    rules: ImportRules = RULES,
) -> Path:
    """
    Export the project's string resources to a `.xls` spreadsheet.

    Raises:
        UnsupportedFormatError: If the output is not a `.xls` path
        NotFoundError: If the project has no string resources
        ResourceIOError: If reading resources or writing the sheet fails
    """
    output_path = Path(output)
    ext = output_path.suffix.lower().lstrip(".")
    if ext not in rules.supported_extensions:
        raise UnsupportedFormatError(
            f"Unsupported export format: .{ext}. Supported: "
            + ", ".join(f".{e}" for e in rules.supported_extensions)
        )

    trees = load_trees(project_dir, default_locale, rules)
    header, rows = to_rows(trees, rules)
    logger.info("Exporting %d keys in %d locales to %s", len(rows), len(trees), output_path)
    return write_xls(output_path, header, rows)
