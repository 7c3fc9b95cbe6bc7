#!/usr/bin/env python3
"""
Android strings.xml serialization and output.

Android XML structure produced for one locale:
```xml
<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="greeting">Hello %s</string>
    <plurals name="apples">
        <item quantity="one">1 apple</item>
        <item quantity="other">%s apples</item>
    </plurals>
</resources>
```

Text is written as-is apart from XML escaping of `&`, `<` and `>`; quote
escaping and argument rewriting already happened during normalization.
"""

import logging
from pathlib import Path
from typing import Union
from xml.etree import ElementTree as ET

from .errors import ResourceIOError
from .model import PluralGroup, PluralItem, ResourceTree, TranslationEntry
from .rules import RULES, ImportRules

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
INDENT = "    "


def serialize(tree: ResourceTree) -> str:
    """
    Render a resource tree as strings.xml content.

    Strings come first, then plural groups, each in tree order. The output
    only depends on the tree, so identical trees give identical text.
    """
    root = ET.Element("resources")

    for entry in tree.strings:
        elem = ET.SubElement(root, "string", {"name": entry.name})
        elem.text = entry.text

    for group in tree.plurals:
        plural = ET.SubElement(root, "plurals", {"name": group.name})
        for item in group.items:
            elem = ET.SubElement(plural, "item", {"quantity": item.quantity})
            elem.text = item.text

    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"


def parse(content: str, locale: str, is_default_locale: bool = False) -> ResourceTree:
    """
    Parse strings.xml content into a resource tree.

    `<string-array>` and non-translatable strings are ignored: they have no
    spreadsheet representation.

    Raises:
        ValueError: If the content is not well-formed XML or the root is not
            `<resources>`
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ValueError(f"Invalid XML: {e}")
    if root.tag != 'resources':
        raise ValueError(f"Root element must be 'resources', found '{root.tag}'")

    tree = ResourceTree(locale=locale, is_default_locale=is_default_locale)

    for elem in root.findall('string'):
        name = elem.get('name')
        if name and elem.get('translatable', 'true') != 'false':
            tree.strings.append(TranslationEntry(name=name, text="".join(elem.itertext())))

    for plural in root.findall('plurals'):
        name = plural.get('name')
        if not name:
            continue
        group = PluralGroup(name=name)
        for item in plural.findall('item'):
            quantity = item.get('quantity')
            if quantity:
                group.items.append(PluralItem(quantity=quantity, text="".join(item.itertext())))
        if group.items:
            tree.plurals.append(group)

    return tree


class ResourceWriter:
    """
    Writes resource trees under `<project>/src/main/res`.

    The default-locale tree goes to `values/`, every other tree to
    `values-<locale>/`.
    """

    def __init__(self, project_dir: Union[str, Path], rules: ImportRules = RULES):
        self.project_dir = Path(project_dir)
        self.rules = rules

    @property
    def res_dir(self) -> Path:
        return self.project_dir / "src" / "main" / "res"

    def output_path(self, tree: ResourceTree) -> Path:
        return self.res_dir / tree.values_dir_name / self.rules.strings_file_name

    def write(self, tree: ResourceTree) -> Path:
        """
        Serialize a tree to its strings.xml, replacing any existing file.

        Raises:
            ResourceIOError: If the directory or file cannot be written
        """
        path = self.output_path(tree)
        content = serialize(tree)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        except OSError as e:
            raise ResourceIOError(f"Cannot write {path}: {e}") from e

        logger.info("Wrote %d entries for locale '%s' to %s", tree.entry_count(), tree.locale, path)
        return path

    def write_all(self, trees: dict[str, ResourceTree]) -> list[Path]:
        """Write trees sequentially; earlier files stay on disk if a later write fails."""
        return [self.write(tree) for tree in trees.values()]
