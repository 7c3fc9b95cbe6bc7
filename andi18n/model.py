#!/usr/bin/env python3
"""
In-memory model of an Android string resource file.

A ResourceTree holds everything that ends up in one
`values[-<locale>]/strings.xml`: plain strings and plural groups, both kept
in first-seen order so the serialized output is deterministic.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class TranslationEntry:
    """
    A plain `<string>` resource.

    Attributes:
        name: Resource name (validated translation key)
        text: Normalized translation text
    """
    name: str
    text: str


@dataclass
class PluralItem:
    """One quantity variant of a plural group (`<item quantity="...">`)."""
    quantity: str
    text: str


@dataclass
class PluralGroup:
    """A `<plurals>` resource: quantity-tagged variants of one concept."""
    name: str
    items: list[PluralItem] = field(default_factory=list)

    def quantities(self) -> list[str]:
        return [item.quantity for item in self.items]


@dataclass
class ResourceTree:
    """
    All resources of a single locale.

    Attributes:
        locale: Locale code (e.g. "fr")
        is_default_locale: True for the base locale written to `values/`
        strings: Plain string resources, in insertion order
        plurals: Plural groups, unique by name, in first-seen order
    """
    locale: str
    is_default_locale: bool = False
    strings: list[TranslationEntry] = field(default_factory=list)
    plurals: list[PluralGroup] = field(default_factory=list)

    @property
    def values_dir_name(self) -> str:
        """Resource directory name: `values` or `values-<locale>`."""
        if self.is_default_locale:
            return "values"
        return f"values-{self.locale}"

    def find_string(self, name: str) -> Optional[TranslationEntry]:
        for entry in self.strings:
            if entry.name == name:
                return entry
        return None

    def find_plural(self, name: str) -> Optional[PluralGroup]:
        for group in self.plurals:
            if group.name == name:
                return group
        return None

    def iter_keys(self, separator: str = ":") -> Iterator[tuple[str, str]]:
        """
        Yield (key, text) pairs in spreadsheet form.

        Plural items are flattened back to `name<separator>quantity` keys.
        """
        for entry in self.strings:
            yield entry.name, entry.text
        for group in self.plurals:
            for item in group.items:
                yield f"{group.name}{separator}{item.quantity}", item.text

    def entry_count(self) -> int:
        """Number of translated values (each plural item counts once)."""
        return len(self.strings) + sum(len(g.items) for g in self.plurals)
