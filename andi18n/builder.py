#!/usr/bin/env python3
"""
Accumulates normalized translations into per-locale resource trees.
"""

import logging
from typing import Optional

from .errors import ValidationError
from .model import PluralGroup, PluralItem, ResourceTree, TranslationEntry
from .normalizer import normalize
from .rules import RULES, ImportRules

logger = logging.getLogger(__name__)


def add_entry(tree: ResourceTree, key: str, text: str, rules: ImportRules = RULES) -> None:
    """
    Add an already-normalized translation to a tree.

    `name:quantity` keys go to the plural group `name` (created on first
    sight); other keys become plain strings.

    Raises:
        ValidationError: If the key collides with an existing string or
            plural group name in this tree
    """
    separator = rules.quantity_separator

    if separator in key:
        real_key, quantity = key.split(separator, 1)
        if not real_key or not quantity:
            raise ValidationError(f"Invalid plural key '{key}'", key=key)
        if tree.find_string(real_key) is not None:
            raise ValidationError(
                f"Plural key '{key}' collides with string '{real_key}'", key=key
            )

        group = tree.find_plural(real_key)
        if group is None:
            group = PluralGroup(name=real_key)
            tree.plurals.append(group)
        elif quantity in group.quantities():
            logger.warning(
                "Duplicate quantity '%s' for plural '%s' (%s)", quantity, real_key, tree.locale
            )
        group.items.append(PluralItem(quantity=quantity, text=text))
        return

    if tree.find_string(key) is not None:
        raise ValidationError(f"Duplicate translation key '{key}'", key=key)
    if tree.find_plural(key) is not None:
        raise ValidationError(f"String key '{key}' collides with a plural group", key=key)
    tree.strings.append(TranslationEntry(name=key, text=text))


class ResourceTreeBuilder:
    """
    Builds one ResourceTree per locale during a single spreadsheet scan.

    Trees are created the first time a locale is seen and kept in that order.
    """

    def __init__(self, default_locale: str, rules: ImportRules = RULES):
        self.default_locale = default_locale
        self.rules = rules
        self._trees: dict[str, ResourceTree] = {}

    def tree(self, locale: str) -> ResourceTree:
        """Get the tree for a locale, creating it if needed."""
        tree = self._trees.get(locale)
        if tree is None:
            tree = ResourceTree(locale=locale, is_default_locale=(locale == self.default_locale))
            self._trees[locale] = tree
        return tree

    def add(self, locale: str, key: Optional[str], raw_translation: Optional[str]) -> None:
        """Normalize a raw cell and add it to the locale's tree."""
        entry = normalize(key, raw_translation, self.rules)
        add_entry(self.tree(locale), entry.key, entry.text, self.rules)

    def build(self) -> dict[str, ResourceTree]:
        if self._trees and self.default_locale not in self._trees:
            logger.warning(
                "Default locale '%s' not found among locales: %s",
                self.default_locale,
                ", ".join(self._trees),
            )
        return dict(self._trees)
