#!/usr/bin/env python3
"""
Translation key/value normalization.

Translators author spreadsheet cells with a simplified syntax: a bare `'`
and `#` as the argument marker. Android resources need escaped quotes and
printf-style arguments, indexed once there is more than one:

    l'avion            -> l\\'avion
    Hello #            -> Hello %s
    # of # files       -> %1$s of %2$s files
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ValidationError
from .rules import RULES, ImportRules


@dataclass(frozen=True)
class NormalizedEntry:
    """A validated key and its Android-ready translation text."""
    key: str
    text: str


def validate_key(key: Optional[str], rules: ImportRules = RULES) -> str:
    """
    Trim and validate a translation key.

    Raises:
        ValidationError: If the key is blank or contains a forbidden character
    """
    if key is None or not key.strip():
        raise ValidationError(f"Invalid translation key '{key}'", key=key)

    clean_key = key.strip()
    if rules.forbidden_key_pattern.search(clean_key):
        raise ValidationError(f"Invalid translation key '{clean_key}'", key=clean_key)
    return clean_key


def rewrite_placeholders(text: str, rules: ImportRules = RULES) -> str:
    """Replace argument markers with `%s`, or `%1$s`..`%N$s` left to right."""
    marker = rules.placeholder_marker
    count = text.count(marker)

    if count == 0:
        return text
    if count == 1:
        return text.replace(marker, rules.single_arg)

    parts = text.split(marker)
    rewritten = [parts[0]]
    for index, part in enumerate(parts[1:], start=1):
        rewritten.append(rules.indexed_placeholder(index))
        rewritten.append(part)
    return "".join(rewritten)


def normalize(
    key: Optional[str],
    raw_translation: Optional[str],
    rules: ImportRules = RULES,
) -> NormalizedEntry:
    """
    Validate a (key, translation) pair and rewrite the translation.

    The quote is escaped before argument markers are rewritten. The
    translation itself is not trimmed; only blankness is checked.

    Args:
        key: Raw key cell
        raw_translation: Raw translation cell
        rules: Conversion constants

    Returns:
        NormalizedEntry with the trimmed key and rewritten text

    Raises:
        ValidationError: On a blank key/translation or a forbidden key character
    """
    if key is None or not key.strip() or raw_translation is None or not raw_translation.strip():
        raise ValidationError(
            f"Invalid translation key '{key}' or corresponding translation value '{raw_translation}'",
            key=key,
        )

    clean_key = validate_key(key, rules)
    text = raw_translation.replace(rules.single_quote, rules.escaped_quote)
    text = rewrite_placeholders(text, rules)
    return NormalizedEntry(key=clean_key, text=text)


def denormalize(text: str, rules: ImportRules = RULES) -> str:
    """
    Convert Android resource text back to translator syntax.

    Inverse of normalize() for text it produced: every `%s`/`%N$s` becomes
    the argument marker and escaped quotes are unescaped.
    """
    text = rules.xml_placeholder_pattern.sub(rules.placeholder_marker, text)
    return text.replace(rules.escaped_quote, rules.single_quote)
