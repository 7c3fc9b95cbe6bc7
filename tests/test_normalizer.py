#!/usr/bin/env python3
"""
Tests for translation key/value normalization.

Tests verify:
1. Keys are trimmed and validated against the forbidden character set
2. Quotes are escaped
3. Argument markers become %s or %1$s..%N$s in left-to-right order
4. denormalize() reverses the text rewrite
"""

import re

import pytest

from andi18n.errors import ValidationError
from andi18n.normalizer import denormalize, normalize, rewrite_placeholders, validate_key


def test_key_is_trimmed_and_idempotent():
    entry = normalize("  greeting \t", "hi")
    assert entry.key == "greeting"
    assert normalize(entry.key, "hi").key == "greeting"


def test_text_transform_is_deterministic():
    first = normalize("k", "l'avion # de #")
    second = normalize("k", "l'avion # de #")
    assert first == second


def test_translation_is_not_trimmed():
    assert normalize("k", " padded ").text == " padded "


def test_single_marker_becomes_unindexed_placeholder():
    text = normalize("welcome", "Welcome, #!").text
    assert text == "Welcome, %s!"
    assert text.count("%s") == 1
    assert "#" not in text


def test_multiple_markers_become_indexed_placeholders_in_order():
    text = normalize("files", "# of # files in #").text
    assert text == "%1$s of %2$s files in %3$s"
    indices = [int(i) for i in re.findall(r"%(\d+)\$s", text)]
    assert indices == [1, 2, 3]
    assert "#" not in text


def test_adjacent_markers():
    assert rewrite_placeholders("##") == "%1$s%2$s"


def test_no_marker_leaves_text_unchanged():
    assert rewrite_placeholders("plain text") == "plain text"


def test_single_quote_is_escaped():
    assert normalize("plane", "l'avion").text == "l\\'avion"


def test_quote_and_markers_combined():
    assert normalize("k", "l'# et l'#").text == "l\\'%1$s et l\\'%2$s"


def test_plural_key_is_valid():
    assert normalize("apples:few", "# apples").key == "apples:few"


@pytest.mark.parametrize("key", [
    "foo bar", "a,b", "a-b", "a+b", "x#y", "q'", "tab\tkey", "a(b)", "a@b", "a%b", "a<b>", 'a"b', "a\\b",
])
def test_forbidden_key_characters_raise(key):
    with pytest.raises(ValidationError):
        normalize(key, "value")


@pytest.mark.parametrize("key,translation", [
    (None, "value"),
    ("", "value"),
    ("   ", "value"),
    ("key", None),
    ("key", ""),
    ("key", "  \t "),
])
def test_blank_key_or_translation_raises(key, translation):
    with pytest.raises(ValidationError):
        normalize(key, translation)


def test_validate_key_reports_offending_key():
    with pytest.raises(ValidationError) as exc_info:
        validate_key(" bad key ")
    assert exc_info.value.key == "bad key"
    assert "bad key" in str(exc_info.value)


def test_denormalize_reverses_rewrite():
    for raw in ["l'avion", "Welcome, #!", "# of # files", "plain"]:
        assert denormalize(normalize("k", raw).text) == raw
