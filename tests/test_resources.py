#!/usr/bin/env python3
"""
Tests for strings.xml serialization, parsing and output paths.
"""

import pytest

from andi18n.errors import ResourceIOError
from andi18n.model import PluralGroup, PluralItem, ResourceTree, TranslationEntry
from andi18n.resources import ResourceWriter, parse, serialize


def _tree(locale="en", default=True) -> ResourceTree:
    return ResourceTree(
        locale=locale,
        is_default_locale=default,
        strings=[TranslationEntry("greeting", "hi"), TranslationEntry("plane", "l\\'avion")],
        plurals=[PluralGroup("apples", [PluralItem("one", "1 apple"), PluralItem("other", "%s apples")])],
    )


EXPECTED_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="greeting">hi</string>
    <string name="plane">l\\'avion</string>
    <plurals name="apples">
        <item quantity="one">1 apple</item>
        <item quantity="other">%s apples</item>
    </plurals>
</resources>
"""


def test_serialize_layout():
    assert serialize(_tree()) == EXPECTED_XML


def test_serialize_escapes_markup_characters():
    tree = ResourceTree(locale="en", strings=[TranslationEntry("terms", "Fish & <Chips>")])
    assert '<string name="terms">Fish &amp; &lt;Chips&gt;</string>' in serialize(tree)


def test_parse_reads_strings_and_plurals():
    tree = parse(EXPECTED_XML, "en", is_default_locale=True)
    assert tree.is_default_locale
    assert [(e.name, e.text) for e in tree.strings] == [("greeting", "hi"), ("plane", "l\\'avion")]
    assert tree.plurals[0].name == "apples"
    assert [(i.quantity, i.text) for i in tree.plurals[0].items] == [("one", "1 apple"), ("other", "%s apples")]


def test_parse_skips_untranslatable_and_arrays():
    content = """<resources>
    <string name="app_name" translatable="false">App</string>
    <string name="hello">Hello</string>
    <string-array name="days"><item>Monday</item></string-array>
</resources>"""
    tree = parse(content, "en")
    assert [e.name for e in tree.strings] == ["hello"]
    assert tree.plurals == []


@pytest.mark.parametrize("content", ["<resources>", "<root><string name='a'>b</string></root>"])
def test_parse_rejects_invalid_content(content):
    with pytest.raises(ValueError):
        parse(content, "en")


def test_output_path_for_default_and_other_locales(tmp_path):
    writer = ResourceWriter(tmp_path)
    res = tmp_path / "src" / "main" / "res"
    assert writer.output_path(_tree("en", True)) == res / "values" / "strings.xml"
    assert writer.output_path(_tree("fr", False)) == res / "values-fr" / "strings.xml"


def test_write_creates_directories_and_overwrites(tmp_path):
    writer = ResourceWriter(tmp_path)
    path = writer.write(_tree("fr", False))
    assert path.read_text(encoding="utf-8") == EXPECTED_XML

    smaller = ResourceTree(locale="fr", strings=[TranslationEntry("only", "one")])
    writer.write(smaller)
    assert '<string name="greeting">' not in path.read_text(encoding="utf-8")


def test_write_failure_raises_resource_io_error(tmp_path):
    (tmp_path / "src").write_text("not a directory")
    with pytest.raises(ResourceIOError):
        ResourceWriter(tmp_path).write(_tree())


def test_write_all_keeps_earlier_files_when_a_later_write_fails(tmp_path):
    res = tmp_path / "src" / "main" / "res"
    res.mkdir(parents=True)
    (res / "values-fr").write_text("not a directory")

    trees = {"en": _tree("en", True), "fr": _tree("fr", False)}
    with pytest.raises(ResourceIOError):
        ResourceWriter(tmp_path).write_all(trees)

    assert (res / "values" / "strings.xml").read_text(encoding="utf-8") == EXPECTED_XML


def test_parse_flattens_inline_markup():
    content = """<resources xmlns:xliff="urn:oasis:names:tc:xliff:document:1.2">
    <string name="welcome">Hi <xliff:g id="name">%s</xliff:g>, welcome</string>
</resources>"""
    assert parse(content, "en").strings[0].text == "Hi %s, welcome"
