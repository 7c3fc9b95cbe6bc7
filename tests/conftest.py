#!/usr/bin/env python3
"""Shared fixtures: spreadsheets are generated per test with xlwt."""

from pathlib import Path

import pytest

from andi18n.tabular import write_xls


@pytest.fixture
def make_xls(tmp_path):
    """Factory writing a .xls workbook from a header and rows."""
    def _make(header, rows, name="i18n.xls") -> Path:
        return write_xls(tmp_path / name, header, rows)
    return _make


@pytest.fixture
def project_dir(tmp_path) -> Path:
    path = tmp_path / "app"
    path.mkdir()
    return path


@pytest.fixture
def sample_xls(make_xls) -> Path:
    return make_xls(
        ["key", "en", "fr"],
        [
            ["greeting", "hi", "salut"],
            ["farewell", "Goodbye #", "Au revoir #"],
            ["apples:one", "1 apple", "1 pomme"],
            ["apples:other", "# apples", "# pommes"],
            ["plane", "the plane", "l'avion"],
            ["only_en", "English only", ""],
        ],
    )
