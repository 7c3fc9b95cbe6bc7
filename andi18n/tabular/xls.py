#!/usr/bin/env python3
"""
Legacy Excel (.xls) workbook reader and writer.

Reading goes through pandas with the xlrd engine (xlrd 2.x only parses the
legacy BIFF container, which is exactly the format we accept). Writing uses
xlwt, the BIFF writer counterpart.
"""

import logging
import math
import struct
from pathlib import Path
from typing import Any, Iterable, Iterator

import pandas as pd
import xlwt
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from ..errors import ResourceIOError, UnsupportedFormatError
from .base import TabularSource

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """Resolve a spreadsheet cell to a string ("" for empty cells)."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


class XlsSource(TabularSource):
    """
    Reader for the first sheet of a `.xls` workbook.

    Expected layout:
    ```
    key        | en       | fr
    greeting   | hi       | salut
    apples:one | 1 apple  | 1 pomme
    ```
    """

    @property
    def name(self) -> str:
        return "xls"

    @classmethod
    def file_extensions(cls) -> list[str]:
        return ["xls"]

    def _read_frame(self) -> pd.DataFrame:
        try:
            return pd.read_excel(
                self.path,
                sheet_name=0,
                header=None,
                dtype=object,
                na_filter=False,
                engine="xlrd",
            )
        except (XLRDError, CompDocError, ValueError, IndexError, struct.error) as e:
            raise UnsupportedFormatError(f"Cannot read {self.path.name} as an .xls workbook: {e}") from e

    def rows(self) -> Iterator[list[str]]:
        frame = self._read_frame()
        logger.debug("Read %d rows x %d columns from %s", frame.shape[0], frame.shape[1], self.path)
        for row in frame.itertuples(index=False, name=None):
            yield [cell_text(value) for value in row]


def write_xls(path: Path, header: list[str], rows: Iterable[list[str]], sheet_name: str = "i18n") -> Path:
    """
    Write a single-sheet `.xls` workbook.

    Args:
        path: Destination file (parent directories are created)
        header: Header row cells
        rows: Data rows; "" cells are left blank

    Returns:
        The written path

    Raises:
        ResourceIOError: If the file cannot be written
    """
    workbook = xlwt.Workbook(encoding="utf-8")
    sheet = workbook.add_sheet(sheet_name)

    for col, value in enumerate(header):
        sheet.write(0, col, value)
    for row_idx, row in enumerate(rows, start=1):
        for col, value in enumerate(row):
            if value:
                sheet.write(row_idx, col, value)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(str(path))
    except OSError as e:
        raise ResourceIOError(f"Cannot write spreadsheet {path}: {e}") from e
    return path
