#!/usr/bin/env python3
"""
Tabular sources for translation spreadsheets.

Supported formats:
- XLS: legacy Excel 97-2003 workbooks

Recognized but refused:
- XLSX/XLSM/ODS
"""

from .base import SourceRegistry, TabularSource, resolve_source_path
from .xls import XlsSource, cell_text, write_xls

SourceRegistry.register(XlsSource)

__all__ = [
    'SourceRegistry',
    'TabularSource',
    'XlsSource',
    'cell_text',
    'resolve_source_path',
    'write_xls',
]
