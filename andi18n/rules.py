#!/usr/bin/env python3
"""
Immutable conversion rules shared by the import and export pipelines.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ImportRules:
    """Constants governing key validation and translation rewriting."""
    # Extensions (without dot) the tabular reader understands
    supported_extensions: tuple[str, ...] = ("xls",)
    # Spreadsheet containers we recognize but deliberately refuse
    unsupported_extensions: tuple[str, ...] = ("xlsx", "xlsm", "ods")
    forbidden_key_chars: str = "+-*/\\;,'()[]{}!?=@|#~&\"^%<>"
    placeholder_marker: str = "#"
    quantity_separator: str = ":"
    single_quote: str = "'"
    escaped_quote: str = "\\'"
    single_arg: str = "%s"
    indexed_arg: str = "%{index}$s"
    strings_file_name: str = "strings.xml"

    @property
    def forbidden_key_pattern(self) -> re.Pattern:
        """Matches a key containing whitespace or any forbidden character."""
        return re.compile(r"[\s" + re.escape(self.forbidden_key_chars) + r"]")

    @property
    def xml_placeholder_pattern(self) -> re.Pattern:
        """Matches the format placeholders produced by the import rewrite."""
        return re.compile(r"%(?:\d+\$)?s")

    def indexed_placeholder(self, index: int) -> str:
        return self.indexed_arg.format(index=index)


RULES = ImportRules()
