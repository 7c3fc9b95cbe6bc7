#!/usr/bin/env python3
"""
Base classes for tabular (spreadsheet) sources.

TabularSource is the abstract reader the import pipeline consumes: a
sequence of rows, each a list of cells already resolved to strings.
SourceRegistry maps file extensions to readers, and knows which spreadsheet
containers are recognized but refused.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional, Union

from ..errors import NotFoundError, UnsupportedFormatError
from ..rules import RULES


class TabularSource(ABC):
    """Abstract spreadsheet reader bound to one file."""

    def __init__(self, path: Path):
        self.path = path

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name."""
        pass

    @classmethod
    @abstractmethod
    def file_extensions(cls) -> list[str]:
        """File extensions this reader supports (without dot)."""
        pass

    @abstractmethod
    def rows(self) -> Iterator[list[str]]:
        """
        Iterate the rows of the first sheet, header row included.

        Every cell is a string; empty cells are "".
        """
        pass


def resolve_source_path(source: Optional[Union[str, Path]]) -> Path:
    """
    Resolve a source path, failing if it is blank or does not exist.

    Raises:
        NotFoundError: If the path is None, blank, missing or not a file
    """
    if source is None or not str(source).strip():
        raise NotFoundError("No source file configured")

    path = Path(str(source).strip()).expanduser()
    if not path.is_file():
        raise NotFoundError(f"Source file not found: {path}")
    return path


class SourceRegistry:
    """Registry of available tabular source readers."""

    _readers: dict[str, type[TabularSource]] = {}

    @classmethod
    def register(cls, reader_class: type[TabularSource]) -> None:
        for ext in reader_class.file_extensions():
            cls._readers[ext.lower()] = reader_class

    @classmethod
    def extensions(cls) -> list[str]:
        return list(cls._readers)

    @classmethod
    def reader_class_for(cls, path: Path) -> type[TabularSource]:
        """
        Get the reader class for a file extension.

        Raises:
            UnsupportedFormatError: If the extension is unknown or refused
        """
        ext = path.suffix.lower().lstrip(".")
        supported = ", ".join(f".{e}" for e in cls._readers)

        if ext in RULES.unsupported_extensions:
            raise UnsupportedFormatError(
                f"Unsupported spreadsheet format: .{ext} ({path.name}). Supported: {supported}"
            )
        if ext not in cls._readers:
            raise UnsupportedFormatError(
                f"Unknown spreadsheet extension: .{ext} ({path.name}). Supported: {supported}"
            )
        return cls._readers[ext]

    @classmethod
    def open(cls, source: Optional[Union[str, Path]]) -> TabularSource:
        """
        Open a tabular source from a path.

        Existence is checked before format, so a missing `.xlsx` reports
        NotFoundError.
        """
        path = resolve_source_path(source)
        return cls.reader_class_for(path)(path)
