"""
android-i18n - Android string resources from translation spreadsheets

Imports a legacy Excel (.xls) sheet with one column per locale into
`src/main/res/values[-XX]/strings.xml` files, and exports them back.

Quick start:
    android-i18n import --source i18n.xls --default-locale en --project-dir app
    android-i18n export --output i18n.xls --project-dir app
"""

__version__ = "1.0.0"

from .errors import (
    ConfigError,
    I18nError,
    NotFoundError,
    ResourceIOError,
    UnsupportedFormatError,
    ValidationError,
)
from .exporter import export_resources
from .importer import import_from, import_resources
from .model import PluralGroup, PluralItem, ResourceTree, TranslationEntry
from .normalizer import NormalizedEntry, normalize

__all__ = [
    "ConfigError",
    "I18nError",
    "NotFoundError",
    "ResourceIOError",
    "UnsupportedFormatError",
    "ValidationError",
    "NormalizedEntry",
    "PluralGroup",
    "PluralItem",
    "ResourceTree",
    "TranslationEntry",
    "export_resources",
    "import_from",
    "import_resources",
    "normalize",
]
