#!/usr/bin/env python3
"""
Runtime configuration.

Settings come from an optional YAML file and are overridden by CLI flags:

```yaml
source_file: translations/i18n.xls
default_locale: en
project_dir: app
export_file: build/i18n-export.xls
```
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigError

DEFAULT_LOCALE = "en"


@dataclass
class I18nConfig:
    """Import/export settings."""
    source_file: Optional[str] = None
    default_locale: str = DEFAULT_LOCALE
    project_dir: Path = Path(".")
    export_file: Optional[str] = None

    def merged(self, **overrides: Any) -> "I18nConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "project_dir" in values:
            values["project_dir"] = Path(values["project_dir"])
        return replace(self, **values)


def load_config(path: Optional[Union[str, Path]] = None) -> I18nConfig:
    """
    Load configuration from a YAML file.

    Relative paths in the file are resolved against the file's directory.
    Without a path the defaults are returned.

    Raises:
        ConfigError: If the file is missing, unparsable, not a mapping or
            has unknown keys
    """
    if path is None:
        return I18nConfig()

    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}")

    if data is None:
        return I18nConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {config_path} must be a mapping")

    known = {f.name for f in fields(I18nConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {config_path}: {', '.join(unknown)}")

    base_dir = config_path.parent
    for key in ("source_file", "export_file", "project_dir"):
        value = data.get(key)
        if value is not None and str(value).strip() and not Path(str(value)).is_absolute():
            data[key] = str(base_dir / str(value))

    if "default_locale" in data and not isinstance(data["default_locale"], str):
        raise ConfigError(
            f"default_locale must be a string in {config_path}, "
            f"quote it (e.g. default_locale: \"no\")"
        )
    if "default_locale" in data and not data["default_locale"].strip():
        raise ConfigError(f"default_locale must not be empty in {config_path}")

    return I18nConfig().merged(**{k: (str(v) if v is not None else None) for k, v in data.items()})
