"\"\"\"Configuration loading utilities.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


def read_yaml(path: str | Path) -> Any:
    """Parse a YAML document from ``path``; an empty file yields ``None``."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_settings(path: str | Path | None = None) -> AppConfig:
    """Load and validate the application config, falling back to defaults."""
    if path is None:
        return AppConfig()
    return load_config(read_yaml(path))


__all__ = ["load_settings", "read_yaml"]
