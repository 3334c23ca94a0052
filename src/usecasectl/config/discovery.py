"""Locate and read ``usecasectl.toml``.

Lookup order: the ``USECASECTL_CONFIG`` env var, then a walk up from the
starting directory (like git looking for ``.git/``). A relative
``[storage] directory`` is anchored at the config file's directory, so a
project can keep its use cases next to its config.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from usecasectl.config.models import UcConfig

CONFIG_FILENAME = "usecasectl.toml"
CONFIG_ENV_VAR = "USECASECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the governing config file, or None.

    An env var pointing at a missing file yields None rather than falling
    back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override)
        return candidate if candidate.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML and anchor a relative storage directory."""
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    storage = data.get("storage")
    if isinstance(storage, dict) and isinstance(storage.get("directory"), str):
        directory = Path(storage["directory"]).expanduser()
        if not directory.is_absolute():
            directory = path.parent / directory
        data["storage"] = {**storage, "directory": str(directory)}
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> UcConfig:
    """Load *path* (or the discovered file) into a :class:`UcConfig`.

    Defaults apply when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return UcConfig()
    return UcConfig.model_validate(read_config_data(path))
