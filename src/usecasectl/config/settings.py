"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``USECASECTL_*`` prefix (``__`` for nested keys)
  3. TOML file    — ``usecasectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from usecasectl.config.discovery import find_config, read_config_data
from usecasectl.config.models import StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``usecasectl.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_config_data(toml_path)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class UcSettings(BaseSettings):
    """Settings for one usecasectl invocation, frozen after construction.

    Attributes:
        config_path: The TOML file that supplied overrides, if any.
        storage: ``[storage]`` section; see :attr:`storage_directory`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "USECASECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)

    @property
    def storage_directory(self) -> Path:
        """Configured storage directory, else the per-user default."""
        if self.storage.directory is not None:
            return self.storage.directory.expanduser()
        from usecasectl.infrastructure.repository import default_storage_directory

        return default_storage_directory()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        storage_dir: Path | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> UcSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* wins over discovery from *cwd*. An
        explicit *storage_dir* overrides every other storage source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        if storage_dir is not None:
            cli_flags["storage"] = StorageConfig(directory=storage_dir)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
