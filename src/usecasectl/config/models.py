"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, usecasectl.toml only contains
overrides. An absent file means every default applies.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    # None selects the per-user default (~/.usecase-assistant/use-cases).
    directory: Path | None = None


class UcConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    storage: StorageConfig = Field(default_factory=StorageConfig)
