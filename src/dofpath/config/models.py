"""Pydantic models describing dofpath settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LayoutConfig(BaseModel):
    """Names used when probing the install tree."""

    model_config = ConfigDict(extra="forbid")

    config_dir_name: str = "Config"

    @field_validator("config_dir_name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("config_dir_name must be a single, non-empty path segment.")
        return value


class NamingConfig(BaseModel):
    """Global config file naming: ``<prefix><host app><extension>``."""

    model_config = ConfigDict(extra="forbid")

    prefix: str = "GlobalConfig_"
    extension: str = ".xml"
    shortcut_extension: str = ".lnk"

    @field_validator("extension", "shortcut_extension")
    @classmethod
    def _dotted(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extensions must start with '.'.")
        return value


class ShortcutConfig(BaseModel):
    """How ``.lnk`` shortcut files are resolved."""

    model_config = ConfigDict(extra="forbid")

    mode: Literal["auto", "windows", "symlink", "none"] = "auto"


class LoggingConfig(BaseModel):
    """Logging destinations."""

    model_config = ConfigDict(extra="forbid")

    log_path: Optional[Path] = None
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class DofPathConfig(BaseModel):
    """Root settings object."""

    model_config = ConfigDict(extra="forbid")

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    shortcuts: ShortcutConfig = Field(default_factory=ShortcutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "DofPathConfig",
    "LayoutConfig",
    "LoggingConfig",
    "NamingConfig",
    "ShortcutConfig",
]
