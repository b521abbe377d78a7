"""Configuration management for wiz."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_MODEL = "openrouter/anthropic/claude-sonnet-4.5"
APP_DIR_NAME = "wiz"
CMD_DB_NAME = "cmd.db"
SPELL_DB_NAME = "spell.db"


class WizSettings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WIZ_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # External tool
    llm_bin: str = Field(default="llm", description="Executable used to run the model")
    model: str = Field(default=DEFAULT_MODEL, description="Model id passed to llm -m")
    shell: str = Field(default="fish", description="Shell dialect requested from the model")

    # Storage
    data_dir: Path | None = Field(default=None, description="Override for the log database directory")
    history_limit: int = Field(default=5, ge=1, description="Default number of rows for `cmd list`")

    # Terminal
    progress: bool = Field(default=True, description="Animate a progress line while llm runs")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    def resolve_data_dir(self) -> Path:
        """Return the directory holding the log databases, creating it if needed."""
        if self.data_dir is not None:
            directory = self.data_dir.expanduser()
        else:
            directory = _platform_data_home() / APP_DIR_NAME
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def cmd_db_path(self) -> Path:
        return self.resolve_data_dir() / CMD_DB_NAME

    def spell_db_path(self) -> Path:
        return self.resolve_data_dir() / SPELL_DB_NAME


def _platform_data_home() -> Path:
    if sys.platform == "win32":
        app_data = os.getenv("APPDATA")
        if not app_data:
            raise ConfigurationError("APPDATA not set")
        return Path(app_data)

    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    home = os.getenv("HOME")
    if not home:
        raise ConfigurationError("HOME not set")
    return Path(home) / ".local" / "share"


def load_settings() -> WizSettings:
    """Load settings from the environment and an optional .env file."""
    return WizSettings()
