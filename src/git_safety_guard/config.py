"""Configuration management using Pydantic settings with optional file persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

logger = logging.getLogger(__name__)

# --- Paths ---

APP_NAME = "git-safety-guard"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/git-safety-guard)."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / ".config")).expanduser()
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
    return base / APP_NAME


CONFIG_FILE = get_config_dir() / "config.json"


def load_config_file() -> dict[str, Any]:
    """Load settings from the JSON config file if it exists.

    A missing, empty or unreadable file yields an empty dict: the hook must keep
    working with defaults rather than fail on a broken config.
    """
    if not CONFIG_FILE.exists():
        return {}

    try:
        text = CONFIG_FILE.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        data = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {CONFIG_FILE}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {CONFIG_FILE}: top level is not an object")
        return {}
    return data


def save_config_file(config_data: dict[str, Any]) -> None:
    """Save settings to the JSON config file."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config_data, indent=2), encoding="utf-8")


class _SectionSettings(BaseSettings):
    """Settings section where environment variables beat values from the config file."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class GuardSettings(_SectionSettings):
    """Hook behavior configuration."""

    model_config = SettingsConfigDict(env_prefix="GIT_GUARD_", extra="ignore")

    block_on_invalid_input: bool = Field(
        default=False,
        description="Block when stdin cannot be parsed (fail-closed) instead of allowing",
    )
    show_command_in_message: bool = Field(default=True, description="Echo the blocked command in the stderr message")


class LoggingSettings(_SectionSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="GIT_GUARD_LOG_", extra="ignore")

    level: str = Field(default="WARNING")
    file: Optional[str] = Field(default=None, description="Append JSON log lines here instead of stderr")
    json_format: bool = Field(default=True, description="Render log lines as JSON (otherwise key=value console output)")


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Config File > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="GIT_GUARD_", extra="ignore")

    guard: GuardSettings = Field(default_factory=GuardSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def save(self) -> Path:
        """Save current configuration to file."""
        save_config_file(self.model_dump(mode="json", exclude_none=True))
        return CONFIG_FILE


def _load_settings() -> AppSettings:
    """Load settings with file config as base, env vars overlay."""
    file_data = load_config_file()
    guard_data = file_data.get("guard")
    logging_data = file_data.get("logging")
    return AppSettings(
        guard=GuardSettings(**(guard_data if isinstance(guard_data, dict) else {})),
        logging=LoggingSettings(**(logging_data if isinstance(logging_data, dict) else {})),
    )


settings = _load_settings()
