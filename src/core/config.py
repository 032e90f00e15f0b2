"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  into the CLI.
- Lets adapters (faucet/REST) read timeouts and endpoints consistently.
- Owns the profile file (`config.json`) used to resolve network options.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigNotFoundError
from core.domain.models import CliConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "aptos"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "aptos"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "aptos"
    return Path.home() / ".config" / "aptos"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting commands.
    - A single configuration contract for the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="APTOS_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="aptos-cli/0.1",
        min_length=1,
        description="User-Agent sent to the faucet and REST endpoints.",
    )

    default_rest_url: str | None = Field(
        default="https://fullnode.devnet.aptoslabs.com/v1",
        description="REST endpoint used when neither flag nor profile provides one.",
    )
    default_faucet_url: str | None = Field(
        default="https://faucet.devnet.aptoslabs.com",
        description="Faucet endpoint used when neither flag nor profile provides one.",
    )

    poll_interval_seconds: float = Field(
        default=0.5,
        gt=0,
        le=10,
        description="Pause between two confirmation polls of the same transaction.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level when --verbose is not given.",
    )
    config_path: Path | None = Field(
        default=None,
        description="Profile file; defaults to <user config dir>/config.json.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def resolved_config_path(self) -> Path:
        return self.config_path or (get_user_config_dir() / CONFIG_FILE_NAME)


def load_cli_config(path: Path) -> CliConfig:
    """Read the profile file.

    A missing file is not an error (no profiles, built-in defaults apply);
    an unreadable or invalid one is.
    """

    if not path.exists():
        logger.debug("No CLI config at %s, using built-in defaults", path)
        return CliConfig()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigNotFoundError(f"unable to read CLI config {path}: {exc}") from exc

    try:
        config = CliConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigNotFoundError(f"invalid CLI config {path}: {exc}") from exc

    logger.debug("Loaded %d profile(s) from %s", len(config.profiles), path)
    return config
