"""Tests for settings and the profile file."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, load_cli_config
from core.domain.errors import ConfigNotFoundError


def test_missing_config_file_yields_no_profiles(tmp_path: Path) -> None:
    config = load_cli_config(tmp_path / "absent.json")

    assert config.profiles == {}


def test_loads_profiles(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        '{"profiles": {"default": {"account": "0xABC", "rest_url": "http://localhost:8080/v1",'
        ' "faucet_url": "http://localhost:8081"}}}',
        encoding="utf-8",
    )

    config = load_cli_config(path)

    profile = config.profile("default")
    assert profile is not None
    assert profile.account == "0xABC"
    assert profile.faucet_url == "http://localhost:8081"


def test_invalid_config_file_is_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"profiles": {"default": {"account": "nope"}}}', encoding="utf-8")

    with pytest.raises(ConfigNotFoundError, match="invalid CLI config"):
        load_cli_config(path)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APTOS_DEFAULT_FAUCET_URL", "http://env-faucet.test")
    monkeypatch.setenv("APTOS_CONFIG_PATH", str(tmp_path / "cfg.json"))
    monkeypatch.setenv("APTOS_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.default_faucet_url == "http://env-faucet.test"
    assert settings.resolved_config_path() == tmp_path / "cfg.json"
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="chatty")


def test_poll_interval_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, poll_interval_seconds=0)
