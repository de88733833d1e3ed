"""Tests for settings loading and validation."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from headping.config import load_settings


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run each test without HEADPING_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.startswith("HEADPING_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()

        assert settings.wait_ms == 1000
        assert settings.timeout_ms == 1000
        assert settings.count is None
        assert settings.log_level is None
        assert settings.log_format == "text"
        assert settings.wait_seconds == 1.0
        assert settings.timeout_seconds == 1.0

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "HEADPING_WAIT_MS": "250",
                "HEADPING_TIMEOUT_MS": "1500",
                "HEADPING_COUNT": "10",
                "HEADPING_LOG_LEVEL": "debug",
                "HEADPING_LOG_FORMAT": "json",
            },
        ):
            settings = load_settings()

        assert settings.wait_ms == 250
        assert settings.timeout_seconds == 1.5
        assert settings.count == 10
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_overrides_take_precedence_over_env(self) -> None:
        with patch.dict(os.environ, {"HEADPING_WAIT_MS": "250"}):
            settings = load_settings(wait_ms=0, timeout_ms=None)

        assert settings.wait_ms == 0
        assert settings.timeout_ms == 1000

    def test_load_settings_from_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "probe.env"
        env_file.write_text("HEADPING_COUNT=3\n", encoding="utf-8")

        settings = load_settings(env_file=str(env_file))

        assert settings.count == 3

    def test_trace_level_accepted(self) -> None:
        with patch.dict(os.environ, {"HEADPING_LOG_LEVEL": "trace"}):
            assert load_settings().log_level == "TRACE"

    @pytest.mark.parametrize(
        "env",
        [
            {"HEADPING_WAIT_MS": "-1"},
            {"HEADPING_TIMEOUT_MS": "0"},
            {"HEADPING_COUNT": "0"},
            {"HEADPING_LOG_LEVEL": "chatty"},
            {"HEADPING_LOG_FORMAT": "xml"},
        ],
    )
    def test_invalid_values_are_rejected(self, env) -> None:
        with patch.dict(os.environ, env):
            with pytest.raises(ValidationError):
                load_settings()
