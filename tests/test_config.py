"""
Tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from golondrina.utils import config as config_module
from golondrina.utils.config import TicketOfficeConfig, load_config, get_config, reset_config

ENV_VARS = [
    "TICKET_OFFICE_LOG_LEVEL",
    "TICKET_OFFICE_DEBUG",
    "TICKET_OFFICE_SEAT_ATTEMPTS",
    "TICKET_OFFICE_RANDOM_SEED",
    "TICKET_OFFICE_AIRLINE_NAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start from an empty environment; values set by .env files are undone too."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


class TestTicketOfficeConfig:
    """Test the configuration model."""

    def test_defaults(self):
        config = TicketOfficeConfig()
        assert config.log_level == "INFO"
        assert config.debug is False
        assert config.seat_random_attempts == 1000
        assert config.random_seed is None
        assert config.airline_name == "GOLONDRINA VELOZ"

    def test_log_level_normalized(self):
        assert TicketOfficeConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            TicketOfficeConfig(log_level="LOUD")

    def test_seat_attempts_must_be_positive(self):
        with pytest.raises(ValidationError):
            TicketOfficeConfig(seat_random_attempts=0)


class TestLoadConfig:
    """Test loading configuration from the environment."""

    def test_load_defaults(self, missing_env_file):
        config = load_config(missing_env_file)
        assert config == TicketOfficeConfig()

    def test_load_from_environment(self, monkeypatch, missing_env_file):
        monkeypatch.setenv("TICKET_OFFICE_LOG_LEVEL", "warning")
        monkeypatch.setenv("TICKET_OFFICE_DEBUG", "yes")
        monkeypatch.setenv("TICKET_OFFICE_SEAT_ATTEMPTS", "25")
        monkeypatch.setenv("TICKET_OFFICE_RANDOM_SEED", "7")

        config = load_config(missing_env_file)

        assert config.log_level == "WARNING"
        assert config.debug is True
        assert config.seat_random_attempts == 25
        assert config.random_seed == 7

    def test_load_from_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TICKET_OFFICE_AIRLINE_NAME=TEST AIR\nTICKET_OFFICE_RANDOM_SEED=3\n")

        config = load_config(str(env_file))

        assert config.airline_name == "TEST AIR"
        assert config.random_seed == 3

    def test_invalid_values_raise_value_error(self, monkeypatch, missing_env_file):
        monkeypatch.setenv("TICKET_OFFICE_SEAT_ATTEMPTS", "many")
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(missing_env_file)

    def test_get_config_is_cached(self, monkeypatch):
        monkeypatch.setattr(config_module, "load_config", lambda env_file=None: TicketOfficeConfig(debug=True))
        first = get_config()
        assert first.debug is True
        assert get_config() is first
        reset_config()
        assert get_config() is not first
