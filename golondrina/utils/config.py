"""
Environment configuration loader with validation for the ticket office.
"""

import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv


class TicketOfficeConfig(BaseModel):
    """Configuration model for the ticket office with validation."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Seat allocation
    seat_random_attempts: int = Field(
        default=1000, ge=1, description="Random draws before falling back to a linear scan"
    )
    random_seed: Optional[int] = Field(
        default=None, description="Seed for reproducible seat draws"
    )

    # Presentation
    airline_name: str = Field(
        default="GOLONDRINA VELOZ", min_length=1, description="Airline name on boarding passes"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


def _parse_bool(raw: str) -> bool:
    return raw.lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[str] = None) -> TicketOfficeConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        TicketOfficeConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    seed = os.getenv("TICKET_OFFICE_RANDOM_SEED") or None

    try:
        config_data: Dict[str, Any] = {
            "log_level": os.getenv("TICKET_OFFICE_LOG_LEVEL", "INFO"),
            "debug": _parse_bool(os.getenv("TICKET_OFFICE_DEBUG", "false")),
            "seat_random_attempts": int(os.getenv("TICKET_OFFICE_SEAT_ATTEMPTS", "1000")),
            "random_seed": int(seed) if seed is not None else None,
            "airline_name": os.getenv("TICKET_OFFICE_AIRLINE_NAME", "GOLONDRINA VELOZ"),
        }
        return TicketOfficeConfig(**config_data)
    except ValueError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


# Global configuration instance
_config: Optional[TicketOfficeConfig] = None


def get_config() -> TicketOfficeConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        TicketOfficeConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
