# config.py

"""
Settings for the calculator entry points.

Values come from POSTFIX_CALC_* environment variables, optionally seeded
from a .env file, and are validated by a pydantic model.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "POSTFIX_CALC_"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Validated runtime configuration."""
    stack_capacity: int = Field(100, ge=1, description="Capacity of the operator and value stacks")
    max_input_length: int = Field(
        256, ge=2, description="Maximum input line length, line terminator included"
    )
    precision: int = Field(4, ge=0, le=15, description="Decimal places in the printed result")
    strict_tokens: bool = Field(False, description="Reject symbols other than + - * / ^ ( )")
    log_level: str = "WARNING"
    history_file: str = Field("~/.postfix_calc_history", validate_default=True)
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_file(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('history_file cannot be empty')
        return os.path.expanduser(v.strip())


def _settings_from_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return values


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> Settings:
    """
    Build Settings from the environment.

    A .env file (env_file, or one found from the working directory) is loaded
    first without overriding variables already set. Keyword overrides whose
    value is not None win over the environment.

    Raises:
        pydantic.ValidationError: if any value fails validation.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))
    values = _settings_from_env()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging on stderr for an entry point."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
