"""Runtime configuration loaded from the environment (or a .env file)."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from patterns.observability import get_logger

LOG_LEVEL_ENV = "PATTERNS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_logger = get_logger("patterns.config")


class DemoConfig(BaseModel):
    """Settings for the demo run. Only diagnostics are affected; stdout output never changes."""

    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Build config from PATTERNS_LOG_LEVEL, reading .env first if present.

        An unknown level is reported on stderr and replaced by the default.
        """
        load_dotenv()
        raw = (os.environ.get(LOG_LEVEL_ENV) or "").strip() or DEFAULT_LOG_LEVEL
        try:
            return cls(log_level=raw)
        except ValidationError as e:
            _logger.warning(
                "invalid_log_level",
                extra={"env": LOG_LEVEL_ENV, "value": raw, "error": e.errors()[0]["msg"]},
            )
            return cls()
