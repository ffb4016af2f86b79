"""
Scrubber configuration.

A ScrubberConfig is fixed at construction: one enable flag per pattern
category plus the maximum nesting depth walked in a record's context.
Values can be given directly or read from the environment (and an optional
.env file) with ScrubberConfig.from_env().
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv

from .patterns import CATEGORIES

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 20
ENV_PREFIX = "LOGSTOP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Raised when a scrubber is constructed with invalid settings."""


@dataclass(frozen=True)
class ScrubberConfig:
    """
    Enable flags and depth limit for a Scrubber.

    IP and MAC addresses are opt-in; every other category is on by default.
    Flags must be real booleans and max_depth a positive integer.
    """
    ip: bool = False
    mac: bool = False
    url_password: bool = True
    email: bool = True
    credit_card: bool = True
    phone: bool = True
    ssn: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        for category in CATEGORIES:
            value = getattr(self, category)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{category} must be a boolean, got {type(value).__name__}"
                )
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigurationError(
                f"max_depth must be an integer, got {type(self.max_depth).__name__}"
            )
        if self.max_depth <= 0:
            raise ConfigurationError(
                f"max_depth must be >= 1, got {self.max_depth}"
            )

    def is_enabled(self, category: str) -> bool:
        """Return whether the given pattern category is switched on."""
        return getattr(self, category)

    @property
    def enabled_categories(self) -> list[str]:
        return [category for category in CATEGORIES if self.is_enabled(category)]

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        dotenv_path: Optional[str] = None,
    ) -> "ScrubberConfig":
        """
        Build a config from environment variables.

        Reads <prefix><FIELD> for every field (e.g. LOGSTOP_IP=true,
        LOGSTOP_MAX_DEPTH=10). Unset variables keep their defaults.
        Variables from a .env file are loaded first but never override
        variables already present in the environment.

        Raises:
            ConfigurationError: If a value cannot be parsed.
        """
        load_dotenv(dotenv_path)

        values = {}
        for field in fields(cls):
            name = f"{prefix}{field.name.upper()}"
            raw = os.getenv(name)
            if raw is None:
                continue
            if field.name == "max_depth":
                values[field.name] = _parse_int(name, raw)
            else:
                values[field.name] = _parse_bool(name, raw)

        config = cls(**values)
        logger.debug(f"Loaded scrubber config from environment ({prefix}*): {config}")
        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
