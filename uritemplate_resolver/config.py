"""Resolver settings.

Single source of truth for tunable parser/resolver behavior.
Settings are a frozen pydantic model; configure() validates overrides and
swaps the active settings object in one assignment, so readers always see
a consistent snapshot.
"""

import logging

from pydantic import BaseModel, ConfigDict, field_validator

from uritemplate_resolver.core import UriKind

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ResolverSettings(BaseModel):
    """Tunable behavior for parsing and URI conversion."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Require two hex digits after '%' in variable names (RFC 6570 pct-encoded)
    strict_pct_encoded_names: bool = False
    # Kind used by resolve_uri() when the caller does not pass one
    default_uri_kind: UriKind = UriKind.ABSOLUTE
    # Level applied by utilities.logging.setup_logging() when none is given
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


_settings = ResolverSettings()


def get_settings() -> ResolverSettings:
    """Get the active settings."""
    return _settings


def configure(**overrides) -> ResolverSettings:
    """Replace the active settings, keeping fields that are not overridden.

    Raises:
        pydantic.ValidationError: if an override is unknown or invalid
    """
    global _settings
    merged = {**_settings.model_dump(), **overrides}
    _settings = ResolverSettings(**merged)
    logger.debug("[CONFIG] Settings updated: %s", _settings)
    return _settings


def reset_settings() -> ResolverSettings:
    """Restore default settings (for testing)."""
    global _settings
    _settings = ResolverSettings()
    return _settings
