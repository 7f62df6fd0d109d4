"""Utilities - logging setup."""

from uritemplate_resolver.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
