"""Utilities - logging setup."""

from parrot.utilities.logging import setup_logging

__all__ = [
    "setup_logging",
]
