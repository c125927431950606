"""Application configuration.

Single source of truth for all configuration values.
Loads from environment variables with .env file support.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


class Config:
    """Engine configuration singleton.

    All configuration values should be accessed through this class
    (or the getter functions below). Values are loaded from environment
    variables with sensible defaults.
    """

    # Longest holder chain a single resolve() call may follow
    MAX_HOLDER_DEPTH: int = int(os.getenv("PARROT_MAX_HOLDER_DEPTH", "16"))

    LOG_LEVEL: str = os.getenv("PARROT_LOG_LEVEL", "INFO")

    DEFAULT_LANGUAGE: str = os.getenv("PARROT_DEFAULT_LANGUAGE", "en")

    # Variant nodes without placeholders return their text raw unless enabled
    INTERPOLATE_BARE_VARIANTS: bool = _env_bool("PARROT_INTERPOLATE_BARE_VARIANTS")

    @classmethod
    def reload(cls) -> None:
        """Reload configuration from environment.

        Useful for testing or runtime config changes.
        """
        load_dotenv(_ENV_FILE, override=True)
        cls.MAX_HOLDER_DEPTH = int(os.getenv("PARROT_MAX_HOLDER_DEPTH", "16"))
        cls.LOG_LEVEL = os.getenv("PARROT_LOG_LEVEL", "INFO")
        cls.DEFAULT_LANGUAGE = os.getenv("PARROT_DEFAULT_LANGUAGE", "en")
        cls.INTERPOLATE_BARE_VARIANTS = _env_bool("PARROT_INTERPOLATE_BARE_VARIANTS")


def get_max_holder_depth() -> int:
    """Get the holder indirection bound (always at least 1)."""
    return max(1, Config.MAX_HOLDER_DEPTH)


def get_log_level() -> str:
    return Config.LOG_LEVEL


def get_default_language() -> str:
    return Config.DEFAULT_LANGUAGE


def get_interpolate_bare_variants() -> bool:
    return Config.INTERPOLATE_BARE_VARIANTS
