"""Language catalog.

Holds one validated blueprint per language code. Lookups for a language
that has no blueprint fall back to the default language, matching how
the generated language index picks a configuration.
"""

import logging
import threading

from parrot.config import get_default_language
from parrot.core.errors import UnknownLanguageError
from parrot.core.types import Blueprint

logger = logging.getLogger(__name__)


class LanguageCatalog:
    """Language code -> Blueprint, with default-language fallback."""

    def __init__(self, default_language: str | None = None):
        self.default_language = default_language or get_default_language()
        self._blueprints: dict[str, Blueprint] = {}
        self._lock = threading.Lock()

    def __contains__(self, language: object) -> bool:
        return language in self._blueprints

    def add(self, language: str, blueprint: Blueprint | dict) -> Blueprint:
        """Register (or replace) the blueprint for a language.

        Raises:
            BlueprintError: if raw data does not validate
        """
        validated = Blueprint.from_dict(blueprint)
        with self._lock:
            self._blueprints = {**self._blueprints, language: validated}
        logger.info("[CATALOG] Registered language=%s entries=%d", language, validated.entry_count())
        return validated

    def remove(self, language: str) -> bool:
        """Remove a language. Returns False if it was not registered."""
        with self._lock:
            if language not in self._blueprints:
                return False
            blueprints = dict(self._blueprints)
            del blueprints[language]
            self._blueprints = blueprints
        return True

    def languages(self) -> list[str]:
        return sorted(self._blueprints)

    def resolve_language(self, language: str | None) -> str:
        """Get the language code whose blueprint serves ``language``.

        Raises:
            UnknownLanguageError: neither the language nor the default is registered
        """
        if language and language in self._blueprints:
            return language
        if self.default_language in self._blueprints:
            if language:
                logger.debug(
                    "[CATALOG] No blueprint for %s, using default %s",
                    language,
                    self.default_language,
                )
            return self.default_language
        raise UnknownLanguageError(language or self.default_language)

    def get(self, language: str | None = None) -> Blueprint:
        """Get the blueprint for a language (default language on a miss)."""
        return self._blueprints[self.resolve_language(language)]
