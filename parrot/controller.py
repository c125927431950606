"""Parrot controller: the published registry and its entry points.

A Parrot instance owns the default stores, the language catalog and the
currently published registry. Activating a blueprint builds a complete
registry first and only then swaps the reference, so readers see either
the old or the new registry, never a mix.

Usage:
    from parrot import Parrot

    p = Parrot()
    p.activate({"Static": {...}, "Dynamic": {...}})
    p.resolve("greeting", {"name": "Ana"})

A process-wide instance is available through ``get_parrot()`` and the
module-level helpers in ``parrot``.
"""

import logging
import threading
from typing import Any

from parrot.catalog import LanguageCatalog
from parrot.core.errors import EntryKindError
from parrot.core.types import Blueprint, Params
from parrot.resolver.builder import build_registry
from parrot.resolver.defaults import DefaultStore, DefaultStores
from parrot.resolver.entry import EntryResolver
from parrot.resolver.registry import Registry

logger = logging.getLogger(__name__)


class Parrot:
    """Owns the active registry and the stores it resolves against."""

    def __init__(
        self,
        stores: DefaultStores | None = None,
        catalog: LanguageCatalog | None = None,
    ):
        self.stores = stores or DefaultStores()
        self.catalog = catalog or LanguageCatalog()
        self._registry = Registry()
        self._swap_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Parrot(language={self.active_language!r}, entries={len(self._registry)})"

    @property
    def registry(self) -> Registry:
        """The currently published registry."""
        return self._registry

    @property
    def active_language(self) -> str | None:
        return self._registry.language

    @property
    def default_placeholders(self) -> DefaultStore:
        return self.stores.placeholders

    @property
    def default_variants(self) -> DefaultStore:
        return self.stores.variants

    # =========================================================================
    # Build
    # =========================================================================

    def activate(self, blueprint: Blueprint | dict, language: str | None = None) -> Registry:
        """Build a registry from a blueprint and publish it.

        Safe to call repeatedly; each call fully replaces the previous
        registry. If the blueprint is invalid the old registry stays.

        Raises:
            BlueprintError: if raw data does not validate
        """
        registry = build_registry(blueprint, self.stores, language=language)
        with self._swap_lock:
            previous = self._registry
            self._registry = registry
        logger.info(
            "[ACTIVATE] language=%s entries=%d (was language=%s entries=%d)",
            language or "-",
            len(registry),
            previous.language or "-",
            len(previous),
        )
        return registry

    set_language = activate

    def use_language(self, language: str | None = None) -> Registry:
        """Activate a catalog language (default language on a miss).

        Raises:
            UnknownLanguageError: neither the language nor the default is registered
        """
        code = self.catalog.resolve_language(language)
        return self.activate(self.catalog.get(code), language=code)

    # =========================================================================
    # Query
    # =========================================================================

    def resolve(self, key: str, params: Params | None = None) -> Any:
        """Resolve an entry.

        Dynamic entries are called with ``params`` (holder parameters in it
        are overwritten in place); static entries are returned as stored.

        Raises:
            UnknownEntryError: the key is not in the active registry
            HolderResolutionError: holder indirection did not terminate
        """
        entry = self._registry[key]
        if callable(entry):
            return entry({} if params is None else params)
        return entry

    def resolve_static(self, key: str) -> Any:
        """Get a static entry's constant.

        Raises:
            UnknownEntryError: the key is not registered
            EntryKindError: the entry is dynamic
        """
        entry = self._registry[key]
        if isinstance(entry, EntryResolver):
            raise EntryKindError(key, "static")
        return entry

    def resolve_dynamic(self, key: str, params: Params | None = None) -> str:
        """Render a dynamic entry.

        Raises:
            UnknownEntryError: the key is not registered
            EntryKindError: the entry is static
        """
        entry = self._registry[key]
        if not isinstance(entry, EntryResolver):
            raise EntryKindError(key, "dynamic")
        return entry({} if params is None else params)

    def resolve_mixed(self, key: str, /, **params: Any) -> Any:
        """Resolve any entry, taking parameters as keyword arguments."""
        return self.resolve(key, params)


_default_parrot: Parrot | None = None
_default_lock = threading.Lock()


def get_parrot() -> Parrot:
    """Get the process-wide Parrot instance."""
    global _default_parrot
    if _default_parrot is None:
        with _default_lock:
            if _default_parrot is None:
                _default_parrot = Parrot()
    return _default_parrot
