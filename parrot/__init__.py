"""Parrot - localized text resolution engine.

Compiles a blueprint of named text entries (placeholders, variants,
conditions and cross-entry holders) into a registry of resolvers.

Usage:
    import parrot

    parrot.set_language(blueprint)
    parrot.DefaultPlaceholders.set("name", "Guest")
    parrot.resolve("greeting", {"gender": "female"})

For an isolated engine (tests, multiple tenants) create a ``Parrot``
with its own ``DefaultStores`` instead of using the module helpers.
"""

from typing import Any

from parrot.catalog import LanguageCatalog
from parrot.controller import Parrot, get_parrot
from parrot.core import (
    Blueprint,
    BlueprintError,
    BlueprintNode,
    EntryKind,
    EntryKindError,
    HolderCycleError,
    HolderDepthError,
    HolderResolutionError,
    ParrotError,
    PredicateSyntaxError,
    UnknownEntryError,
    UnknownLanguageError,
)
from parrot.resolver import DefaultStore, DefaultStores, Registry

# Process-wide default stores (belong to the shared Parrot instance)
DefaultPlaceholders: DefaultStore = get_parrot().default_placeholders
DefaultVariants: DefaultStore = get_parrot().default_variants


def set_language(blueprint: Blueprint | dict, language: str | None = None) -> Registry:
    """Build and publish a registry on the shared instance."""
    return get_parrot().activate(blueprint, language=language)


def resolve(key: str, params: dict[str, Any] | None = None) -> Any:
    """Resolve an entry on the shared instance."""
    return get_parrot().resolve(key, params)


__all__ = [
    # Engine
    "Parrot",
    "get_parrot",
    "LanguageCatalog",
    "Registry",
    "set_language",
    "resolve",
    # Defaults
    "DefaultStore",
    "DefaultStores",
    "DefaultPlaceholders",
    "DefaultVariants",
    # Types
    "Blueprint",
    "BlueprintNode",
    "EntryKind",
    # Errors
    "BlueprintError",
    "EntryKindError",
    "HolderCycleError",
    "HolderDepthError",
    "HolderResolutionError",
    "ParrotError",
    "PredicateSyntaxError",
    "UnknownEntryError",
    "UnknownLanguageError",
]
