"""Text resolution engine.

Builds callable entries from a blueprint and resolves them against a
parameter bag.

Usage:
    from parrot.resolver import DefaultStores, build_registry

    stores = DefaultStores()
    registry = build_registry(blueprint, stores)
    registry["greeting"]({"gender": "female", "name": "Ana"})

Entries are static constants or EntryResolvers (plain, variant or
conditional), optionally pulling other entries in through holders.
"""

from parrot.resolver.builder import build_registry
from parrot.resolver.conditions import (
    CompiledCondition,
    compile_condition,
    compile_conditions,
    parse_condition,
)
from parrot.resolver.defaults import DefaultStore, DefaultStores
from parrot.resolver.entry import EntryResolver, classify
from parrot.resolver.interpolate import interpolate, token_names
from parrot.resolver.registry import Registry

__all__ = [
    # Main API
    "build_registry",
    "Registry",
    "EntryResolver",
    "classify",
    # Defaults
    "DefaultStore",
    "DefaultStores",
    # Building blocks
    "interpolate",
    "token_names",
    "CompiledCondition",
    "compile_condition",
    "compile_conditions",
    "parse_condition",
]
