"""Registry builder.

Flattens a blueprint into a new Registry:

1. Static groups, in order: each key -> its literal value.
2. Dynamic groups, in order: each key -> one EntryResolver.

Group names are dropped. A key seen again (in any group, static or
dynamic) silently replaces the earlier entry. Conditions are compiled
here, once; invalid ones are logged and dropped.
"""

import logging

from parrot.core.types import Blueprint, EntryKind
from parrot.resolver.defaults import DefaultStores
from parrot.resolver.entry import EntryResolver
from parrot.resolver.registry import Registry

logger = logging.getLogger(__name__)


def build_registry(
    blueprint: Blueprint | dict,
    stores: DefaultStores,
    language: str | None = None,
) -> Registry:
    """Build a complete registry from a blueprint.

    The returned registry is fully populated; nothing is published here.

    Args:
        blueprint: Blueprint model or raw {"Static": ..., "Dynamic": ...} data
        stores: Default stores the resolvers fall back to
        language: Optional language code recorded on the registry

    Returns:
        New Registry

    Raises:
        BlueprintError: if raw data does not validate
    """
    blueprint = Blueprint.from_dict(blueprint)
    registry = Registry(language=language)
    overwritten = 0

    for group in blueprint.static.values():
        for key, value in group.items():
            if key in registry:
                overwritten += 1
            registry._put(key, value)

    for group in blueprint.dynamic.values():
        for key, node in group.items():
            if key in registry:
                overwritten += 1
            registry._put(key, EntryResolver(key, node, registry, stores))

    counts = {kind.name.lower(): 0 for kind in EntryKind}
    for key in registry:
        counts[registry.kind_of(key).name.lower()] += 1

    logger.info(
        "[REGISTRY] Built %d entries for language=%s %s (overwritten=%d)",
        len(registry),
        language or "-",
        counts,
        overwritten,
    )
    return registry
