"""Entry resolvers: one callable per dynamic blueprint node.

Resolution order for every call:

1. Holders: each holder parameter's value is a registry key; it is
   replaced in the parameter bag by that entry's text (or None when the
   key is unknown). This happens before anything is interpolated.
2. Variants: the first placeholder is the discriminant (falling back to
   the default variant store); a matching variant wins over value.
3. Conditions: the first condition that holds, in declaration order,
   wins over value.
4. Otherwise value is interpolated.

Holder chains are tracked per call in a context variable, so recursion
through holders fails fast on a cycle or past the configured depth.
"""

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from parrot.config import get_interpolate_bare_variants, get_max_holder_depth
from parrot.core.errors import HolderCycleError, HolderDepthError
from parrot.core.types import BlueprintNode, EntryKind, Params
from parrot.resolver.conditions import CompiledCondition, compile_conditions
from parrot.resolver.defaults import DefaultStores
from parrot.resolver.interpolate import interpolate, stringify

if TYPE_CHECKING:
    from parrot.resolver.registry import Registry

logger = logging.getLogger(__name__)

# Keys of the entries currently being resolved, outermost first
_holder_chain: ContextVar[tuple[str, ...]] = ContextVar("parrot_holder_chain", default=())


def classify(node: BlueprintNode) -> EntryKind:
    """Get the kind of entry a dynamic node builds."""
    if node.variants:
        return EntryKind.VARIANT
    if node.conditions:
        return EntryKind.CONDITIONAL
    return EntryKind.PLAIN


class EntryResolver:
    """Callable that renders one dynamic entry from a parameter bag.

    Immutable once built. Reads other entries of its own registry (for
    holders) and the default stores; writes only to the caller's bag.
    """

    __slots__ = ("key", "node", "kind", "conditions", "_registry", "_stores")

    def __init__(
        self,
        key: str,
        node: BlueprintNode,
        registry: "Registry",
        stores: DefaultStores,
    ):
        self.key = key
        self.node = node
        self.kind = classify(node)
        self.conditions: tuple[CompiledCondition, ...] = ()
        if self.kind == EntryKind.CONDITIONAL:
            self.conditions = tuple(compile_conditions(node.conditions, key))
        self._registry = registry
        self._stores = stores

    def __repr__(self) -> str:
        return f"EntryResolver({self.key!r}, {self.kind.name})"

    @property
    def holders(self) -> list[str]:
        return self.node.holders

    @property
    def placeholders(self) -> list[str]:
        return self.node.placeholders

    def __call__(self, params: Params | None = None) -> str:
        """Render this entry.

        Args:
            params: Parameter bag; holder parameters are overwritten in place

        Raises:
            HolderCycleError: a holder chain leads back to this entry
            HolderDepthError: the holder chain is longer than allowed
        """
        if params is None:
            params = {}

        chain = _holder_chain.get()
        if self.key in chain:
            raise HolderCycleError(chain + (self.key,))
        limit = get_max_holder_depth()
        if len(chain) >= limit:
            raise HolderDepthError(chain + (self.key,), limit)

        token = _holder_chain.set(chain + (self.key,))
        try:
            if self.node.holders:
                self._apply_holders(params)
            return self._render(params)
        finally:
            _holder_chain.reset(token)

    # =========================================================================
    # Resolution steps
    # =========================================================================

    def _apply_holders(self, params: Params) -> None:
        """Replace each holder parameter with the text of the entry it names."""
        for name in self.node.holders:
            ref = params.get(name)
            if ref is None:
                params[name] = None
                continue

            ref_key = stringify(ref)
            if ref_key not in self._registry:
                logger.debug("[HOLDER] %s.%s -> unknown entry %r", self.key, name, ref_key)
                params[name] = None
                continue

            entry = self._registry.get(ref_key)
            params[name] = entry(params) if callable(entry) else entry

    def _render(self, params: Params) -> str:
        placeholders = self._stores.placeholders
        node = self.node

        if self.kind == EntryKind.VARIANT:
            template = self._select_variant(params)
            if node.placeholders or get_interpolate_bare_variants():
                return interpolate(template, params, placeholders)
            return template

        if self.kind == EntryKind.CONDITIONAL:
            for condition in self.conditions:
                selected = condition(params)
                if selected is not None:
                    return interpolate(selected, params, placeholders)

        return interpolate(node.value, params, placeholders)

    def _select_variant(self, params: Params) -> str:
        name = self.node.discriminant
        if name is None:
            return self.node.value

        discriminant: Any = params.get(name)
        if discriminant is None:
            discriminant = self._stores.variants.lookup(name)
        if discriminant is None:
            return self.node.value

        found = self.node.variants.get(stringify(discriminant))
        return found if found is not None else self.node.value

    # =========================================================================
    # Introspection
    # =========================================================================

    def describe(self) -> dict:
        """Summary of this entry for listings and debugging."""
        info: dict[str, Any] = {
            "key": self.key,
            "kind": self.kind.name.lower(),
            "value": self.node.value,
            "placeholders": list(self.node.placeholders),
            "holders": list(self.node.holders),
        }
        if self.node.desc:
            info["desc"] = self.node.desc
        if self.kind == EntryKind.VARIANT:
            info["variants"] = list(self.node.variants)
        if self.kind == EntryKind.CONDITIONAL:
            info["conditions"] = [c.source for c in self.conditions]
            dropped = len(self.node.conditions) - len(self.conditions)
            if dropped:
                info["dropped_conditions"] = dropped
        return info
