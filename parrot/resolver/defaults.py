"""Fallback value stores.

Two independent stores back the resolver when a parameter is missing:

- placeholders: name -> value substituted for an unresolved ``{name}`` token
- variants: placeholder name -> discriminant used when the caller omits it

Stores are consulted only after the parameter bag misses. Every write
builds a new dict and swaps the reference, so a concurrent reader sees
either the old or the new contents of a single call. Sequences such as
clear() followed by update() are NOT atomic; use replace() for that.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class DefaultStore:
    """Process-wide (or injected) key -> value fallback map."""

    def __init__(self, name: str, values: Mapping[str, Any] | None = None):
        self.name = name
        self._values: dict[str, Any] = dict(values or {})
        self._write_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"DefaultStore({self.name!r}, {len(self._values)} keys)"

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def lookup(self, key: str) -> Any | None:
        """Get one fallback value, None when absent."""
        return self._values.get(key)

    def get(self) -> dict[str, Any]:
        """Get a snapshot of all fallback values."""
        return dict(self._values)

    def replace(self, values: Mapping[str, Any]) -> None:
        """Replace every value in one step."""
        with self._write_lock:
            self._values = dict(values)
        logger.debug("[DEFAULTS] %s replaced (%d keys)", self.name, len(values))

    def clear(self) -> None:
        with self._write_lock:
            self._values = {}
        logger.debug("[DEFAULTS] %s cleared", self.name)

    def update(self, values: Mapping[str, Any]) -> None:
        """Merge values over the current ones."""
        with self._write_lock:
            self._values = {**self._values, **values}
        logger.debug("[DEFAULTS] %s updated keys=%s", self.name, list(values))

    def set(self, key: str, value: Any) -> None:
        with self._write_lock:
            self._values = {**self._values, key: value}

    def delete(self, key: str) -> None:
        """Remove one key; missing keys are ignored."""
        with self._write_lock:
            if key not in self._values:
                return
            values = dict(self._values)
            del values[key]
            self._values = values


class DefaultStores:
    """The pair of stores a registry resolves against."""

    def __init__(
        self,
        placeholders: DefaultStore | None = None,
        variants: DefaultStore | None = None,
    ):
        self.placeholders = placeholders or DefaultStore("placeholders")
        self.variants = variants or DefaultStore("variants")

    def get(self, name: str) -> DefaultStore:
        """Get a store by name ('placeholders' or 'variants')."""
        if name == "placeholders":
            return self.placeholders
        if name == "variants":
            return self.variants
        raise KeyError(name)
