"""Entry registry.

A registry maps every entry key to either a constant (static entries) or
an EntryResolver (dynamic entries). It is built in one pass by
``build_registry`` and never modified afterwards; switching language
builds a new registry and swaps the published reference.
"""

from collections.abc import Iterator
from typing import Any

from parrot.core.errors import UnknownEntryError
from parrot.core.types import EntryKind
from parrot.resolver.entry import EntryResolver

_MISSING = object()


class Registry:
    """Read-only key -> constant | EntryResolver mapping.

    Entries are added only by the builder, before the registry is
    published. Resolvers hold a reference to the registry they were built
    into, so entries of a replaced registry keep resolving against their
    own siblings.
    """

    def __init__(self, language: str | None = None):
        self.language = language
        self._entries: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Registry(language={self.language!r}, {len(self._entries)} entries)"

    # Builder-only
    def _put(self, key: str, entry: Any) -> None:
        self._entries[key] = entry

    def __getitem__(self, key: str) -> Any:
        entry = self._entries.get(key, _MISSING)
        if entry is _MISSING:
            raise UnknownEntryError(key)
        return entry

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str, default: Any = None) -> Any:
        """Get an entry by key, or default if absent."""
        return self._entries.get(key, default)

    def keys(self) -> list[str]:
        return list(self._entries)

    def items(self) -> list[tuple[str, Any]]:
        return list(self._entries.items())

    def kind_of(self, key: str) -> EntryKind:
        """Get the kind of an entry.

        Raises:
            UnknownEntryError: if the key is not registered
        """
        entry = self[key]
        if isinstance(entry, EntryResolver):
            return entry.kind
        return EntryKind.STATIC

    def by_kind(self, kind: EntryKind) -> list[str]:
        """Get all keys of one kind."""
        return [key for key in self._entries if self.kind_of(key) == kind]

    def count(self) -> int:
        """Get total number of entries."""
        return len(self._entries)

    def describe_entry(self, key: str) -> dict:
        """Summary of one entry.

        Raises:
            UnknownEntryError: if the key is not registered
        """
        entry = self[key]
        if isinstance(entry, EntryResolver):
            return entry.describe()
        return {"key": key, "kind": "static", "value": entry}

    def describe(self) -> dict:
        """Listing of all entries, sorted by key."""
        entries = [self.describe_entry(key) for key in sorted(self._entries)]

        kinds: dict[str, int] = {}
        for info in entries:
            kinds[info["kind"]] = kinds.get(info["kind"], 0) + 1

        return {
            "language": self.language,
            "total_entries": len(entries),
            "kinds": kinds,
            "entries": entries,
        }
