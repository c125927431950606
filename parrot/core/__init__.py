"""Core types and errors for Parrot.

Blueprint data structures are pydantic models with attribute access.
"""

from parrot.core.errors import (
    BlueprintError,
    EntryKindError,
    HolderCycleError,
    HolderDepthError,
    HolderResolutionError,
    ParrotError,
    PredicateSyntaxError,
    UnknownEntryError,
    UnknownLanguageError,
)
from parrot.core.types import Blueprint, BlueprintNode, EntryKind, Params

__all__ = [
    # Types
    "Blueprint",
    "BlueprintNode",
    "EntryKind",
    "Params",
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
