"""Core data types for Parrot.

Blueprints arrive from the ingestion pipeline as plain mappings; these
pydantic models validate and normalize them once, so the registry builder
only ever sees one shape.

Use attribute access: node.value, node.placeholders, blueprint.dynamic, etc.
"""

from enum import Enum, auto
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from parrot.core.errors import BlueprintError

# Per-call parameter bag. Values are strings or numbers; None means "absent".
Params = dict[str, Any]


class EntryKind(Enum):
    """How a registry entry produces its text."""

    STATIC = auto()  # constant, no parameters
    PLAIN = auto()  # interpolate value
    VARIANT = auto()  # pick a variant by discriminant, else value
    CONDITIONAL = auto()  # first matching condition, else value


def _split_names(raw: Any) -> list[str]:
    """Accept ["a", "b"] or "a, b" and return clean, non-empty names."""
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    names = []
    for item in raw:
        name = str(item).strip()
        if name:
            names.append(name)
    return names


class BlueprintNode(BaseModel):
    """Authoring-time definition of one dynamic entry."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    value: str = ""
    placeholders: list[str] = Field(default_factory=list)
    holders: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("holders", "parrotHolders"),
    )
    variants: dict[str, str] = Field(default_factory=dict)
    conditions: dict[str, str] = Field(default_factory=dict)
    desc: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _normalize_value(cls, v: Any) -> str:
        if not v:
            return ""
        return str(v)

    @field_validator("placeholders", "holders", mode="before")
    @classmethod
    def _normalize_names(cls, v: Any) -> list[str]:
        return _split_names(v)

    @field_validator("variants", "conditions", mode="before")
    @classmethod
    def _normalize_texts(cls, v: Any) -> dict[str, str]:
        # YAML turns `1: text` into an int key; discriminants are matched as strings
        if not v:
            return {}
        return {str(k): "" if t is None else str(t) for k, t in v.items()}

    @property
    def discriminant(self) -> str | None:
        """Name of the parameter that selects a variant."""
        return self.placeholders[0] if self.placeholders else None


class Blueprint(BaseModel):
    """A flattened blueprint: grouped constants plus grouped dynamic nodes.

    Group names only organize the source; they are discarded when the
    registry is built.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    static: dict[str, dict[str, Any]] = Field(default_factory=dict, alias="Static")
    dynamic: dict[str, dict[str, BlueprintNode]] = Field(
        default_factory=dict, alias="Dynamic"
    )

    @field_validator("static", "dynamic", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @classmethod
    def from_dict(cls, data: "Blueprint | dict") -> "Blueprint":
        """Validate raw blueprint data.

        Raises:
            BlueprintError: if the data does not have the expected shape
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise BlueprintError(f"Invalid blueprint: {e}") from e

    def entry_count(self) -> int:
        """Number of (group, key) pairs before flattening."""
        return sum(len(g) for g in self.static.values()) + sum(
            len(g) for g in self.dynamic.values()
        )
