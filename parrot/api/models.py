"""Request/response models for the Parrot API."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from parrot.core.types import Blueprint


class StoreName(str, Enum):
    """Default store selector used in paths."""

    PLACEHOLDERS = "placeholders"
    VARIANTS = "variants"


class ActivateRequest(BaseModel):
    """Blueprint to build and publish."""

    blueprint: Blueprint
    language: str | None = None


class ActivateResponse(BaseModel):
    language: str | None
    total_entries: int


class LanguageResponse(BaseModel):
    language: str
    default_language: str
    languages: list[str]


class ResolveRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)


class ResolveResponse(BaseModel):
    """Resolved text plus the parameter bag after holder substitution."""

    key: str
    text: Any
    params: dict[str, Any]


class DefaultsResponse(BaseModel):
    store: StoreName
    values: dict[str, Any]


class DefaultsUpdate(BaseModel):
    values: dict[str, Any]


class DefaultValue(BaseModel):
    value: str | int | float
