"""Language endpoints.

- PUT  /language                       - build and publish a blueprint
- PUT  /languages/{language}           - register a blueprint in the catalog
- POST /languages/{language}/activate  - publish a catalog language
"""

from fastapi import APIRouter, Depends, HTTPException, status

from parrot.api.dependencies import get_engine
from parrot.api.models import ActivateRequest, ActivateResponse, LanguageResponse
from parrot.controller import Parrot
from parrot.core.errors import UnknownLanguageError
from parrot.core.types import Blueprint

router = APIRouter()


@router.put("/language", response_model=ActivateResponse)
def activate_blueprint(request: ActivateRequest, engine: Parrot = Depends(get_engine)):
    """Build a registry from the posted blueprint and publish it."""
    registry = engine.activate(request.blueprint, language=request.language)
    return ActivateResponse(language=registry.language, total_entries=len(registry))


@router.put("/languages/{language}", response_model=LanguageResponse)
def register_language(language: str, blueprint: Blueprint, engine: Parrot = Depends(get_engine)):
    """Add or replace a language blueprint in the catalog (not activated)."""
    engine.catalog.add(language, blueprint)
    return LanguageResponse(
        language=language,
        default_language=engine.catalog.default_language,
        languages=engine.catalog.languages(),
    )


@router.post("/languages/{language}/activate", response_model=ActivateResponse)
def activate_language(language: str, engine: Parrot = Depends(get_engine)):
    """Publish a catalog language; unknown codes use the default language."""
    try:
        registry = engine.use_language(language)
    except UnknownLanguageError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    return ActivateResponse(language=registry.language, total_entries=len(registry))
