"""Entry endpoints.

- GET  /entries               - list the active registry
- GET  /entries/{key}         - describe one entry
- POST /entries/{key}/resolve - resolve an entry with a parameter bag
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from parrot.api.dependencies import get_engine
from parrot.api.models import ResolveRequest, ResolveResponse
from parrot.controller import Parrot
from parrot.core.errors import HolderResolutionError, UnknownEntryError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries")


@router.get("")
def list_entries(engine: Parrot = Depends(get_engine)) -> dict:
    """List all entries of the active registry."""
    return engine.registry.describe()


@router.get("/{key}")
def get_entry(key: str, engine: Parrot = Depends(get_engine)) -> dict:
    """Describe one entry."""
    try:
        return engine.registry.describe_entry(key)
    except UnknownEntryError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


@router.post("/{key}/resolve", response_model=ResolveResponse)
def resolve_entry(key: str, request: ResolveRequest, engine: Parrot = Depends(get_engine)):
    """Resolve an entry.

    Missing parameters are not an error: their tokens stay in the text.
    An unknown key is 404; a holder cycle or over-deep chain is 409.
    """
    params = dict(request.params)
    try:
        text = engine.resolve(key, params)
    except UnknownEntryError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None
    except HolderResolutionError as e:
        logger.warning("[API] Holder resolution failed for %s: %s", key, e)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from None
    return ResolveResponse(key=key, text=text, params=params)
