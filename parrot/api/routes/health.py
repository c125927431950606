"""Health check endpoint."""

from fastapi import APIRouter, Depends

from parrot.api.dependencies import get_engine
from parrot.controller import Parrot

router = APIRouter()


@router.get("/health")
def health_check(engine: Parrot = Depends(get_engine)) -> dict:
    """Report service status and the active registry size."""
    return {
        "status": "healthy",
        "language": engine.active_language,
        "entries": len(engine.registry),
    }
