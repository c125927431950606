"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from parrot.controller import Parrot


def get_engine(request: Request) -> Parrot:
    """Get the Parrot instance the app was created with."""
    return request.app.state.parrot
