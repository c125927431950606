"""HTTP surface for the resolution engine."""

from parrot.api.app import create_app

__all__ = ["create_app"]
