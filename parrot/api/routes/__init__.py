"""API routers."""

from parrot.api.routes import defaults, entries, health, language

__all__ = ["defaults", "entries", "health", "language"]
