"""Exception types raised by the resolution engine.

Missing interpolation parameters never raise: unresolved tokens stay in
the output. These exceptions are reserved for caller and authoring errors.
"""


class ParrotError(Exception):
    """Base class for all engine errors."""


class UnknownEntryError(ParrotError, LookupError):
    """A key was queried directly but is not in the active registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown entry: {key!r}")


class EntryKindError(ParrotError, TypeError):
    """An entry was queried through a helper that does not fit its kind."""

    def __init__(self, key: str, expected: str):
        self.key = key
        self.expected = expected
        super().__init__(f"Entry {key!r} is not {expected}")


class HolderResolutionError(ParrotError):
    """Holder indirection could not terminate."""

    def __init__(self, message: str, chain: tuple[str, ...]):
        self.chain = chain
        super().__init__(message)


class HolderCycleError(HolderResolutionError):
    """A holder chain led back to an entry that is still being resolved."""

    def __init__(self, chain: tuple[str, ...]):
        super().__init__(f"Holder cycle: {' -> '.join(chain)}", chain)


class HolderDepthError(HolderResolutionError):
    """A holder chain exceeded the configured maximum depth."""

    def __init__(self, chain: tuple[str, ...], limit: int):
        self.limit = limit
        super().__init__(
            f"Holder chain exceeds depth {limit}: {' -> '.join(chain)}", chain
        )


class PredicateSyntaxError(ParrotError, ValueError):
    """A condition's source expression could not be compiled."""

    def __init__(self, source: str, reason: str, position: int | None = None):
        self.source = source
        self.reason = reason
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid condition {source!r}{where}: {reason}")


class BlueprintError(ParrotError, ValueError):
    """A blueprint does not have the Static/Dynamic shape the engine consumes."""


class UnknownLanguageError(ParrotError, LookupError):
    """No blueprint is registered for a language (nor for the default)."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"No blueprint registered for language {language!r}")
