"""
Error types raised by the session core.

Two families:
- ConfigurationError: bad user-supplied parameters. Recoverable; the CLI
  prints the message and exits.
- StructuralError: the interface layer broke its own bookkeeping (popping
  the root screen, recording an outcome for a card that is not in the
  session). Not recoverable within the failing operation.
"""


class SessionError(Exception):
    """Base class for all session core errors."""


class ConfigurationError(SessionError, ValueError):
    """Invalid session parameters."""


class InvalidChunk(ConfigurationError):
    """Chunk index/count outside the allowed range, or unparseable."""

    def __init__(self, message: str, index: int | None = None, count: int | None = None):
        super().__init__(message)
        self.index = index
        self.count = count


class InvalidSubset(ConfigurationError):
    """Subset size that is not a positive integer."""

    def __init__(self, subset: int):
        super().__init__(f"The amount of cards must be a positive number, got {subset}")
        self.subset = subset


class StructuralError(SessionError, RuntimeError):
    """A control-flow bug in the caller."""


class EmptyStackError(StructuralError):
    """Pop or replace on an empty navigation stack."""


class NavigationError(StructuralError):
    """Navigation request that would remove the root screen."""


class OutcomePositionError(StructuralError, IndexError):
    """Review outcome recorded for a position outside the session."""

    def __init__(self, position: int, size: int):
        super().__init__(f"Position {position} is outside a session of {size} cards")
        self.position = position
        self.size = size
