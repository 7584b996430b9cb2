# src/aot/exceptions.py
"""Exceptions raised by the Atom of Thoughts engine.

All of them are recoverable: the public ingest and command operations catch
``AoTError`` and turn it into a failure result.
"""


class AoTError(Exception):
    """Base class for engine errors."""


class AtomValidationError(AoTError):
    """An input record is malformed or missing a required field.

    Attributes:
        field: Name of the first offending field (wire name, e.g. ``atomId``).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid {field}: {message}")
        self.field = field


class AtomReferenceError(AoTError):
    """A dependency, atom or decomposition id does not resolve."""


class DecompositionStateError(AoTError):
    """An operation was attempted against a decomposition that is already completed."""


class CommandError(AoTError):
    """An unknown or malformed command, or a missing companion argument."""
