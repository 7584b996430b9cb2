# src/aot/models/__init__.py
"""Data models for the Atom of Thoughts engine."""

from aot.models.atom import Atom, AtomType
from aot.models.decomposition import Decomposition
from aot.models.results import (
    AtomResult,
    ConclusionSummary,
    IngestFailure,
    IngestResult,
    LightAtomResult,
    TerminationStatus,
)

__all__ = [
    "Atom",
    "AtomType",
    "Decomposition",
    "AtomResult",
    "LightAtomResult",
    "IngestFailure",
    "IngestResult",
    "ConclusionSummary",
    "TerminationStatus",
]
