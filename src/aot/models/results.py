# src/aot/models/results.py
"""Result payload models returned by the engine.

All payloads serialise with camelCase keys via ``to_payload()`` so they can
be handed to the transport unchanged.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from aot.models.atom import Atom, AtomType


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialise with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)


class TerminationStatus(_Payload):
    """Advisory stopping signal."""

    should_terminate: bool
    reason: str


class ConclusionSummary(_Payload):
    """Short form of a conclusion atom."""

    atom_id: str
    content: str
    confidence: float

    @classmethod
    def from_atom(cls, atom: Atom | None) -> ConclusionSummary | None:
        if atom is None:
            return None
        return cls(atom_id=atom.atom_id, content=atom.content, confidence=atom.confidence)


class LightAtomResult(_Payload):
    """Reduced ingest result returned by the lightweight engine."""

    atom_id: str
    atom_type: AtomType
    is_verified: bool
    confidence: float
    atoms_count: int
    best_conclusion: ConclusionSummary | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return True


class AtomResult(LightAtomResult):
    """Full ingest result describing the atom and the surrounding graph state."""

    depth: int | None = None
    dependent_atoms: list[str] = Field(default_factory=list)
    conflicting_atoms: list[str] = Field(default_factory=list)
    verified_conclusions: list[str] = Field(default_factory=list)
    termination_status: TerminationStatus | None = None
    current_decomposition: str | None = None


class IngestFailure(_Payload):
    """Recoverable ingest failure."""

    error: str
    status: Literal["failed"] = "failed"

    @property
    def success(self) -> bool:
        return False


IngestResult = AtomResult | LightAtomResult | IngestFailure
