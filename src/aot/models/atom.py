# src/aot/models/atom.py
"""Atom data model."""

from __future__ import annotations

import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class AtomType(str, Enum):
    """The closed set of reasoning atom kinds."""

    PREMISE = "premise"
    REASONING = "reasoning"
    HYPOTHESIS = "hypothesis"
    VERIFICATION = "verification"
    CONCLUSION = "conclusion"


class Atom(BaseModel):
    """A single unit of reasoning linked to earlier atoms by dependency edges."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    atom_id: str
    content: str
    atom_type: AtomType
    dependencies: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    created: int = Field(default_factory=now_ms)
    is_verified: bool = False
    depth: int | None = None  # Derived at ingestion when absent

    @property
    def is_hypothesis(self) -> bool:
        return self.atom_type is AtomType.HYPOTHESIS

    @property
    def is_conclusion(self) -> bool:
        return self.atom_type is AtomType.CONCLUSION

    @property
    def is_verification(self) -> bool:
        return self.atom_type is AtomType.VERIFICATION
