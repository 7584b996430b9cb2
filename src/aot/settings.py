# src/aot/settings.py
"""Behavioral settings for the Atom of Thoughts engine.

Settings are passed programmatically - the library does not read from
environment variables. The CLI layer (see ``aot.config``) reads env vars and
YAML files and passes values explicitly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_DEPTH = 5
LIGHT_MAX_DEPTH = 3


class Settings(BaseModel):
    """Thresholds and depth ceilings shared by both engine variants.

    Example:
        settings = Settings(max_depth=8, strong_conclusion_threshold=0.95)
    """

    # Depth ceilings
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)
    light_max_depth: int = Field(default=LIGHT_MAX_DEPTH, gt=0)

    # A hypothesis at or above this confidence yields a synthesized conclusion
    promotion_threshold: float = Field(default=0.8, ge=0.0, le=1.0)

    # A verified conclusion at or above this confidence ends reasoning
    strong_conclusion_threshold: float = Field(default=0.9, ge=0.0, le=1.0)

    # Synthesized conclusion confidence = hypothesis confidence * factor
    conclusion_confidence_factor: float = Field(default=0.9, ge=0.0, le=1.0)

    # Server-side rendering of ingested atoms on stderr
    render_atoms: bool = True


class EnginePolicy(BaseModel):
    """Capability switches that distinguish the engine variants.

    Attributes:
        variant: Human-readable variant name
        max_depth: Initial depth ceiling for the session
        promote_hypotheses: Synthesize a conclusion as soon as a confident
            hypothesis is ingested, bypassing decomposition/contraction
        detailed_results: Include graph, termination and decomposition data
            in ingest results
    """

    model_config = ConfigDict(frozen=True)

    variant: Literal["full", "light"] = "full"
    max_depth: int | float = DEFAULT_MAX_DEPTH
    promote_hypotheses: bool = False
    detailed_results: bool = True

    @classmethod
    def full(cls, settings: Settings | None = None, max_depth: int | None = None) -> EnginePolicy:
        """Policy for the full engine."""
        settings = settings or Settings()
        return cls(
            variant="full",
            max_depth=max_depth if max_depth is not None and max_depth > 0 else settings.max_depth,
            promote_hypotheses=False,
            detailed_results=True,
        )

    @classmethod
    def light(cls, settings: Settings | None = None) -> EnginePolicy:
        """Policy for the lightweight engine: lower ceiling, immediate promotion."""
        settings = settings or Settings()
        return cls(
            variant="light",
            max_depth=settings.light_max_depth,
            promote_hypotheses=True,
            detailed_results=False,
        )
