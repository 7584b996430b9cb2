# src/aot/engine.py
"""Atom of Thoughts engine.

One class serves both variants; an ``EnginePolicy`` decides the depth
ceiling, whether confident hypotheses are promoted to conclusions on
ingestion, and how much graph state the ingest result carries.

Ingestion pipeline (each step short-circuits on failure, and nothing is
stored until validation and dependency checks have passed):

1. Validate the raw record
2. Check that every dependency exists (and no cycle is closed)
3. Derive depth from dependencies when absent; warn past the ceiling
4. Store the atom
5. Attach it to the open decomposition, if any (best effort)
6. Verify every dependency of a verified verification atom
7. Promote a confident hypothesis straight to a conclusion (light policy)
8. Evaluate termination and assemble the result
"""

from __future__ import annotations

import logging
from typing import Any

from aot import decomposition, graph, propagation, termination
from aot.exceptions import AoTError, CommandError
from aot.models import (
    Atom,
    AtomResult,
    ConclusionSummary,
    IngestFailure,
    IngestResult,
    LightAtomResult,
    TerminationStatus,
)
from aot.session import Session
from aot.settings import EnginePolicy, Settings
from aot.validation import validate_atom_data

logger = logging.getLogger(__name__)


class Engine:
    """Owns one reasoning session and runs every operation against it.

    Example:
        engine = Engine.full(max_depth=4)
        engine.process_atom({
            "atomId": "P1",
            "content": "All squares are rectangles",
            "atomType": "premise",
            "dependencies": [],
            "confidence": 0.95,
        })
        decomposition_id = engine.start_decomposition("P1")
    """

    def __init__(
        self,
        policy: EnginePolicy | None = None,
        settings: Settings | None = None,
        session: Session | None = None,
    ) -> None:
        """Create an engine.

        Args:
            policy: Variant switches. Defaults to the full policy.
            settings: Thresholds. Defaults to ``Settings()``.
            session: Existing session to operate on. A fresh one is created
                with the policy's depth ceiling when omitted.
        """
        self.settings = settings if settings is not None else Settings()
        self.policy = policy if policy is not None else EnginePolicy.full(self.settings)
        self.session = session if session is not None else Session(max_depth=self.policy.max_depth)

    @classmethod
    def full(cls, max_depth: int | None = None, settings: Settings | None = None) -> Engine:
        """Full engine; ``max_depth`` overrides the settings ceiling when positive."""
        return cls(policy=EnginePolicy.full(settings, max_depth=max_depth), settings=settings)

    @classmethod
    def light(cls, settings: Settings | None = None) -> Engine:
        """Lightweight engine with a lower ceiling and immediate promotion."""
        return cls(policy=EnginePolicy.light(settings), settings=settings)

    # ------------------------------------------------------------------
    # Session accessors

    @property
    def max_depth(self) -> int | float:
        return self.session.max_depth

    def set_max_depth(self, max_depth: int | float) -> None:
        """Change the depth ceiling.

        Raises:
            CommandError: If ``max_depth`` is not a positive number
        """
        is_number = isinstance(max_depth, (int, float)) and not isinstance(max_depth, bool)
        if not is_number or not max_depth > 0:
            raise CommandError("maxDepth must be a positive number")
        self.session.max_depth = max_depth
        logger.info("Maximum depth set to %s", max_depth)

    def get_atom(self, atom_id: str) -> Atom | None:
        return self.session.store.get(atom_id)

    @property
    def atoms_count(self) -> int:
        return self.session.atoms_count

    @property
    def verified_conclusions(self) -> list[str]:
        return list(self.session.verified_conclusions)

    @property
    def current_decomposition_id(self) -> str | None:
        return self.session.current_decomposition_id

    # ------------------------------------------------------------------
    # Ingestion

    def process_atom(self, data: Any) -> IngestResult:
        """Ingest a raw atom record and describe the resulting graph state.

        Never raises for bad input: errors come back as ``IngestFailure``.
        """
        try:
            atom, warnings = self.ingest(data)
        except AoTError as e:
            logger.debug("Rejected atom: %s", e)
            return IngestFailure(error=str(e))
        return self._build_result(atom, warnings)

    def ingest(self, data: Any) -> tuple[Atom, list[str]]:
        """Run the ingestion pipeline and return the stored atom plus warnings.

        Raises:
            AtomValidationError: If the record is malformed
            AtomReferenceError: If a dependency does not resolve
        """
        session = self.session
        atom = validate_atom_data(data)
        graph.check_dependencies(session.store, atom)

        if atom.depth is None:
            atom.depth = graph.derive_depth(session.store, atom.dependencies)

        warnings: list[str] = []
        if atom.depth > session.max_depth:
            warnings.append(f"Atom {atom.atom_id} exceeds maximum depth {session.max_depth}")

        session.store.put(atom)
        session.mark_conclusion(atom)
        logger.debug(
            "Stored %s atom %s at depth %s", atom.atom_type.value, atom.atom_id, atom.depth
        )

        if session.current_decomposition_id is not None:
            try:
                warnings.extend(
                    decomposition.add_to_decomposition(
                        session, session.current_decomposition_id, atom.atom_id
                    )
                )
            except AoTError as e:
                warnings.append(f"Could not add atom to current decomposition: {e}")

        if atom.is_verification and atom.is_verified:
            propagation.verify_dependencies(session, atom, self.settings)

        if (
            self.policy.promote_hypotheses
            and atom.is_hypothesis
            and atom.confidence >= self.settings.promotion_threshold
        ):
            propagation.suggest_conclusion(session, atom, self.settings)

        return atom, warnings

    def _build_result(self, atom: Atom, warnings: list[str]) -> AtomResult | LightAtomResult:
        session = self.session
        status = self.termination_status()
        best = self.best_conclusion() if status.should_terminate else None
        if status.should_terminate:
            logger.info("Termination condition met: %s", status.reason)

        if not self.policy.detailed_results:
            return LightAtomResult(
                atom_id=atom.atom_id,
                atom_type=atom.atom_type,
                is_verified=atom.is_verified,
                confidence=atom.confidence,
                atoms_count=session.atoms_count,
                best_conclusion=ConclusionSummary.from_atom(best),
                warnings=warnings,
            )

        return AtomResult(
            atom_id=atom.atom_id,
            atom_type=atom.atom_type,
            is_verified=atom.is_verified,
            confidence=atom.confidence,
            depth=atom.depth,
            atoms_count=session.atoms_count,
            dependent_atoms=self.dependents(atom.atom_id),
            conflicting_atoms=self.conflicts(atom),
            verified_conclusions=self.verified_conclusions,
            termination_status=status,
            best_conclusion=ConclusionSummary.from_atom(best),
            current_decomposition=session.current_decomposition_id,
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Graph queries

    def dependents(self, atom_id: str) -> list[str]:
        return graph.dependents(self.session.store, atom_id)

    def conflicts(self, atom: Atom) -> list[str]:
        return graph.conflicts(self.session.store, atom)

    # ------------------------------------------------------------------
    # Verification and confidence

    def verify(self, atom_id: str, is_verified: bool = True) -> list[str]:
        """Set an atom's verification flag; returns ids of synthesized conclusions."""
        return propagation.verify(self.session, atom_id, is_verified, self.settings)

    def update_confidence(self, atom_id: str, confidence: float) -> float:
        return propagation.update_confidence(self.session, atom_id, confidence)

    # ------------------------------------------------------------------
    # Decomposition / contraction

    def start_decomposition(self, atom_id: str) -> str:
        return decomposition.start_decomposition(self.session, atom_id)

    def add_to_decomposition(self, decomposition_id: str, atom_id: str) -> list[str]:
        return decomposition.add_to_decomposition(self.session, decomposition_id, atom_id)

    def complete_decomposition(self, decomposition_id: str) -> bool:
        return decomposition.complete_decomposition(self.session, decomposition_id)

    # ------------------------------------------------------------------
    # Termination

    def termination_status(self) -> TerminationStatus:
        return termination.termination_status(self.session, self.settings)

    def should_terminate(self) -> bool:
        return termination.should_terminate(self.session, self.settings)

    def best_conclusion(self) -> Atom | None:
        return termination.best_conclusion(self.session)
