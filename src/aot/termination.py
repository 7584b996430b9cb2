# src/aot/termination.py
"""Automatic termination policy.

Termination is advisory: the engine never refuses atoms, it only reports
whether a caller should stop issuing them.
"""

from __future__ import annotations

from aot.models import Atom, TerminationStatus
from aot.session import Session
from aot.settings import Settings

REASON_BOTH = "Maximum depth reached and strong conclusion found"
REASON_MAX_DEPTH = "Maximum depth reached"
REASON_STRONG_CONCLUSION = "Strong conclusion found"
REASON_CONTINUE = "Continue reasoning"


def at_max_depth(session: Session) -> bool:
    """True if any atom sits at or beyond the depth ceiling."""
    return any(
        atom.depth is not None and atom.depth >= session.max_depth
        for atom in session.store.list_atoms()
    )


def has_strong_conclusion(session: Session, settings: Settings | None = None) -> bool:
    """True if any verified conclusion meets the strong-conclusion threshold."""
    threshold = (settings or Settings()).strong_conclusion_threshold
    return any(
        atom.confidence >= threshold
        for atom in session.store.get_many(session.verified_conclusions)
    )


def termination_status(session: Session, settings: Settings | None = None) -> TerminationStatus:
    """Evaluate both stopping predicates and explain the outcome."""
    max_depth = at_max_depth(session)
    strong = has_strong_conclusion(session, settings)

    if max_depth and strong:
        return TerminationStatus(should_terminate=True, reason=REASON_BOTH)
    if max_depth:
        return TerminationStatus(should_terminate=True, reason=REASON_MAX_DEPTH)
    if strong:
        return TerminationStatus(should_terminate=True, reason=REASON_STRONG_CONCLUSION)
    return TerminationStatus(should_terminate=False, reason=REASON_CONTINUE)


def should_terminate(session: Session, settings: Settings | None = None) -> bool:
    return at_max_depth(session) or has_strong_conclusion(session, settings)


def best_conclusion(session: Session) -> Atom | None:
    """Highest-confidence verified conclusion; ties go to the earliest verified."""
    conclusions = session.store.get_many(session.verified_conclusions)
    if not conclusions:
        return None
    # max() keeps the first of equal maxima
    return max(conclusions, key=lambda atom: atom.confidence)
