# src/aot/propagation.py
"""Verification and confidence propagation.

Verifying atoms can cascade:

    verification atom verified
        -> its hypothesis/conclusion dependencies are verified
           (on ingestion every dependency is verified, each through its own path)
        -> completed decompositions whose sub-atoms are now all verified contract
        -> the contracted atom gets the mean sub-atom confidence and is verified
        -> a confident contracted hypothesis yields a synthesized conclusion
        -> the contracted atom may itself complete an outer decomposition
"""

from __future__ import annotations

import logging

from aot.decomposition import contraction_candidates
from aot.models import Atom, AtomType
from aot.session import Session
from aot.settings import Settings

logger = logging.getLogger(__name__)

# Dependency kinds a verified verification atom vouches for
VERIFIABLE_DEPENDENCIES = (AtomType.HYPOTHESIS, AtomType.CONCLUSION)


def clamp_confidence(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def update_confidence(session: Session, atom_id: str, value: float) -> float:
    """Overwrite an atom's confidence, clamped into [0, 1].

    Raises:
        AtomReferenceError: If the atom does not exist
    """
    atom = session.require_atom(atom_id)
    atom.confidence = clamp_confidence(value)
    return atom.confidence


def _set_verified(session: Session, atom: Atom, is_verified: bool) -> None:
    atom.is_verified = is_verified
    session.mark_conclusion(atom)


def verify(
    session: Session,
    atom_id: str,
    is_verified: bool = True,
    settings: Settings | None = None,
) -> list[str]:
    """Set an atom's verification flag and propagate the effects.

    Returns:
        Ids of conclusions synthesized by any resulting contraction

    Raises:
        AtomReferenceError: If the atom does not exist
    """
    atom = session.require_atom(atom_id)
    if not is_verified:
        _set_verified(session, atom, False)
        return []
    return check_for_contraction(session, _mark_verified(session, atom), settings)


def _mark_verified(session: Session, atom: Atom) -> list[str]:
    """Flag ``atom`` verified plus the dependencies it vouches for; returns their ids."""
    _set_verified(session, atom, True)
    newly_verified = [atom.atom_id]
    if atom.is_verification:
        for dependency in session.store.get_many(atom.dependencies):
            if dependency.atom_type in VERIFIABLE_DEPENDENCIES:
                _set_verified(session, dependency, True)
                newly_verified.append(dependency.atom_id)
    return newly_verified


def verify_dependencies(
    session: Session,
    atom: Atom,
    settings: Settings | None = None,
) -> list[str]:
    """Verify every stored dependency of a pre-verified verification atom.

    Each dependency is verified the way ``verify`` would verify it, so a
    dependency that is itself a verification atom vouches for its own
    hypotheses. One contraction check then runs over everything newly
    verified, the atom itself included.

    Returns:
        Ids of conclusions synthesized by any resulting contraction
    """
    newly_verified = [atom.atom_id]
    for dependency in session.store.get_many(atom.dependencies):
        newly_verified.extend(_mark_verified(session, dependency))
    return check_for_contraction(session, newly_verified, settings)


def check_for_contraction(
    session: Session,
    verified_ids: list[str],
    settings: Settings | None = None,
) -> list[str]:
    """Contract every completed decomposition that ``verified_ids`` finished off.

    Contraction cascades upward through nested decompositions; each
    decomposition contracts at most once per call.

    Returns:
        Ids of conclusions synthesized along the way
    """
    settings = settings or Settings()
    contracted: set[str] = set()
    synthesized: list[str] = []
    pending = list(verified_ids)

    while pending:
        candidates = [
            decomposition
            for decomposition in contraction_candidates(session, pending)
            if decomposition.decomposition_id not in contracted
        ]
        pending = []
        for decomposition in candidates:
            contracted.add(decomposition.decomposition_id)
            conclusion_id = perform_contraction(session, decomposition.decomposition_id, settings)
            if conclusion_id is not None:
                synthesized.append(conclusion_id)
            pending.append(decomposition.original_atom_id)

    return synthesized


def perform_contraction(
    session: Session,
    decomposition_id: str,
    settings: Settings | None = None,
) -> str | None:
    """Fold a decomposition's sub-atoms back into its original atom.

    The original atom's confidence becomes the arithmetic mean of its
    sub-atoms' confidences and it is marked verified.

    Returns:
        Id of the synthesized conclusion, if the original atom is a confident hypothesis
    """
    settings = settings or Settings()
    decomposition = session.require_decomposition(decomposition_id)
    original = session.require_atom(decomposition.original_atom_id)

    confidences = [
        atom.confidence if atom is not None else 0.0
        for atom in (session.store.get(atom_id) for atom_id in decomposition.sub_atoms)
    ]
    if not confidences:
        return None

    update_confidence(session, original.atom_id, sum(confidences) / len(confidences))
    _set_verified(session, original, True)
    logger.info(
        "Contracted decomposition %s back to atom %s with confidence %.0f%%",
        decomposition_id,
        original.atom_id,
        original.confidence * 100,
    )

    if original.is_hypothesis and original.confidence >= settings.promotion_threshold:
        return suggest_conclusion(session, original, settings)
    return None


def next_conclusion_id(session: Session) -> str:
    """Next unused ``C<n>`` id."""
    n = sum(1 for atom_id in session.store.list_ids() if atom_id.startswith("C")) + 1
    while f"C{n}" in session.store:
        n += 1
    return f"C{n}"


def suggest_conclusion(
    session: Session,
    hypothesis: Atom,
    settings: Settings | None = None,
) -> str:
    """Synthesize an unverified conclusion that depends solely on ``hypothesis``."""
    settings = settings or Settings()
    conclusion = Atom(
        atom_id=next_conclusion_id(session),
        content=f"Based on verified hypothesis: {hypothesis.content}",
        atom_type=AtomType.CONCLUSION,
        dependencies=[hypothesis.atom_id],
        confidence=clamp_confidence(hypothesis.confidence * settings.conclusion_confidence_factor),
        is_verified=False,
        depth=hypothesis.depth,
    )
    session.store.put(conclusion)
    logger.info(
        "Suggested conclusion %s based on verified hypothesis %s",
        conclusion.atom_id,
        hypothesis.atom_id,
    )
    return conclusion.atom_id
