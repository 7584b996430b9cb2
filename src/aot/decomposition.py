# src/aot/decomposition.py
"""Decomposition state machine.

A decomposition moves from Open (accepting sub-atoms) to Completed
(immutable, eligible for contraction). Contraction itself is a side effect
on the original atom and lives in ``aot.propagation``; the decomposition
stays Completed afterwards.
"""

from __future__ import annotations

import logging

from aot.exceptions import DecompositionStateError
from aot.models import Decomposition
from aot.models.atom import now_ms
from aot.session import Session

logger = logging.getLogger(__name__)


def new_decomposition_id(session: Session) -> str:
    """Generate a time-based decomposition id that is unique within the session."""
    base = f"decomp_{now_ms()}"
    candidate = base
    suffix = 1
    while candidate in session.decompositions:
        suffix += 1
        candidate = f"{base}_{suffix}"
    return candidate


def start_decomposition(session: Session, atom_id: str) -> str:
    """Open a decomposition of ``atom_id`` and make it the current one.

    Raises:
        AtomReferenceError: If the atom does not exist
    """
    session.require_atom(atom_id)

    decomposition_id = new_decomposition_id(session)
    session.decompositions[decomposition_id] = Decomposition(
        decomposition_id=decomposition_id,
        original_atom_id=atom_id,
    )
    session.current_decomposition_id = decomposition_id
    logger.info("Starting decomposition of atom %s (ID: %s)", atom_id, decomposition_id)
    return decomposition_id


def add_to_decomposition(session: Session, decomposition_id: str, atom_id: str) -> list[str]:
    """Attach ``atom_id`` as a sub-atom one level below the decomposed atom.

    The sub-atom's depth is overwritten with ``parent depth + 1``.

    Returns:
        Non-fatal warnings (the depth ceiling was reached)

    Raises:
        AtomReferenceError: If the decomposition or atom does not exist
        DecompositionStateError: If the decomposition is already completed
    """
    decomposition = session.require_decomposition(decomposition_id)
    if decomposition.is_completed:
        raise DecompositionStateError(f"Decomposition {decomposition_id} is already completed")
    atom = session.require_atom(atom_id)

    parent = session.require_atom(decomposition.original_atom_id)
    atom.depth = (parent.depth or 0) + 1

    warnings: list[str] = []
    if atom.depth >= session.max_depth:
        warnings.append(f"Maximum depth {session.max_depth} reached with atom {atom_id}")

    decomposition.sub_atoms.append(atom_id)
    logger.info("Added atom %s to decomposition %s", atom_id, decomposition_id)
    return warnings


def complete_decomposition(session: Session, decomposition_id: str) -> bool:
    """Mark a decomposition Completed and release it as the current one.

    Raises:
        AtomReferenceError: If the decomposition does not exist
    """
    decomposition = session.require_decomposition(decomposition_id)
    decomposition.is_completed = True
    if session.current_decomposition_id == decomposition_id:
        session.current_decomposition_id = None
    logger.info("Completed decomposition %s", decomposition_id)
    return True


def contraction_candidates(session: Session, verified_ids: list[str]) -> list[Decomposition]:
    """Completed decompositions touched by ``verified_ids`` whose sub-atoms are all verified."""
    touched = set(verified_ids)
    candidates = []
    for decomposition in session.decompositions.values():
        if not decomposition.is_completed or not touched.intersection(decomposition.sub_atoms):
            continue
        sub_atoms = [session.store.get(atom_id) for atom_id in decomposition.sub_atoms]
        if all(atom is not None and atom.is_verified for atom in sub_atoms):
            candidates.append(decomposition)
    return candidates
