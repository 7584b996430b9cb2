# src/aot/graph.py
"""Dependency graph queries over an atom store."""

from __future__ import annotations

from aot.exceptions import AtomReferenceError
from aot.models import Atom, AtomType
from aot.stores import AtomStore

# Only these kinds take part in conflict detection
CONFLICT_TYPES = (AtomType.HYPOTHESIS, AtomType.CONCLUSION)


def dependents(store: AtomStore, atom_id: str) -> list[str]:
    """Return the ids of all atoms that list ``atom_id`` as a dependency."""
    return [atom.atom_id for atom in store.list_atoms() if atom_id in atom.dependencies]


def conflicts(store: AtomStore, atom: Atom) -> list[str]:
    """Find hypotheses/conclusions that may contradict ``atom``.

    Two atoms are flagged when both are hypotheses or conclusions, their
    content differs and they share at least one dependency. This is a
    provenance heuristic, not a semantic check. Other atom kinds never
    conflict.
    """
    if atom.atom_type not in CONFLICT_TYPES:
        return []

    shared = set(atom.dependencies)
    return [
        other.atom_id
        for other in store.list_atoms()
        if other.atom_id != atom.atom_id
        and other.atom_type in CONFLICT_TYPES
        and other.content != atom.content
        and shared.intersection(other.dependencies)
    ]


def missing_dependencies(store: AtomStore, dependency_ids: list[str]) -> list[str]:
    """Return the dependency ids that do not resolve to a stored atom."""
    return [dep_id for dep_id in dependency_ids if dep_id not in store]


def derive_depth(store: AtomStore, dependency_ids: list[str]) -> int:
    """Depth of a new atom: one more than its deepest dependency, or 0 for roots."""
    depths = [atom.depth or 0 for atom in store.get_many(dependency_ids)]
    return max(depths) + 1 if depths else 0


def reaches(store: AtomStore, start_ids: list[str], target_id: str) -> bool:
    """True if ``target_id`` is reachable from ``start_ids`` along dependency edges."""
    seen: set[str] = set()
    stack = list(start_ids)
    while stack:
        atom_id = stack.pop()
        if atom_id == target_id:
            return True
        if atom_id in seen:
            continue
        seen.add(atom_id)
        atom = store.get(atom_id)
        if atom is not None:
            stack.extend(atom.dependencies)
    return False


def check_dependencies(store: AtomStore, atom: Atom) -> None:
    """Enforce referential integrity for an atom about to be stored.

    Raises:
        AtomReferenceError: If a dependency is missing, or if overwriting an
            existing atom would close a dependency cycle
    """
    missing = missing_dependencies(store, atom.dependencies)
    if missing:
        raise AtomReferenceError(
            f"Invalid dependencies: atoms not found: {', '.join(missing)}"
        )
    if atom.atom_id in store and reaches(store, atom.dependencies, atom.atom_id):
        raise AtomReferenceError(
            f"Invalid dependencies: atom {atom.atom_id} would depend on itself through a cycle"
        )
