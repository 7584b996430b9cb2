# src/aot/session.py
"""Per-engine reasoning session state."""

from __future__ import annotations

from dataclasses import dataclass, field

from aot.exceptions import AtomReferenceError
from aot.models import Atom, Decomposition
from aot.settings import DEFAULT_MAX_DEPTH
from aot.stores import AtomStore, InMemoryAtomStore


@dataclass
class Session:
    """Everything one engine instance knows about its reasoning session.

    Attributes:
        store: Atoms keyed by id, in insertion order
        verified_conclusions: Ids of verified conclusion atoms, in verification order
        decompositions: Decomposition records keyed by id
        current_decomposition_id: The open decomposition new atoms attach to
        max_depth: Depth ceiling used for warnings and termination
    """

    store: AtomStore = field(default_factory=InMemoryAtomStore)
    verified_conclusions: list[str] = field(default_factory=list)
    decompositions: dict[str, Decomposition] = field(default_factory=dict)
    current_decomposition_id: str | None = None
    max_depth: int | float = DEFAULT_MAX_DEPTH

    def require_atom(self, atom_id: str) -> Atom:
        """Return the atom or raise AtomReferenceError."""
        atom = self.store.get(atom_id)
        if atom is None:
            raise AtomReferenceError(f"Atom with ID {atom_id} not found")
        return atom

    def require_decomposition(self, decomposition_id: str) -> Decomposition:
        """Return the decomposition or raise AtomReferenceError."""
        decomposition = self.decompositions.get(decomposition_id)
        if decomposition is None:
            raise AtomReferenceError(f"Decomposition with ID {decomposition_id} not found")
        return decomposition

    def mark_conclusion(self, atom: Atom) -> None:
        """Keep the verified-conclusion list in step with an atom's type and flag."""
        if atom.is_conclusion and atom.is_verified:
            if atom.atom_id not in self.verified_conclusions:
                self.verified_conclusions.append(atom.atom_id)
        elif atom.atom_id in self.verified_conclusions:
            self.verified_conclusions.remove(atom.atom_id)

    @property
    def atoms_count(self) -> int:
        return self.store.count_atoms()
