# src/aot/stores/memory.py
"""In-memory atom store implementation."""

from aot.models import Atom
from aot.stores.base import AtomStore


class InMemoryAtomStore(AtomStore):
    """Dict-backed atom store that lives for the lifetime of the process."""

    def __init__(self) -> None:
        self._atoms: dict[str, Atom] = {}
        self._order: list[str] = []

    def put(self, atom: Atom) -> bool:
        """Store an atom, overwriting if exists."""
        is_new = atom.atom_id not in self._atoms
        self._atoms[atom.atom_id] = atom
        if is_new:
            self._order.append(atom.atom_id)
        return is_new

    def get(self, atom_id: str) -> Atom | None:
        """Retrieve an atom by ID."""
        return self._atoms.get(atom_id)

    def list_ids(self) -> list[str]:
        """List all atom IDs in insertion order."""
        return list(self._order)

    def count_atoms(self) -> int:
        """Count the total number of atoms in the store."""
        return len(self._atoms)
