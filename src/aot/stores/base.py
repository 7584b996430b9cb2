# src/aot/stores/base.py
"""Abstract base class for atom storage."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from aot.models import Atom


class AtomStore(ABC):
    """Abstract base class for atom storage.

    Stores keep atoms keyed by id and remember the order in which ids were
    first inserted. Atoms are never deleted.
    """

    @abstractmethod
    def put(self, atom: Atom) -> bool:
        """Store an atom, overwriting if it exists. Returns True if the id is new."""
        ...

    @abstractmethod
    def get(self, atom_id: str) -> Atom | None:
        """Retrieve an atom by ID. Returns None if not found."""
        ...

    @abstractmethod
    def list_ids(self) -> list[str]:
        """List all atom IDs in insertion order."""
        ...

    @abstractmethod
    def count_atoms(self) -> int:
        """Count the total number of atoms in the store."""
        ...

    def get_many(self, atom_ids: list[str]) -> list[Atom]:
        """Retrieve multiple atoms by ID. Skips missing atoms."""
        atoms = (self.get(atom_id) for atom_id in atom_ids)
        return [atom for atom in atoms if atom is not None]

    def list_atoms(self) -> list[Atom]:
        """List all atoms in insertion order."""
        return self.get_many(self.list_ids())

    def __contains__(self, atom_id: object) -> bool:
        return isinstance(atom_id, str) and self.get(atom_id) is not None

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.list_atoms())

    def __len__(self) -> int:
        return self.count_atoms()
