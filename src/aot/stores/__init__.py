# src/aot/stores/__init__.py
"""Storage abstractions for the Atom of Thoughts engine."""

from aot.stores.base import AtomStore
from aot.stores.memory import InMemoryAtomStore

__all__ = [
    "AtomStore",
    "InMemoryAtomStore",
]
