# tests/stores/test_base.py
"""Tests for storage abstract base classes."""

from abc import ABC

import pytest

from aot.stores import AtomStore


class TestAtomStoreABC:
    def test_is_abstract(self):
        assert issubclass(AtomStore, ABC)

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            AtomStore()

    def test_has_required_methods(self):
        assert hasattr(AtomStore, "put")
        assert hasattr(AtomStore, "get")
        assert hasattr(AtomStore, "get_many")
        assert hasattr(AtomStore, "list_ids")
        assert hasattr(AtomStore, "list_atoms")
        assert hasattr(AtomStore, "count_atoms")
