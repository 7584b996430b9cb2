"""Tests for dependency graph queries."""

import pytest

from aot import graph
from aot.exceptions import AtomReferenceError
from aot.models import Atom
from aot.stores import InMemoryAtomStore


def _put(store, atom_id, atom_type="premise", dependencies=(), content=None, depth=None):
    atom = Atom(
        atom_id=atom_id,
        content=content or f"content {atom_id}",
        atom_type=atom_type,
        dependencies=list(dependencies),
        confidence=0.5,
        depth=depth,
    )
    store.put(atom)
    return atom


@pytest.fixture
def store():
    return InMemoryAtomStore()


class TestDependents:
    def test_reverse_edges(self, store):
        _put(store, "P1")
        _put(store, "R1", "reasoning", ["P1"])
        _put(store, "H1", "hypothesis", ["R1", "P1"])
        assert graph.dependents(store, "P1") == ["R1", "H1"]
        assert graph.dependents(store, "H1") == []


class TestConflicts:
    def test_shared_dependency_and_different_content(self, store):
        _put(store, "P1")
        _put(store, "H1", "hypothesis", ["P1"], content="It rains")
        h2 = _put(store, "H2", "hypothesis", ["P1"], content="It is dry")
        _put(store, "C1", "conclusion", ["P1"], content="Take an umbrella")
        assert graph.conflicts(store, h2) == ["H1", "C1"]

    def test_same_content_does_not_conflict(self, store):
        _put(store, "P1")
        _put(store, "H1", "hypothesis", ["P1"], content="Same")
        h2 = _put(store, "H2", "hypothesis", ["P1"], content="Same")
        assert graph.conflicts(store, h2) == []

    def test_no_shared_dependency(self, store):
        _put(store, "P1")
        _put(store, "P2")
        _put(store, "H1", "hypothesis", ["P1"])
        h2 = _put(store, "H2", "hypothesis", ["P2"])
        assert graph.conflicts(store, h2) == []

    def test_other_kinds_never_conflict(self, store):
        _put(store, "P1")
        _put(store, "H1", "hypothesis", ["P1"])
        reasoning = _put(store, "R1", "reasoning", ["P1"])
        _put(store, "R2", "reasoning", ["P1"])
        h2 = _put(store, "H2", "hypothesis", ["P1"])
        assert graph.conflicts(store, reasoning) == []
        assert graph.conflicts(store, h2) == ["H1"]


class TestDepth:
    def test_root_depth_is_zero(self, store):
        assert graph.derive_depth(store, []) == 0

    def test_one_more_than_deepest_dependency(self, store):
        _put(store, "P1", depth=0)
        _put(store, "R1", "reasoning", ["P1"], depth=3)
        assert graph.derive_depth(store, ["P1", "R1"]) == 4

    def test_unset_dependency_depth_counts_as_zero(self, store):
        _put(store, "P1")
        assert graph.derive_depth(store, ["P1"]) == 1


class TestCheckDependencies:
    def test_missing_dependency(self, store):
        _put(store, "P1")
        atom = Atom(
            atom_id="H1",
            content="x",
            atom_type="hypothesis",
            dependencies=["P1", "P9"],
            confidence=0.5,
        )
        with pytest.raises(AtomReferenceError, match="atoms not found: P9"):
            graph.check_dependencies(store, atom)

    def test_cycle_on_overwrite_rejected(self, store):
        _put(store, "P1")
        _put(store, "R1", "reasoning", ["P1"])
        rewritten = Atom(
            atom_id="P1",
            content="x",
            atom_type="premise",
            dependencies=["R1"],
            confidence=0.5,
        )
        with pytest.raises(AtomReferenceError, match="cycle"):
            graph.check_dependencies(store, rewritten)

    def test_overwrite_without_cycle_allowed(self, store):
        _put(store, "P1")
        _put(store, "P2")
        rewritten = Atom(
            atom_id="P1",
            content="x",
            atom_type="premise",
            dependencies=["P2"],
            confidence=0.5,
        )
        graph.check_dependencies(store, rewritten)

    def test_reaches(self, store):
        _put(store, "P1")
        _put(store, "R1", "reasoning", ["P1"])
        _put(store, "H1", "hypothesis", ["R1"])
        assert graph.reaches(store, ["H1"], "P1") is True
        assert graph.reaches(store, ["P1"], "H1") is False
