"""Tests for the decomposition state machine."""

import pytest

from aot import decomposition
from aot.engine import Engine
from aot.exceptions import AtomReferenceError, DecompositionStateError


def _ingest(engine, *records):
    for record in records:
        assert engine.process_atom(record).success


class TestStartDecomposition:
    def test_opens_and_becomes_current(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        decomposition_id = engine.start_decomposition("P1")

        assert decomposition_id.startswith("decomp_")
        assert engine.current_decomposition_id == decomposition_id
        record = engine.session.decompositions[decomposition_id]
        assert record.original_atom_id == "P1"
        assert record.is_completed is False

    def test_missing_atom(self, engine):
        with pytest.raises(AtomReferenceError, match="Atom with ID X not found"):
            engine.start_decomposition("X")
        assert engine.current_decomposition_id is None

    def test_ids_unique_within_session(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        ids = {engine.start_decomposition("P1") for _ in range(5)}
        assert len(ids) == 5

    def test_new_id_suffix_on_collision(self, engine, make_atom, monkeypatch):
        monkeypatch.setattr(decomposition, "now_ms", lambda: 1234)
        _ingest(engine, make_atom("P1"))

        assert engine.start_decomposition("P1") == "decomp_1234"
        assert engine.start_decomposition("P1") == "decomp_1234_2"


class TestAddToDecomposition:
    def test_sets_depth_below_parent(self, engine, make_atom):
        _ingest(engine, make_atom("P1"), make_atom("H1", "hypothesis", ["P1"]))
        decomposition_id = engine.start_decomposition("H1")
        _ingest(engine, make_atom("S1", depth=4))

        assert engine.get_atom("S1").depth == 2
        assert engine.session.decompositions[decomposition_id].sub_atoms == ["S1"]

    def test_explicit_add(self, engine, make_atom):
        _ingest(engine, make_atom("P1"), make_atom("P2"))
        decomposition_id = engine.start_decomposition("P1")

        assert engine.add_to_decomposition(decomposition_id, "P2") == []
        assert engine.get_atom("P2").depth == 1

    def test_warns_at_ceiling(self, make_atom):
        engine = Engine.full(max_depth=2)
        _ingest(engine, make_atom("P1"), make_atom("R1", "reasoning", ["P1"]))
        decomposition_id = engine.start_decomposition("R1")
        result = engine.process_atom(make_atom("S1"))

        assert result.warnings == ["Maximum depth 2 reached with atom S1"]
        assert result.depth == 2
        assert result.current_decomposition == decomposition_id

    def test_completed_decomposition_rejects(self, engine, make_atom):
        _ingest(engine, make_atom("P1"), make_atom("P2"))
        decomposition_id = engine.start_decomposition("P1")
        engine.complete_decomposition(decomposition_id)

        with pytest.raises(DecompositionStateError, match="already completed"):
            engine.add_to_decomposition(decomposition_id, "P2")
        with pytest.raises(DecompositionStateError):
            engine.add_to_decomposition(decomposition_id, "does-not-exist")

    def test_missing_decomposition(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        with pytest.raises(AtomReferenceError, match="Decomposition with ID nope not found"):
            engine.add_to_decomposition("nope", "P1")

    def test_missing_atom(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        decomposition_id = engine.start_decomposition("P1")
        with pytest.raises(AtomReferenceError):
            engine.add_to_decomposition(decomposition_id, "X")


class TestCompleteDecomposition:
    def test_clears_current_pointer(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        decomposition_id = engine.start_decomposition("P1")

        assert engine.complete_decomposition(decomposition_id) is True
        assert engine.current_decomposition_id is None
        assert engine.session.decompositions[decomposition_id].is_completed is True

    def test_keeps_other_current_pointer(self, engine, make_atom):
        _ingest(engine, make_atom("P1"))
        first = engine.start_decomposition("P1")
        second = engine.start_decomposition("P1")

        engine.complete_decomposition(first)
        assert engine.current_decomposition_id == second

    def test_missing_decomposition(self, engine):
        with pytest.raises(AtomReferenceError):
            engine.complete_decomposition("nope")
