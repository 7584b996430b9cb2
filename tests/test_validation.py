"""Tests for raw atom record validation."""

import pytest

from aot.exceptions import AtomValidationError
from aot.models import AtomType
from aot.validation import validate_atom_data


def _record(**overrides):
    record = {
        "atomId": "P1",
        "content": "All swans observed so far are white",
        "atomType": "premise",
        "dependencies": [],
        "confidence": 0.9,
    }
    record.update(overrides)
    return record


class TestValidateAtomData:
    def test_valid_record(self):
        atom = validate_atom_data(_record())
        assert atom.atom_id == "P1"
        assert atom.atom_type is AtomType.PREMISE
        assert atom.is_verified is False
        assert atom.depth is None
        assert atom.created > 0

    def test_optional_fields_are_kept(self):
        atom = validate_atom_data(_record(isVerified=True, depth=3, created=1700000000000))
        assert atom.is_verified is True
        assert atom.depth == 3
        assert atom.created == 1700000000000

    def test_non_numeric_created_defaults_to_now(self):
        atom = validate_atom_data(_record(created="yesterday"))
        assert isinstance(atom.created, int)
        assert atom.created > 1700000000000

    @pytest.mark.parametrize("created", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_created_defaults_to_now(self, created):
        atom = validate_atom_data(_record(created=created))
        assert isinstance(atom.created, int)
        assert atom.created > 1700000000000

    def test_not_a_mapping(self):
        with pytest.raises(AtomValidationError, match="Invalid atom: must be an object"):
            validate_atom_data(["P1"])

    @pytest.mark.parametrize("atom_id", [None, "", 42])
    def test_bad_atom_id(self, atom_id):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(atomId=atom_id))
        assert exc_info.value.field == "atomId"
        assert str(exc_info.value) == "Invalid atomId: must be a non-empty string"

    def test_bad_content(self):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(content=""))
        assert exc_info.value.field == "content"

    def test_unknown_atom_type(self):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(atomType="guess"))
        assert exc_info.value.field == "atomType"
        assert "premise, reasoning, hypothesis, verification, conclusion" in str(exc_info.value)

    @pytest.mark.parametrize("dependencies", [None, "P0", [1, 2]])
    def test_bad_dependencies(self, dependencies):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(dependencies=dependencies))
        assert str(exc_info.value) == "Invalid dependencies: must be an array of atom IDs"

    def test_self_dependency_rejected(self):
        with pytest.raises(AtomValidationError, match="cannot depend on itself"):
            validate_atom_data(_record(dependencies=["P1"]))

    @pytest.mark.parametrize("confidence", [None, "0.5", True, -0.1, 1.01])
    def test_bad_confidence(self, confidence):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(confidence=confidence))
        assert str(exc_info.value) == "Invalid confidence: must be a number between 0 and 1"

    @pytest.mark.parametrize("confidence", [0, 1, 0.0, 1.0])
    def test_confidence_bounds_inclusive(self, confidence):
        assert validate_atom_data(_record(confidence=confidence)).confidence == confidence

    @pytest.mark.parametrize("depth", [-1, 1.5, "2", True, float("inf"), float("nan")])
    def test_bad_depth(self, depth):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data(_record(depth=depth))
        assert exc_info.value.field == "depth"

    def test_integral_float_depth_accepted(self):
        assert validate_atom_data(_record(depth=2.0)).depth == 2

    def test_first_offending_field_wins(self):
        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data({"atomId": "", "content": "", "confidence": 7})
        assert exc_info.value.field == "atomId"

        with pytest.raises(AtomValidationError) as exc_info:
            validate_atom_data({"atomId": "X", "atomType": "premise", "confidence": 7})
        assert exc_info.value.field == "content"
