# src/aot/validation.py
"""Boundary validation of raw atom records.

Raw records arrive as untyped mappings with camelCase keys (the tool input
schema). ``validate_atom_data`` checks the required fields in a fixed order
and raises on the first offending one, so callers always get a single,
predictable error message:

1. atomId        - non-empty string
2. content       - non-empty string
3. atomType      - one of premise, reasoning, hypothesis, verification, conclusion
4. dependencies  - list of atom ID strings, never the atom's own ID
5. confidence    - number between 0 and 1

``created``, ``isVerified`` and ``depth`` are optional and defaulted.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from aot.exceptions import AtomValidationError
from aot.models import Atom, AtomType
from aot.models.atom import now_ms

ATOM_TYPES = [t.value for t in AtomType]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


def _validate_depth(value: Any) -> int | None:
    if value is None:
        return None
    if not _is_finite_number(value) or value < 0 or int(value) != value:
        raise AtomValidationError("depth", "must be a non-negative integer")
    return int(value)


def validate_atom_data(data: Any) -> Atom:
    """Validate a raw atom record and build an Atom.

    Args:
        data: Mapping with camelCase keys as delivered by the transport

    Returns:
        A well-formed Atom (depth may still be None)

    Raises:
        AtomValidationError: Naming the first offending field
    """
    if not isinstance(data, Mapping):
        raise AtomValidationError("atom", "must be an object")

    atom_id = data.get("atomId")
    if not atom_id or not isinstance(atom_id, str):
        raise AtomValidationError("atomId", "must be a non-empty string")

    content = data.get("content")
    if not content or not isinstance(content, str):
        raise AtomValidationError("content", "must be a non-empty string")

    atom_type = data.get("atomType")
    if not isinstance(atom_type, str) or atom_type not in ATOM_TYPES:
        raise AtomValidationError("atomType", f"must be one of {', '.join(ATOM_TYPES)}")

    dependencies = data.get("dependencies")
    if not isinstance(dependencies, (list, tuple)):
        raise AtomValidationError("dependencies", "must be an array of atom IDs")
    if not all(isinstance(dep, str) for dep in dependencies):
        raise AtomValidationError("dependencies", "must be an array of atom IDs")
    if atom_id in dependencies:
        raise AtomValidationError("dependencies", f"atom {atom_id} cannot depend on itself")

    confidence = data.get("confidence")
    if not _is_number(confidence) or not 0 <= confidence <= 1:
        raise AtomValidationError("confidence", "must be a number between 0 and 1")

    created = data.get("created")
    return Atom(
        atom_id=atom_id,
        content=content,
        atom_type=AtomType(atom_type),
        dependencies=list(dependencies),
        confidence=float(confidence),
        created=int(created) if _is_finite_number(created) else now_ms(),
        is_verified=bool(data.get("isVerified") or False),
        depth=_validate_depth(data.get("depth")),
    )
