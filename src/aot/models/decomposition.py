# src/aot/models/decomposition.py
"""Decomposition data model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Decomposition(BaseModel):
    """A refinement session that breaks one atom into sub-atoms one level deeper.

    A decomposition is Open while ``is_completed`` is False and accepts new
    sub-atoms. Once completed it is immutable and becomes eligible for
    contraction back into ``original_atom_id``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    decomposition_id: str
    original_atom_id: str
    sub_atoms: list[str] = Field(default_factory=list)
    is_completed: bool = False
