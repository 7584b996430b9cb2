"""Shared pytest fixtures."""

import os

import pytest

from aot.engine import Engine
from aot.settings import Settings
from aot.tools import Toolbox


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from any aot.yaml or AOT_* variables on the host."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("AOT_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def engine(settings):
    """Full engine with a fresh session."""
    return Engine.full(settings=settings)


@pytest.fixture
def light_engine(settings):
    """Lightweight engine with a fresh session."""
    return Engine.light(settings=settings)


@pytest.fixture
def toolbox(settings):
    return Toolbox.create(settings=settings)


@pytest.fixture
def make_atom():
    """Factory for raw atom records as delivered by the transport."""

    def _make(atom_id, atom_type="premise", dependencies=None, confidence=0.9, **extra):
        record = {
            "atomId": atom_id,
            "content": extra.pop("content", f"Content of {atom_id}"),
            "atomType": atom_type,
            "dependencies": list(dependencies or []),
            "confidence": confidence,
        }
        record.update(extra)
        return record

    return _make
