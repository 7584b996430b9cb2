"""Atom of Thoughts - structured reasoning engine.

Reasoning is recorded as typed atoms (premise, reasoning, hypothesis,
verification, conclusion) linked by dependencies. The engine propagates
verification, contracts completed decompositions, and decides when a
strong enough conclusion has been reached.

Quick Start:
    from aot import Engine

    engine = Engine.full()
    engine.process_atom({
        "atomId": "P1",
        "content": "All observations so far are consistent",
        "atomType": "premise",
        "dependencies": [],
        "confidence": 0.9,
    })
    print(engine.termination_status())

MCP Server:
    aot serve            # stdio transport, tools AoT / AoT-light / atomcommands
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("aot-engine")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except Exception:
        __version__ = "unknown"

# Engine
from aot.engine import Engine

# Exceptions
from aot.exceptions import (
    AoTError,
    AtomReferenceError,
    AtomValidationError,
    CommandError,
    DecompositionStateError,
)

# Models
from aot.models import (
    Atom,
    AtomResult,
    AtomType,
    ConclusionSummary,
    Decomposition,
    IngestFailure,
    IngestResult,
    LightAtomResult,
    TerminationStatus,
)

# Configuration
from aot.settings import EnginePolicy, Settings

# Stores
from aot.stores import AtomStore, InMemoryAtomStore

# Tool surface
from aot.tools import TOOLS, Toolbox, ToolResponse

__all__ = [
    "__version__",
    # Engine
    "Engine",
    "EnginePolicy",
    "Settings",
    # Models
    "Atom",
    "AtomType",
    "Decomposition",
    "AtomResult",
    "LightAtomResult",
    "IngestFailure",
    "IngestResult",
    "ConclusionSummary",
    "TerminationStatus",
    # Stores
    "AtomStore",
    "InMemoryAtomStore",
    # Tools
    "TOOLS",
    "Toolbox",
    "ToolResponse",
    # Exceptions
    "AoTError",
    "AtomValidationError",
    "AtomReferenceError",
    "DecompositionStateError",
    "CommandError",
]
