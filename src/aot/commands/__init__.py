# src/aot/commands/__init__.py
"""UI-agnostic command layer for the Atom of Thoughts engine.

Commands return data structures, allowing the MCP server and the CLI to
render results appropriately.

Usage:
    from aot.commands import atom, config_cmd, replay

    # Control the full engine
    result = atom.run_command(engine, {"command": "decompose", "atomId": "H1"})

    # Show effective configuration
    result = config_cmd.config()

    # Run a scripted session
    result = replay.replay("session.yaml")
"""

from aot.commands import atom, config_cmd, replay
from aot.commands.base import (
    AtomCommand,
    AtomCommandResult,
    BestConclusionResult,
    CommandResult,
    CompleteDecompositionResult,
    ConfigResult,
    DecomposeResult,
    ReplayResult,
    ReplayStep,
    SetMaxDepthResult,
    SettingInfo,
    TerminationStatusResult,
)

__all__ = [
    # Base types
    "AtomCommand",
    "CommandResult",
    # Result types
    "AtomCommandResult",
    "DecomposeResult",
    "CompleteDecompositionResult",
    "TerminationStatusResult",
    "BestConclusionResult",
    "SetMaxDepthResult",
    "ConfigResult",
    "SettingInfo",
    "ReplayResult",
    "ReplayStep",
    # Command modules
    "atom",
    "config_cmd",
    "replay",
]
