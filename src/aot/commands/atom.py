# src/aot/commands/atom.py
"""Atom control commands - decomposition, termination and settings.

This module dispatches the ``atomcommands`` tool against a full engine.
Each command validates its own companion argument:

- decompose              requires atomId
- complete_decomposition requires decompositionId
- set_max_depth          requires maxDepth, a positive number
- termination_status and best_conclusion take no arguments
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from aot.commands.base import (
    AtomCommand,
    AtomCommandResult,
    BestConclusionResult,
    CompleteDecompositionResult,
    DecomposeResult,
    SetMaxDepthResult,
    TerminationStatusResult,
)
from aot.engine import Engine
from aot.exceptions import AoTError, CommandError
from aot.models import ConclusionSummary

logger = logging.getLogger(__name__)


def _require_string(arguments: Mapping[str, Any], key: str, command: AtomCommand) -> str:
    value = arguments.get(key)
    if not value or not isinstance(value, str):
        raise CommandError(f"{key} is required for {command.value} command")
    return value


def _decompose(engine: Engine, arguments: Mapping[str, Any]) -> AtomCommandResult:
    atom_id = _require_string(arguments, "atomId", AtomCommand.DECOMPOSE)
    decomposition_id = engine.start_decomposition(atom_id)
    return DecomposeResult(
        success=True,
        command=AtomCommand.DECOMPOSE.value,
        decomposition_id=decomposition_id,
        message=f"Started decomposition of atom {atom_id}",
    )


def _complete_decomposition(engine: Engine, arguments: Mapping[str, Any]) -> AtomCommandResult:
    decomposition_id = _require_string(
        arguments, "decompositionId", AtomCommand.COMPLETE_DECOMPOSITION
    )
    completed = engine.complete_decomposition(decomposition_id)
    return CompleteDecompositionResult(
        success=True,
        command=AtomCommand.COMPLETE_DECOMPOSITION.value,
        completed=completed,
        message=f"Completed decomposition {decomposition_id}",
    )


def _termination_status(engine: Engine, arguments: Mapping[str, Any]) -> AtomCommandResult:
    status = engine.termination_status()
    return TerminationStatusResult(
        success=True,
        command=AtomCommand.TERMINATION_STATUS.value,
        should_terminate=status.should_terminate,
        reason=status.reason,
    )


def _best_conclusion(engine: Engine, arguments: Mapping[str, Any]) -> AtomCommandResult:
    summary = ConclusionSummary.from_atom(engine.best_conclusion())
    return BestConclusionResult(
        success=True,
        command=AtomCommand.BEST_CONCLUSION.value,
        conclusion=summary.to_payload() if summary is not None else None,
    )


def _set_max_depth(engine: Engine, arguments: Mapping[str, Any]) -> AtomCommandResult:
    max_depth = arguments.get("maxDepth")
    engine.set_max_depth(max_depth)
    return SetMaxDepthResult(
        success=True,
        command=AtomCommand.SET_MAX_DEPTH.value,
        max_depth=max_depth,
        message=f"Maximum depth set to {max_depth}",
    )


HANDLERS: dict[AtomCommand, Callable[[Engine, Mapping[str, Any]], AtomCommandResult]] = {
    AtomCommand.DECOMPOSE: _decompose,
    AtomCommand.COMPLETE_DECOMPOSITION: _complete_decomposition,
    AtomCommand.TERMINATION_STATUS: _termination_status,
    AtomCommand.BEST_CONCLUSION: _best_conclusion,
    AtomCommand.SET_MAX_DEPTH: _set_max_depth,
}


def parse_command(arguments: Any) -> AtomCommand:
    """Resolve the ``command`` field of a raw request.

    Raises:
        CommandError: If the request is not an object or the command is unknown
    """
    if not isinstance(arguments, Mapping):
        raise CommandError("Command arguments must be an object")
    command = arguments.get("command")
    if not command or not isinstance(command, str):
        raise CommandError("command is required")
    try:
        return AtomCommand(command)
    except ValueError:
        raise CommandError(f"Unknown command: {command}") from None


def run_command(engine: Engine, arguments: Any) -> AtomCommandResult:
    """Run one control command against ``engine``.

    Args:
        engine: The full engine to control
        arguments: Raw request ``{command, atomId?, decompositionId?, maxDepth?}``

    Returns:
        A success result for the command, or a failed AtomCommandResult
    """
    command_name = arguments.get("command", "") if isinstance(arguments, Mapping) else ""
    try:
        command = parse_command(arguments)
        return HANDLERS[command](engine, arguments)
    except AoTError as e:
        logger.debug("Command %r failed: %s", command_name, e)
        return AtomCommandResult(success=False, command=str(command_name), error=str(e))
