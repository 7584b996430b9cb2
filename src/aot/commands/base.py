# src/aot/commands/base.py
"""Base types for the commands layer.

This module defines the data structures returned by commands. Commands
never raise for user errors; they return a result with ``success=False``
and an ``error`` message, and UIs render it as they see fit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AtomCommand(str, Enum):
    """Out-of-band control commands for the full engine."""

    DECOMPOSE = "decompose"
    COMPLETE_DECOMPOSITION = "complete_decomposition"
    TERMINATION_STATUS = "termination_status"
    BEST_CONCLUSION = "best_conclusion"
    SET_MAX_DEPTH = "set_max_depth"


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class AtomCommandResult(CommandResult):
    """Result of an atom control command.

    Attributes:
        command: The command that ran (empty if it could not be determined)
        message: Human-readable summary
    """

    command: str = ""
    message: str | None = None

    def _fields(self) -> dict[str, Any]:
        return {}

    def to_payload(self) -> dict[str, Any]:
        """Wire form: ``{status: success, command, ...}`` or ``{status: error, error}``."""
        if not self.success:
            return {"status": "error", "error": self.error}
        payload: dict[str, Any] = {"status": "success", "command": self.command}
        payload.update(self._fields())
        if self.message is not None:
            payload["message"] = self.message
        return payload


@dataclass
class DecomposeResult(AtomCommandResult):
    """Result of the decompose command."""

    decomposition_id: str | None = None

    def _fields(self) -> dict[str, Any]:
        return {"decompositionId": self.decomposition_id}


@dataclass
class CompleteDecompositionResult(AtomCommandResult):
    """Result of the complete_decomposition command."""

    completed: bool = False

    def _fields(self) -> dict[str, Any]:
        return {"completed": self.completed}


@dataclass
class TerminationStatusResult(AtomCommandResult):
    """Result of the termination_status command."""

    should_terminate: bool = False
    reason: str = ""

    def _fields(self) -> dict[str, Any]:
        return {"shouldTerminate": self.should_terminate, "reason": self.reason}


@dataclass
class BestConclusionResult(AtomCommandResult):
    """Result of the best_conclusion command.

    Attributes:
        conclusion: ``{atomId, content, confidence}`` or None if nothing is verified
    """

    conclusion: dict[str, Any] | None = None

    def _fields(self) -> dict[str, Any]:
        return {"conclusion": self.conclusion}


@dataclass
class SetMaxDepthResult(AtomCommandResult):
    """Result of the set_max_depth command."""

    max_depth: int | float | None = None

    def _fields(self) -> dict[str, Any]:
        return {"maxDepth": self.max_depth}


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        settings: List of settings with their sources
        config_path: Path to config file (if found)
        warnings: Unknown keys found in the config file
    """

    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class ReplayStep:
    """One executed tool call from a replay script."""

    index: int
    tool: str
    arguments: dict[str, Any]
    payload: dict[str, Any] | None
    text: str
    is_error: bool


@dataclass
class ReplayResult(CommandResult):
    """Result of the replay command.

    Attributes:
        steps: Executed steps in order
        steps_failed: Number of steps whose tool call reported an error
    """

    steps: list[ReplayStep] = field(default_factory=list)
    steps_failed: int = 0
