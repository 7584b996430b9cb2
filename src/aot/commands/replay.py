# src/aot/commands/replay.py
"""Replay command - run a scripted sequence of tool calls.

A script is a JSON or YAML list of steps, each ``{tool, arguments}``:

    - tool: AoT
      arguments: {atomId: P1, content: "...", atomType: premise, dependencies: [], confidence: 0.9}
    - tool: atomcommands
      arguments: {command: termination_status}

All steps run against one fresh Toolbox, in order, exactly as a remote
caller would issue them.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from aot import tools
from aot.commands.base import ReplayResult, ReplayStep
from aot.settings import Settings

StepCallback = Callable[[ReplayStep], None]


class ScriptError(ValueError):
    """Raised when a replay script is malformed."""


def load_script(path: str | Path) -> list[dict[str, Any]]:
    """Load and shape-check a replay script.

    Raises:
        ScriptError: If the file is not a list of ``{tool, arguments}`` mappings
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ScriptError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, list):
        raise ScriptError(f"{path} must contain a list of steps")

    steps = []
    for index, step in enumerate(data, 1):
        if not isinstance(step, dict) or not isinstance(step.get("tool"), str):
            raise ScriptError(f"Step {index} must be a mapping with a 'tool' name")
        arguments = step.get("arguments") or {}
        if not isinstance(arguments, dict):
            raise ScriptError(f"Step {index}: 'arguments' must be a mapping")
        steps.append({"tool": step["tool"], "arguments": arguments})
    return steps


def replay(
    script_path: str | Path,
    settings: Settings | None = None,
    on_atom: tools.AtomCallback | None = None,
    on_step: StepCallback | None = None,
) -> ReplayResult:
    """Execute every step of a replay script.

    Args:
        script_path: JSON or YAML script
        settings: Engine settings, including any depth ceiling override
        on_atom: Called after each successful ingest (e.g. to render the atom)
        on_step: Called after each step with its outcome

    Returns:
        ReplayResult with per-step outcomes; ``success`` is False if the
        script could not be loaded or any step failed
    """
    try:
        steps = load_script(script_path)
    except (OSError, ScriptError) as e:
        return ReplayResult(success=False, error=str(e))

    toolbox = tools.Toolbox.create(settings=settings, on_atom=on_atom)
    result = ReplayResult(success=True)

    for index, step in enumerate(steps, 1):
        response = toolbox.call_tool(step["tool"], step["arguments"])
        replay_step = ReplayStep(
            index=index,
            tool=step["tool"],
            arguments=step["arguments"],
            payload=response.payload,
            text=response.text,
            is_error=response.is_error,
        )
        result.steps.append(replay_step)
        if response.is_error:
            result.steps_failed += 1
        if on_step is not None:
            on_step(replay_step)

    if result.steps_failed:
        result.success = False
        result.error = f"{result.steps_failed} of {len(steps)} steps failed"
    return result
