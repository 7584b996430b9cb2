# src/aot/tools.py
"""Tool surface of the engine.

Three tools are exposed to remote callers:

- ``AoT``           ingest an atom into the full engine
- ``AoT-light``     ingest an atom into the lightweight engine
- ``atomcommands``  control decomposition, termination and depth on the full engine

``Toolbox`` owns one engine of each variant and routes tool calls to them.
It is transport-agnostic: ``aot.server`` adapts it to MCP, and the replay
command drives it from a script.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from aot.commands.atom import run_command
from aot.engine import Engine
from aot.models import Atom
from aot.settings import Settings

logger = logging.getLogger(__name__)

ATOM_TYPE_ENUM = ["premise", "reasoning", "hypothesis", "verification", "conclusion"]


def _atom_input_schema(depth_description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "atomId": {
                "type": "string",
                "description": "Unique identifier for the atom",
            },
            "content": {
                "type": "string",
                "description": "Actual content of the atom",
            },
            "atomType": {
                "type": "string",
                "enum": ATOM_TYPE_ENUM,
                "description": "Type of atom",
            },
            "dependencies": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of IDs of other atoms this atom depends on",
            },
            "confidence": {
                "type": "number",
                "minimum": 0,
                "maximum": 1,
                "description": "Confidence level of this atom (value between 0-1)",
            },
            "isVerified": {
                "type": "boolean",
                "description": "Whether this atom has been verified",
            },
            "depth": {
                "type": "number",
                "description": depth_description,
            },
        },
        "required": ["atomId", "content", "atomType", "dependencies", "confidence"],
    }


AOT_TOOL: dict[str, Any] = {
    "name": "AoT",
    "description": """Atom of Thoughts (AoT) is a tool for solving complex problems by decomposing them into independent, reusable atomic units of thought.
Unlike traditional sequential thinking, this tool enables more powerful problem solving by allowing atomic units of thought to form dependencies with each other.

When to use:
- Solving problems requiring complex reasoning
- Generating hypotheses that need verification from multiple perspectives
- Deriving high-confidence conclusions in scenarios where accuracy is crucial
- Minimizing logical errors in critical tasks
- Decision-making requiring multiple verification steps

Atom types:
- premise: Basic assumptions or given information for problem solving
- reasoning: Logical reasoning process based on other atoms
- hypothesis: Proposed solutions or intermediate conclusions
- verification: Process to evaluate the validity of other atoms (especially hypotheses)
- conclusion: Verified hypotheses or final problem solutions

Parameter descriptions:
- atomId: Unique identifier for the atom (e.g., 'A1', 'H2')
- content: Actual content of the atom
- atomType: Type of atom (one of: premise, reasoning, hypothesis, verification, conclusion)
- dependencies: List of IDs of other atoms this atom depends on
- confidence: Confidence level of this atom (value between 0-1)
- isVerified: Whether this atom has been verified
- depth: Depth level of this atom (in the decomposition-contraction process)

Additional features:
1. Decomposition-Contraction mechanism:
   - Decompose atoms into smaller sub-atoms and contract back after verification
   - startDecomposition(atomId): Start atom decomposition
   - addToDecomposition(decompositionId, atomId): Add sub-atom to decomposition
   - completeDecomposition(decompositionId): Complete decomposition process

2. Automatic termination mechanism:
   - Automatically terminate when reaching maximum depth or finding high-confidence conclusion
   - getTerminationStatus(): Return termination status and reason
   - getBestConclusion(): Return highest confidence conclusion

Usage method:
1. Understand the problem and define necessary premise atoms
2. Create reasoning atoms based on premises
3. Create hypothesis atoms based on reasoning
4. Create verification atoms to verify hypotheses
5. Derive conclusion atoms based on verified hypotheses
6. Use atom decomposition to explore deeper when necessary
7. Present the high-confidence conclusion atom as the final answer""",
    "inputSchema": _atom_input_schema(
        "Depth level of this atom in the decomposition-contraction mechanism"
    ),
}

AOT_LIGHT_TOOL: dict[str, Any] = {
    "name": "AoT-light",
    "description": """A lightweight version of Atom of Thoughts (AoT) designed for faster processing and quicker results.
This streamlined version sacrifices some depth of analysis for speed, making it ideal for time-sensitive reasoning tasks.

When to use:
- Quick brainstorming sessions requiring atomic thought organization
- Time-sensitive problem solving where speed is prioritized over exhaustive analysis
- Simpler reasoning tasks that don't require deep decomposition
- Initial exploration before using the full AoT for deeper analysis
- Learning or demonstration purposes where response time is important

Key differences from full AoT:
- Lower maximum depth (3 instead of 5) for faster processing
- Simplified verification process
- Immediate conclusion suggestion for high-confidence hypotheses
- Reduced computational overhead and response payload
- Optimized for speed rather than exhaustive analysis

Atom types and parameters are the same as the full AoT tool.""",
    "inputSchema": _atom_input_schema("Depth level of this atom (optional, defaults to 0)"),
}

ATOM_COMMANDS_TOOL: dict[str, Any] = {
    "name": "atomcommands",
    "description": """A command tool to control the decomposition-contraction mechanism and automatic termination of Atom of Thoughts.

Use this tool to access advanced features of AoT:

1. Decomposition (decompose): Decompose a specified atom into smaller sub-atoms
2. Complete decomposition (complete_decomposition): Complete an ongoing decomposition process
3. Check termination status (termination_status): Check the termination status of the current AoT process
4. Get best conclusion (best_conclusion): Get the verified conclusion with the highest confidence
5. Change settings (set_max_depth): Change the maximum depth limit

Command descriptions:
- command: Command to execute (decompose, complete_decomposition, termination_status, best_conclusion, set_max_depth)
- atomId: Atom ID to use with the command (only required for decompose command)
- decompositionId: ID of the decomposition process (only required for complete_decomposition command)
- maxDepth: Maximum depth value to set (only required for set_max_depth command)""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "command": {
                "type": "string",
                "enum": [
                    "decompose",
                    "complete_decomposition",
                    "termination_status",
                    "best_conclusion",
                    "set_max_depth",
                ],
                "description": "Command to execute",
            },
            "atomId": {
                "type": "string",
                "description": "Atom ID to use with the command",
            },
            "decompositionId": {
                "type": "string",
                "description": "ID of the decomposition process to complete",
            },
            "maxDepth": {
                "type": "number",
                "description": "Maximum depth value to set",
            },
        },
        "required": ["command"],
    },
}

TOOLS = [AOT_TOOL, AOT_LIGHT_TOOL, ATOM_COMMANDS_TOOL]


@dataclass
class ToolResponse:
    """Outcome of one tool call.

    Attributes:
        text: JSON text (or a plain message for unknown tools) for the caller
        is_error: True if the call failed
        payload: Parsed payload, when the call produced one
        atom: The ingested atom after processing, for ingest calls that succeeded
        max_depth: Depth ceiling of the engine that handled the call
    """

    text: str
    is_error: bool = False
    payload: dict[str, Any] | None = None
    atom: Atom | None = None
    max_depth: int | float | None = None


# Called with each successful ingest response, e.g. to render the atom
AtomCallback = Callable[[ToolResponse], None]


@dataclass
class Toolbox:
    """Routes tool calls to a full and a lightweight engine with independent sessions."""

    engine: Engine
    light_engine: Engine
    on_atom: AtomCallback | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        max_depth: int | None = None,
        on_atom: AtomCallback | None = None,
    ) -> Toolbox:
        """Build a toolbox with fresh sessions.

        Args:
            settings: Thresholds and depth ceilings for both engines
            max_depth: Optional construction-time ceiling for the full engine
            on_atom: Optional callback invoked after each successful ingest
        """
        return cls(
            engine=Engine.full(max_depth=max_depth, settings=settings),
            light_engine=Engine.light(settings=settings),
            on_atom=on_atom,
        )

    def list_tools(self) -> list[dict[str, Any]]:
        """Static tool descriptors (name, description, inputSchema)."""
        return [dict(tool) for tool in TOOLS]

    def call_tool(self, name: str, arguments: Any) -> ToolResponse:
        """Run one tool call; never raises."""
        try:
            if name == AOT_TOOL["name"]:
                return self._ingest(self.engine, arguments)
            if name == AOT_LIGHT_TOOL["name"]:
                return self._ingest(self.light_engine, arguments)
            if name == ATOM_COMMANDS_TOOL["name"]:
                result = run_command(self.engine, arguments)
                return _json_response(result.to_payload(), is_error=not result.success)
        except Exception as e:
            logger.exception("Tool %s failed unexpectedly", name)
            return _json_response({"error": str(e), "status": "failed"}, is_error=True)

        return ToolResponse(text=f"Unknown tool: {name}", is_error=True)

    def _ingest(self, engine: Engine, arguments: Any) -> ToolResponse:
        result = engine.process_atom(arguments)
        response = _json_response(result.to_payload(), is_error=not result.success)
        response.max_depth = engine.max_depth
        if result.success:
            response.atom = engine.get_atom(result.atom_id)
            if self.on_atom is not None:
                self.on_atom(response)
        return response


def _json_response(payload: dict[str, Any], is_error: bool = False) -> ToolResponse:
    return ToolResponse(text=json.dumps(payload, indent=2), is_error=is_error, payload=payload)
