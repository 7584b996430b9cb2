# src/aot/render.py
"""Rich rendering of atoms and tool results for human inspection."""

from __future__ import annotations

from typing import Any

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from aot.models import Atom, AtomType

# Type -> (style, symbol)
ATOM_STYLES: dict[AtomType, tuple[str, str]] = {
    AtomType.PREMISE: ("blue", "\U0001f50d"),
    AtomType.REASONING: ("green", "\U0001f9e0"),
    AtomType.HYPOTHESIS: ("yellow", "\U0001f4a1"),
    AtomType.VERIFICATION: ("magenta", "✓"),
    AtomType.CONCLUSION: ("red", "\U0001f3c6"),
}


def confidence_bar(confidence: float, width: int = 20) -> Text:
    """Render ``Confidence: [████░░░░] 40%``."""
    filled = round(confidence * width)
    text = Text("Confidence: [")
    text.append("█" * filled, style="green")
    text.append("░" * (width - filled), style="dim")
    text.append(f"] {confidence * 100:.0f}%")
    return text


def atom_title(atom: Atom, max_depth: int | float | None = None) -> Text:
    """Header line: symbol, type, id, depth and verification marker."""
    style, symbol = ATOM_STYLES[atom.atom_type]
    title = f"{symbol} {atom.atom_type.value.upper()}: {atom.atom_id}"
    if atom.depth is not None:
        ceiling = f"/{max_depth}" if max_depth is not None else ""
        title += f" [Depth: {atom.depth}{ceiling}]"
    if atom.is_verified:
        title += " (✓ Verified)"
    return Text(title, style=f"bold {style}")


def render_atom(atom: Atom, max_depth: int | float | None = None) -> Panel:
    """Boxed view of one atom."""
    style, _ = ATOM_STYLES[atom.atom_type]
    dependencies = (
        f"Dependencies: {', '.join(atom.dependencies)}" if atom.dependencies else "No dependencies"
    )
    body = Group(
        Text(atom.content),
        confidence_bar(atom.confidence),
        Text(dependencies, style="dim"),
    )
    return Panel(body, title=atom_title(atom, max_depth), title_align="left", border_style=style)


def render_warnings(warnings: list[str]) -> Text:
    text = Text()
    for i, warning in enumerate(warnings):
        if i > 0:
            text.append("\n")
        text.append(f"⚠ {warning}", style="yellow")
    return text


def render_payload(payload: dict[str, Any]) -> RenderableType:
    """Compact one-screen summary of an ingest or command payload."""
    if payload.get("status") in ("failed", "error"):
        return Text(f"✗ {payload.get('error')}", style="red")

    text = Text()
    if "command" in payload:
        text.append(f"✔ {payload['command']}", style="green")
        for key, value in payload.items():
            if key not in ("status", "command"):
                text.append(f"\n  {key}: ", style="dim")
                text.append(str(value))
        return text

    text.append(f"atoms: {payload.get('atomsCount')}", style="dim")
    termination = payload.get("terminationStatus")
    if termination and termination.get("shouldTerminate"):
        text.append(f"\n\U0001f6d1 Termination condition met: {termination['reason']}", style="red")
    best = payload.get("bestConclusion")
    if best:
        text.append(
            f"\n\U0001f3c6 Best conclusion: {best['atomId']} - {best['content']}",
            style="green",
        )
    if payload.get("warnings"):
        text.append("\n")
        text.append_text(render_warnings(payload["warnings"]))
    return text
