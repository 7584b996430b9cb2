"""Tests for Rich rendering helpers."""

import io

from rich.console import Console

from aot.models import Atom
from aot.render import atom_title, confidence_bar, render_atom, render_payload, render_warnings


def _plain(renderable):
    console = Console(file=io.StringIO(), width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def _atom(**overrides):
    fields = {
        "atom_id": "H1",
        "content": "The bridge can carry the load",
        "atom_type": "hypothesis",
        "dependencies": ["P1", "R1"],
        "confidence": 0.4,
        "depth": 2,
    }
    fields.update(overrides)
    return Atom(**fields)


class TestConfidenceBar:
    def test_proportional_fill(self):
        text = confidence_bar(0.4, width=10)
        assert text.plain == "Confidence: [████░░░░░░] 40%"

    def test_full(self):
        assert confidence_bar(1.0, width=4).plain == "Confidence: [████] 100%"


class TestRenderAtom:
    def test_title(self):
        assert atom_title(_atom(), 5).plain.endswith("HYPOTHESIS: H1 [Depth: 2/5]")

    def test_verified_marker(self):
        assert atom_title(_atom(is_verified=True)).plain.endswith("(✓ Verified)")

    def test_panel_contents(self):
        output = _plain(render_atom(_atom(), 5))
        assert "The bridge can carry the load" in output
        assert "Dependencies: P1, R1" in output
        assert "40%" in output

    def test_no_dependencies(self):
        output = _plain(render_atom(_atom(atom_type="premise", dependencies=[])))
        assert "No dependencies" in output


class TestRenderPayload:
    def test_failure(self):
        output = _plain(render_payload({"error": "Invalid atomId", "status": "failed"}))
        assert "✗ Invalid atomId" in output

    def test_command(self):
        output = _plain(
            render_payload({"status": "success", "command": "set_max_depth", "maxDepth": 3})
        )
        assert "set_max_depth" in output
        assert "maxDepth: 3" in output

    def test_terminal_ingest(self):
        payload = {
            "atomsCount": 2,
            "terminationStatus": {"shouldTerminate": True, "reason": "Strong conclusion found"},
            "bestConclusion": {"atomId": "C1", "content": "Ship it", "confidence": 0.95},
            "warnings": ["Atom C1 exceeds maximum depth 1"],
        }
        output = _plain(render_payload(payload))
        assert "Termination condition met: Strong conclusion found" in output
        assert "Best conclusion: C1 - Ship it" in output
        assert "exceeds maximum depth" in output

    def test_warnings(self):
        assert render_warnings(["a", "b"]).plain == "⚠ a\n⚠ b"
