"""Tests for canvas validation and auto-fixing."""

from teamcanvas.canvas.schema import TeamCanvas, TeamCanvasEdge, TeamCanvasNode
from teamcanvas.validation import (
    ValidationSeverity,
    auto_fix_canvas,
    validate_and_fix_canvas,
    validate_canvas,
)


def make_node(id: str, label: str = "Node", x: float = 50, y: float = 50, kind: str = "assistant") -> TeamCanvasNode:
    return TeamCanvasNode(id=id, label=label, kind=kind, x=x, y=y)


def broken_canvas() -> TeamCanvas:
    return TeamCanvas(
        nodes=[
            make_node("lead", "Lead", kind="leader"),
            make_node("a", "A", x=120, y=-3),
            make_node("a", "A duplicate"),
            make_node("b", "  "),
        ],
        edges=[
            TeamCanvasEdge(id="e1", from_id="lead", to_id="a"),
            TeamCanvasEdge(id="e2", from_id="lead", to_id="a"),
            TeamCanvasEdge(id="e3", from_id="lead", to_id="missing"),
        ],
    )


class TestValidator:

    def test_clean_canvas(self, roster) -> None:
        from teamcanvas.canvas.builder import build_team_canvas
        result = validate_canvas(build_team_canvas(roster))
        assert result.is_valid
        assert result.issues == []
        assert result.stats == {"nodes": 5, "edges": 4}

    def test_reports_every_issue(self) -> None:
        result = validate_canvas(broken_canvas())
        assert not result.is_valid
        assert set(result.codes()) == {
            "DUPLICATE_NODE_ID",
            "POSITION_OUT_OF_RANGE",
            "EMPTY_LABEL",
            "DUPLICATE_EDGE",
            "DANGLING_EDGE",
        }
        assert result.error_count == 1
        assert result.warning_count == 4
        dangling = next(i for i in result.issues if i.code == "DANGLING_EDGE")
        assert dangling.severity == ValidationSeverity.WARNING
        assert dangling.edge_id == "e3"

    def test_empty_canvas_is_info_only(self) -> None:
        result = validate_canvas(TeamCanvas())
        assert result.is_valid
        assert result.codes() == ["EMPTY_CANVAS"]
        assert validate_canvas(None).is_valid


class TestFixer:

    def test_auto_fix_repairs_copy(self) -> None:
        original = broken_canvas()
        fixed, result = auto_fix_canvas(original)

        assert result.success
        assert result.issues_remaining == []
        assert [n.id for n in fixed.nodes] == ["lead", "a", "b"]
        assert (fixed.nodes[1].x, fixed.nodes[1].y) == (100, 0)
        assert fixed.nodes[2].label == "b"
        assert [e.id for e in fixed.edges] == ["e1"]
        assert len(result.changes_made) == 5

        # input untouched
        assert len(original.nodes) == 4
        assert original.nodes[1].x == 120

    def test_validate_and_fix_passthrough_for_clean_canvas(self) -> None:
        canvas = TeamCanvas(nodes=[make_node("solo")])
        fixed, validation, result = validate_and_fix_canvas(canvas)
        assert fixed is canvas
        assert validation.is_valid
        assert result.changes_made == []
