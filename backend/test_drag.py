"""Tests for drag handling on the team canvas widget."""

import pytest

from teamcanvas.canvas.schema import Team, TeamCanvas, TeamCanvasEdge, TeamCanvasNode
from teamcanvas.interaction.drag import ContainerRect, DragController, PointerEvent
from teamcanvas.interaction.widget import TeamCanvasWidget


RECT = ContainerRect(width=400, height=400)


def single_node_canvas(x: float = 50, y: float = 50) -> TeamCanvas:
    return TeamCanvas(
        nodes=[
            TeamCanvasNode(id="leader", label="Lead", kind="leader", x=x, y=y),
            TeamCanvasNode(id="helper", label="Help", kind="assistant", x=30, y=70),
        ],
        edges=[TeamCanvasEdge(id="e1", from_id="leader", to_id="helper")],
    )


class TestDragController:

    def test_drag_is_clamped_to_margins(self) -> None:
        controller = DragController(single_node_canvas())
        controller.pointer_down("leader", PointerEvent(100, 100))
        controller.pointer_move(PointerEvent(100 + 10000, 100 + 10000), RECT)
        leader = controller.canvas.get_node("leader")
        assert (leader.x, leader.y) == (94, 92)

        controller.pointer_move(PointerEvent(100 - 10000, 100 - 10000), RECT)
        assert (leader.x, leader.y) == (6, 8)

    def test_move_updates_live_canvas_immediately(self) -> None:
        controller = DragController(single_node_canvas())
        controller.pointer_down("leader", PointerEvent(0, 0))
        controller.pointer_move(PointerEvent(40, -20), RECT)
        leader = controller.canvas.get_node("leader")
        assert (leader.x, leader.y) == (60, 45)
        assert controller.dragging_id == "leader"

    def test_moves_from_other_pointers_are_ignored(self) -> None:
        controller = DragController(single_node_canvas())
        controller.pointer_down("leader", PointerEvent(0, 0, pointer_id=1))
        assert controller.pointer_move(PointerEvent(200, 200, pointer_id=2), RECT) is None
        assert controller.canvas.get_node("leader").x == 50
        moved = controller.pointer_move(PointerEvent(40, 0, pointer_id=1), RECT)
        assert moved.x == pytest.approx(60)

    def test_single_commit_with_final_position(self) -> None:
        commits = []
        controller = DragController(single_node_canvas(), on_update=commits.append)
        controller.pointer_down("leader", PointerEvent(0, 0))
        for step in range(1, 6):
            controller.pointer_move(PointerEvent(step * 8, step * 4), RECT)
        controller.pointer_up()

        assert len(commits) == 1
        leader = commits[0].get_node("leader")
        assert (leader.x, leader.y) == (60, 55)
        assert commits[0].edges == single_node_canvas().edges
        assert not controller.is_dragging

    def test_committed_snapshot_is_detached(self) -> None:
        commits = []
        controller = DragController(single_node_canvas(), on_update=commits.append)
        controller.pointer_down("leader", PointerEvent(0, 0))
        controller.pointer_move(PointerEvent(40, 0), RECT)
        controller.pointer_up()

        controller.pointer_down("leader", PointerEvent(0, 0))
        controller.pointer_move(PointerEvent(-40, 0), RECT)
        assert commits[0].get_node("leader").x == 60

    def test_stray_release_is_noop(self) -> None:
        commits = []
        controller = DragController(single_node_canvas(), on_update=commits.append)
        assert controller.pointer_up() is None
        assert controller.pointer_cancel() is None
        assert commits == []

    @pytest.mark.parametrize("release", ["pointer_cancel", "pointer_leave"])
    def test_cancel_and_leave_commit_like_release(self, release) -> None:
        commits = []
        controller = DragController(single_node_canvas(), on_update=commits.append)
        controller.pointer_down("helper", PointerEvent(0, 0))
        controller.pointer_move(PointerEvent(0, 40), RECT)
        getattr(controller, release)()
        assert len(commits) == 1
        assert commits[0].get_node("helper").y == 80
        assert getattr(controller, release)() is None
        assert len(commits) == 1

    def test_no_drift_over_many_moves(self) -> None:
        controller = DragController(single_node_canvas())
        controller.pointer_down("leader", PointerEvent(0, 0))
        for _ in range(500):
            controller.pointer_move(PointerEvent(3, 7), ContainerRect(width=333, height=777))
        leader = controller.canvas.get_node("leader")
        assert leader.x == pytest.approx(50 + 3 / 333 * 100)
        assert leader.y == pytest.approx(50 + 7 / 777 * 100)

    def test_second_pointer_down_ignored_while_dragging(self) -> None:
        controller = DragController(single_node_canvas())
        assert controller.pointer_down("leader", PointerEvent(0, 0))
        assert not controller.pointer_down("helper", PointerEvent(0, 0))
        assert controller.dragging_id == "leader"

    def test_unknown_node_and_empty_rect(self) -> None:
        controller = DragController(single_node_canvas())
        assert not controller.pointer_down("ghost", PointerEvent(0, 0))
        controller.pointer_down("leader", PointerEvent(0, 0))
        assert controller.pointer_move(PointerEvent(10, 10), ContainerRect(width=0, height=0)) is None
        assert controller.canvas.get_node("leader").x == 50

    def test_resize_keeps_positions(self) -> None:
        controller = DragController(single_node_canvas())
        controller.resize(1200, 600)
        assert (controller.container_width, controller.container_height) == (1200, 600)
        assert controller.canvas == single_node_canvas()

    def test_non_editable_is_inert(self) -> None:
        commits = []
        controller = DragController(single_node_canvas(), on_update=commits.append, editable=False)
        assert not controller.pointer_down("leader", PointerEvent(0, 0))
        controller.pointer_move(PointerEvent(100, 100), RECT)
        controller.pointer_up()
        assert controller.canvas == single_node_canvas()
        assert commits == []


class TestTeamCanvasWidget:

    def test_drag_round_trip_through_widget(self, team) -> None:
        commits = []
        widget = TeamCanvasWidget(team, on_update=commits.append)
        widget.resize(400, 400)
        widget.pointer_down("node_a1", PointerEvent(0, 0))
        widget.pointer_move(PointerEvent(-400, 0))
        widget.pointer_up()

        assert len(commits) == 1
        assert commits[0].get_node("node_a1").x == 6
        # the team's own record is untouched until the caller persists it
        assert team.canvas is None

    def test_drag_does_not_mutate_saved_canvas(self, team) -> None:
        team.canvas = single_node_canvas()
        widget = TeamCanvasWidget(team)
        widget.pointer_down("leader", PointerEvent(0, 0))
        widget.pointer_move(PointerEvent(40, 40), RECT)
        assert team.canvas.get_node("leader").x == 50
        assert widget.canvas.get_node("leader").x == 60

    def test_set_team_rebases_canvas(self, team) -> None:
        widget = TeamCanvasWidget(team)
        widget.pointer_down("node_a0", PointerEvent(0, 0))
        other = Team(id="t2", name="Other", canvas=single_node_canvas())
        widget.set_team(other)
        assert widget.dragging_id is None
        assert [n.id for n in widget.canvas.nodes] == ["leader", "helper"]

    def test_render_marks_dragged_node(self, team) -> None:
        widget = TeamCanvasWidget(team)
        widget.resize(920, 533)
        widget.pointer_down("node_a0", PointerEvent(0, 0))
        svg = widget.render()
        assert 'data-node-id="node_a0" style="cursor:grabbing"' in svg
        assert 'data-node-id="node_a1" style="cursor:grab"' in svg

    def test_read_only_widget(self, team) -> None:
        commits = []
        widget = TeamCanvasWidget(team, editable=False, on_update=commits.append)
        widget.resize(400, 400)
        before = [(n.x, n.y) for n in widget.canvas.nodes]
        widget.pointer_down("node_a1", PointerEvent(0, 0))
        widget.pointer_move(PointerEvent(200, 200))
        widget.pointer_leave()
        assert [(n.x, n.y) for n in widget.canvas.nodes] == before
        assert commits == []
        assert "cursor:default" in widget.render()
