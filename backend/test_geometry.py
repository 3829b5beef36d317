"""Tests for canvas geometry helpers."""

import pytest

from teamcanvas.canvas.schema import TeamCanvasNode
from teamcanvas.layout.geometry import (
    canvas_height,
    clamp_position,
    curve_control_point,
    edge_endpoints,
    edge_path,
    icon_label,
    node_radius_y,
    node_size_px,
)


def node(kind: str = "assistant", x: float = 50, y: float = 50, **kw) -> TeamCanvasNode:
    return TeamCanvasNode(id=f"{kind}-{x}-{y}", label=kw.pop("label", "Node"), kind=kind, x=x, y=y, **kw)


class TestNodeSize:

    def test_unmeasured_width_returns_base(self) -> None:
        assert node_size_px(node("leader"), 0) == 80
        assert node_size_px(node("assistant"), 0) == 64

    def test_wide_container_never_grows(self) -> None:
        assert node_size_px(node("leader"), 1840) == 80

    def test_narrow_container_floors_at_three_quarters(self) -> None:
        assert node_size_px(node("leader"), 460) == 60
        assert node_size_px(node("assistant"), 100) == 48

    def test_scales_between_bounds(self) -> None:
        # 828 / 920 = 0.9
        assert node_size_px(node("leader"), 828) == 72


class TestRadius:

    def test_fallback_when_height_unmeasured(self) -> None:
        assert node_radius_y(node("leader"), 0, 920) == 7.5
        assert node_radius_y(node("assistant"), 0, 920) == 6.2

    def test_radius_in_normalized_units(self) -> None:
        assert node_radius_y(node("leader"), 500, 920) == pytest.approx(8.0)
        assert node_radius_y(node("assistant"), 500, 920) == pytest.approx(6.4)


class TestEdgeEndpoints:

    def test_source_above_target(self) -> None:
        leader = node("leader", 50, 24)
        follower = node("assistant", 30, 68)
        points = edge_endpoints(leader, follower, 0, 0)
        assert points == {"x1": 50, "y1": pytest.approx(31.5), "x2": 30, "y2": pytest.approx(61.8)}

    def test_source_below_target_flips_offsets(self) -> None:
        low = node("assistant", 40, 80)
        high = node("leader", 60, 20)
        points = edge_endpoints(low, high, 0, 0)
        assert points["y1"] == pytest.approx(80 - 6.2)
        assert points["y2"] == pytest.approx(20 + 7.5)

    def test_deterministic(self) -> None:
        a, b = node("leader", 50, 24), node("assistant", 18, 68)
        assert edge_endpoints(a, b, 540, 900) == edge_endpoints(a, b, 540, 900)


class TestCurveControlPoint:

    def test_downward_edge_bows_upward(self) -> None:
        control = curve_control_point(50, 31.5, 50, 61.8)
        assert control["cx"] == 50
        assert control["cy"] == pytest.approx(31.5 - (4 + 30.3 * 0.08))

    def test_upward_edge_bows_downward(self) -> None:
        control = curve_control_point(20, 60, 40, 40)
        # lift = 4 + 20*0.12 + 20*0.08 = 8
        assert control == {"cx": 30, "cy": pytest.approx(68)}

    def test_lift_is_bounded(self) -> None:
        assert curve_control_point(0, 0, 0, 0)["cy"] == -4
        assert curve_control_point(0, 0, 100, 100)["cy"] == -14

    def test_deterministic(self) -> None:
        assert curve_control_point(1, 2, 3, 4) == curve_control_point(1, 2, 3, 4)


class TestMisc:

    def test_clamp_position_margins(self) -> None:
        assert clamp_position(-5, 200) == (6, 92)
        assert clamp_position(50, 50) == (50, 50)

    def test_canvas_height(self) -> None:
        assert canvas_height(0) == 520
        assert canvas_height(400) == 360
        assert canvas_height(800) == pytest.approx(464)
        assert canvas_height(2000) == 620

    def test_icon_label(self) -> None:
        assert icon_label(node(icon_text="GPT")) == "GPT"
        assert icon_label(node(icon_text="DeepSeek")) == "De"
        assert icon_label(node(label="Grok")) == "Gr"

    def test_edge_path_is_quadratic(self) -> None:
        path = edge_path(node("leader", 50, 24), node("assistant", 50, 68), 0, 0)
        assert path.startswith("M 50 31.5 Q 50 ")
        assert path.endswith("50 61.8")
