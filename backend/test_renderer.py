"""Tests for the SVG canvas renderer."""

from teamcanvas.canvas.builder import build_team_canvas
from teamcanvas.canvas.schema import Progress, TeamCanvas, TeamCanvasEdge, TeamCanvasNode
from teamcanvas.renderer.svg_renderer import edge_stroke, render_canvas_svg


def two_node_canvas() -> TeamCanvas:
    return TeamCanvas(
        nodes=[
            TeamCanvasNode(id="lead", label="Lead", kind="leader", x=50, y=24,
                           progress=Progress(1, 2), status="done"),
            TeamCanvasNode(id="aide", label="<Aide & Co>", kind="assistant", x=30, y=68,
                           subtitle="gpt-4o", role="研究"),
        ],
        edges=[
            TeamCanvasEdge(id="ok", from_id="lead", to_id="aide", status="active"),
            TeamCanvasEdge(id="dangling", from_id="lead", to_id="ghost"),
        ],
    )


def test_dangling_edges_are_skipped():
    svg = render_canvas_svg(two_node_canvas(), width=920, height=533)
    assert 'data-edge-id="ok"' in svg
    assert 'data-edge-id="dangling"' not in svg
    assert svg.count("<path") == 1


def test_edge_stroke_by_status():
    assert edge_stroke("done") == "#22C55E"
    assert edge_stroke("active") == "#7C3AED"
    assert edge_stroke("idle") == "#CBD5F5"
    assert edge_stroke(None) == "#CBD5F5"
    svg = render_canvas_svg(two_node_canvas(), width=920, height=533)
    assert 'stroke="#7C3AED"' in svg


def test_node_details_and_escaping():
    svg = render_canvas_svg(two_node_canvas(), width=920, height=533)
    assert "&lt;Aide &amp; Co&gt;" in svg
    assert "(gpt-4o)" in svg
    assert "研究" in svg
    assert "1/2" in svg
    assert 'class="crown"' in svg
    assert "已完成" in svg
    assert svg.count('class="crown"') == 1


def test_empty_canvas_renders_frame_only():
    svg = render_canvas_svg(TeamCanvas())
    assert svg.startswith('<svg width="920" height="520"')
    assert "<circle" not in svg
    assert svg.endswith("</svg>")


def test_nodes_render_in_insertion_order(roster):
    canvas = build_team_canvas(roster, "a0")
    svg = render_canvas_svg(canvas, width=600, height=400)
    positions = [svg.index(f'data-node-id="{n.id}"') for n in canvas.nodes]
    assert positions == sorted(positions)
