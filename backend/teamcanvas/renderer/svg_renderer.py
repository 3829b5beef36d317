from html import escape
from typing import Optional

from teamcanvas.canvas.schema import TeamCanvas, TeamCanvasNode
from teamcanvas.canvas.style import (
    ACCENT_COLORS,
    CROWN_COLOR,
    DEFAULT_ACCENT,
    DONE_BADGE_TEXT,
    EDGE_STROKE,
    NODE_RING,
    PROGRESS_BADGE_COLOR,
)
from teamcanvas.layout.geometry import (
    REFERENCE_WIDTH_PX,
    canvas_height,
    edge_path,
    icon_label,
    node_size_px,
)


def edge_stroke(status: Optional[str]) -> str:
    return EDGE_STROKE.get(status or "idle", EDGE_STROKE["idle"])


def _gradient_id(node: TeamCanvasNode) -> str:
    return f"grad_{escape(node.id, quote=True)}"


def _render_gradient(node: TeamCanvasNode) -> str:
    start, end = ACCENT_COLORS.get(node.accent or DEFAULT_ACCENT, ACCENT_COLORS[DEFAULT_ACCENT])
    return (
        f'<linearGradient id="{_gradient_id(node)}" x1="0" y1="0" x2="1" y2="1">'
        f'<stop offset="0%" stop-color="{start}"/>'
        f'<stop offset="100%" stop-color="{end}"/>'
        f'</linearGradient>'
    )


def _render_node(node: TeamCanvasNode, frame_w: float, frame_h: float,
                 measured_w: float, editable: bool, dragging: bool) -> list:
    cx = node.x / 100 * frame_w
    cy = node.y / 100 * frame_h
    size = node_size_px(node, measured_w)
    r = size / 2
    ring = NODE_RING["leader"] if node.kind == "leader" else NODE_RING["assistant"]

    if not editable:
        cursor = "default"
    elif dragging:
        cursor = "grabbing"
    else:
        cursor = "grab"

    parts = [
        f'<g class="node node-{node.kind}" data-node-id="{escape(node.id, quote=True)}" '
        f'style="cursor:{cursor}">',
        f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r:.2f}" '
        f'fill="url(#{_gradient_id(node)})" stroke="{ring["color"]}" stroke-width="{ring["width"]}"/>',
        f'<text x="{cx:.2f}" y="{cy:.2f}" text-anchor="middle" dominant-baseline="middle" '
        f'font-family="Arial" font-size="14" font-weight="600" fill="#FFFFFF">'
        f'{escape(icon_label(node))}</text>',
    ]

    if node.kind == "leader":
        parts.append(
            f'<circle class="crown" cx="{cx:.2f}" cy="{cy - r - 4:.2f}" r="12" fill="{CROWN_COLOR}"/>'
        )

    if node.progress:
        parts.append(
            f'<g class="progress"><rect x="{cx + r - 12:.2f}" y="{cy - r - 8:.2f}" width="34" height="18" '
            f'rx="9" fill="{PROGRESS_BADGE_COLOR}" stroke="#FFFFFF"/>'
            f'<text x="{cx + r + 5:.2f}" y="{cy - r + 1:.2f}" text-anchor="middle" '
            f'dominant-baseline="middle" font-size="10" fill="#FFFFFF">'
            f'{node.progress.done}/{node.progress.total}</text></g>'
        )

    text_y = cy + r + 16
    parts.append(
        f'<text x="{cx:.2f}" y="{text_y:.2f}" text-anchor="middle" font-size="12" '
        f'font-weight="600" fill="#111827">{escape(node.label or "")}</text>'
    )
    if node.subtitle:
        text_y += 14
        parts.append(
            f'<text x="{cx:.2f}" y="{text_y:.2f}" text-anchor="middle" font-size="11" '
            f'fill="#6B7280">({escape(node.subtitle)})</text>'
        )
    if node.role:
        text_y += 14
        parts.append(
            f'<text x="{cx:.2f}" y="{text_y:.2f}" text-anchor="middle" font-size="11" '
            f'fill="#9CA3AF">{escape(node.role)}</text>'
        )
    if node.status == "done":
        text_y += 16
        parts.append(
            f'<text class="done-badge" x="{cx:.2f}" y="{text_y:.2f}" text-anchor="middle" '
            f'font-size="10" fill="#047857">{DONE_BADGE_TEXT}</text>'
        )

    parts.append("</g>")
    return parts


def render_canvas_svg(
    canvas: TeamCanvas,
    width: float = 0,
    height: float = 0,
    editable: bool = True,
    dragging_id: Optional[str] = None,
) -> str:
    """
    Render a team canvas as standalone SVG.

    Edges are drawn first in a 0-100 viewBox so they share the nodes'
    normalized coordinates; edges whose endpoints are missing are skipped.
    ``width``/``height`` are the measured container size (0 = unmeasured).
    """
    frame_w = width or REFERENCE_WIDTH_PX
    frame_h = height or canvas_height(width)
    node_map = canvas.node_index()

    svg = [
        f'<svg width="{frame_w:g}" height="{frame_h:g}" xmlns="http://www.w3.org/2000/svg">',
        "<defs>",
    ]
    svg.extend(_render_gradient(node) for node in canvas.nodes)
    svg.append("</defs>")

    svg.append('<svg class="edges" viewBox="0 0 100 100" preserveAspectRatio="none" '
               f'width="{frame_w:g}" height="{frame_h:g}">')
    for edge in canvas.edges:
        src = node_map.get(edge.from_id)
        dst = node_map.get(edge.to_id)
        if src is None or dst is None:
            continue
        svg.append(
            f'<path data-edge-id="{escape(edge.id, quote=True)}" '
            f'd="{edge_path(src, dst, height, width)}" '
            f'stroke="{edge_stroke(edge.status)}" stroke-width="0.6" '
            f'stroke-linecap="round" fill="none"/>'
        )
    svg.append("</svg>")

    for node in canvas.nodes:
        svg.extend(_render_node(node, frame_w, frame_h, width, editable, node.id == dragging_id))

    svg.append("</svg>")
    return "\n".join(svg)
