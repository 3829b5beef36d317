"""
Canvas geometry - projects the normalized 0-100 node graph onto a measured
container.

All functions here are pure: positions live in percent space, container
dimensions are pixels, and nothing is cached between calls.
"""

from typing import Dict

from teamcanvas.canvas.schema import TeamCanvasNode
from teamcanvas.canvas.style import NODE_SIZE_PX, FALLBACK_RADIUS_Y


REFERENCE_WIDTH_PX = 920
MIN_NODE_SCALE = 0.75
MAX_NODE_SCALE = 1.0

# Drag margins keep nodes off the container edge
DRAG_X_RANGE = (6.0, 94.0)
DRAG_Y_RANGE = (8.0, 92.0)

CANVAS_HEIGHT_RATIO = 0.58
CANVAS_HEIGHT_RANGE = (360.0, 620.0)
CANVAS_HEIGHT_FALLBACK = 520.0


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def clamp_position(x: float, y: float) -> tuple:
    return (
        clamp(x, *DRAG_X_RANGE),
        clamp(y, *DRAG_Y_RANGE),
    )


def _round_half_up(value: float) -> int:
    # Matches browser Math.round for positive pixel sizes
    return int(value + 0.5)


def node_size_px(node: TeamCanvasNode, width: float) -> int:
    """
    Pixel diameter of a node circle.

    Leaders are 80px, assistants 64px. Once the container is measured the
    size scales with width / 920, never below 75% and never above 100%.
    """
    base = NODE_SIZE_PX["leader"] if node.kind == "leader" else NODE_SIZE_PX["assistant"]
    if not width:
        return base
    scale = clamp(width / REFERENCE_WIDTH_PX, MIN_NODE_SCALE, MAX_NODE_SCALE)
    return _round_half_up(base * scale)


def node_radius_y(node: TeamCanvasNode, height: float, width: float) -> float:
    """Vertical radius of a node expressed in normalized (0-100) units."""
    if not height:
        return FALLBACK_RADIUS_Y["leader"] if node.kind == "leader" else FALLBACK_RADIUS_Y["assistant"]
    size_px = node_size_px(node, width)
    return (size_px / height) * 50


def edge_endpoints(
    source: TeamCanvasNode,
    target: TeamCanvasNode,
    height: float,
    width: float,
) -> Dict[str, float]:
    """
    Connection points for an edge so the line meets each circle's boundary
    instead of its centre.

    When the source sits above (or level with) the target the line leaves
    the bottom of the source and enters the top of the target; otherwise
    the offsets flip.
    """
    source_radius = node_radius_y(source, height, width)
    target_radius = node_radius_y(target, height, width)
    source_above = source.y <= target.y

    return {
        "x1": source.x,
        "y1": source.y + (source_radius if source_above else -source_radius),
        "x2": target.x,
        "y2": target.y + (-target_radius if source_above else target_radius),
    }


def curve_control_point(x1: float, y1: float, x2: float, y2: float) -> Dict[str, float]:
    """Control point of the quadratic curve joining two endpoints."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    lift = clamp(4 + dx * 0.12 + dy * 0.08, 4, 14)

    is_downward = y2 >= y1
    if is_downward:
        control_y = min(y1, y2) - lift
    else:
        control_y = max(y1, y2) + lift

    return {"cx": (x1 + x2) / 2, "cy": control_y}


def edge_path(source: TeamCanvasNode, target: TeamCanvasNode, height: float, width: float) -> str:
    points = edge_endpoints(source, target, height, width)
    control = curve_control_point(points["x1"], points["y1"], points["x2"], points["y2"])
    return (
        f"M {_fmt(points['x1'])} {_fmt(points['y1'])} "
        f"Q {_fmt(control['cx'])} {_fmt(control['cy'])} "
        f"{_fmt(points['x2'])} {_fmt(points['y2'])}"
    )


def canvas_height(width: float) -> float:
    """Pixel height of the node layer for a given container width."""
    if not width:
        return CANVAS_HEIGHT_FALLBACK
    return clamp(width * CANVAS_HEIGHT_RATIO, *CANVAS_HEIGHT_RANGE)


def icon_label(node: TeamCanvasNode) -> str:
    text = node.icon_text or node.label or ""
    if len(text) <= 3:
        return text
    return text[:2]


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
