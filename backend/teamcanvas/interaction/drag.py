"""
Drag Controller - pointer-driven repositioning of one canvas node at a time.

States: idle -> dragging (pointer down on a node) -> idle (pointer up,
cancel or leave). Positions are written to the live canvas on every move;
the persistence callback fires once per gesture, on release.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from teamcanvas.canvas.schema import TeamCanvas, TeamCanvasNode
from teamcanvas.layout.geometry import clamp_position


logger = logging.getLogger(__name__)


@dataclass
class PointerEvent:
    client_x: float
    client_y: float
    pointer_id: int = 1


@dataclass
class ContainerRect:
    """Bounding box of the canvas container in client pixels."""
    width: float
    height: float
    left: float = 0.0
    top: float = 0.0


@dataclass
class DragState:
    node_id: str
    pointer_id: int
    start_x: float
    start_y: float
    origin_x: float
    origin_y: float


class DragController:
    """
    Tracks a single active drag over a live TeamCanvas.

    Usage:
        controller = DragController(canvas, on_update=save)
        controller.pointer_down("node_gpt-4o", PointerEvent(100, 100))
        controller.pointer_move(PointerEvent(140, 120), ContainerRect(400, 400))
        controller.pointer_up()
    """

    def __init__(
        self,
        canvas: TeamCanvas,
        on_update: Optional[Callable[[TeamCanvas], None]] = None,
        editable: bool = True,
    ):
        self.canvas = canvas
        self.on_update = on_update
        self.editable = editable
        self.container_width = 0.0
        self.container_height = 0.0
        self._drag: Optional[DragState] = None

    @property
    def dragging_id(self) -> Optional[str]:
        return self._drag.node_id if self._drag else None

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def reset(self, canvas: TeamCanvas) -> None:
        """Swap in a new base canvas; any in-flight drag is dropped without commit."""
        self.canvas = canvas
        self._drag = None

    def resize(self, width: float, height: float) -> None:
        # Only the pixel projection changes; node positions stay put
        self.container_width = width or 0.0
        self.container_height = height or 0.0

    def pointer_down(self, node_id: str, event: PointerEvent) -> bool:
        if not self.editable or self._drag is not None:
            return False

        node = self.canvas.get_node(node_id)
        if node is None:
            return False

        self._drag = DragState(
            node_id=node.id,
            pointer_id=event.pointer_id,
            start_x=event.client_x,
            start_y=event.client_y,
            origin_x=node.x,
            origin_y=node.y,
        )
        logger.debug("[DRAG] start %s at (%.2f, %.2f)", node.id, node.x, node.y)
        return True

    def pointer_move(self, event: PointerEvent, rect: ContainerRect) -> Optional[TeamCanvasNode]:
        """
        Move the dragged node to follow the pointer.

        The offset is always measured from the drag-start origin so repeated
        moves never accumulate rounding error.
        """
        if not self.editable:
            return None
        drag = self._drag
        if drag is None or rect is None or not rect.width or not rect.height:
            return None
        if event.pointer_id != drag.pointer_id:
            return None

        dx = ((event.client_x - drag.start_x) / rect.width) * 100
        dy = ((event.client_y - drag.start_y) / rect.height) * 100
        next_x, next_y = clamp_position(drag.origin_x + dx, drag.origin_y + dy)
        return self._update_node(drag.node_id, next_x, next_y)

    def pointer_up(self) -> Optional[TeamCanvas]:
        return self._finish("up")

    def pointer_cancel(self) -> Optional[TeamCanvas]:
        return self._finish("cancel")

    def pointer_leave(self) -> Optional[TeamCanvas]:
        return self._finish("leave")

    def snapshot(self) -> TeamCanvas:
        return copy.deepcopy(self.canvas)

    def _update_node(self, node_id: str, x: float, y: float) -> Optional[TeamCanvasNode]:
        node = self.canvas.get_node(node_id)
        if node is None:
            return None
        node.x = x
        node.y = y
        return node

    def _finish(self, reason: str) -> Optional[TeamCanvas]:
        if not self.editable:
            return None
        drag = self._drag
        if drag is None:
            return None

        self._drag = None
        committed = self.snapshot()
        logger.debug("[DRAG] %s commits %s", reason, drag.node_id)
        if self.on_update is not None:
            self.on_update(committed)
        return committed
