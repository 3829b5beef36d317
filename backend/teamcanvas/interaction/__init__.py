from teamcanvas.interaction.drag import ContainerRect, DragController, PointerEvent
from teamcanvas.interaction.widget import TeamCanvasWidget


__all__ = [
    "ContainerRect",
    "DragController",
    "PointerEvent",
    "TeamCanvasWidget",
]
