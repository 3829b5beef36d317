"""Headless team canvas widget: binds a team's layout to a DragController."""

import copy
from typing import Callable, Optional

from teamcanvas.canvas.builder import resolve_base_canvas
from teamcanvas.canvas.schema import Team, TeamCanvas
from teamcanvas.interaction.drag import ContainerRect, DragController, PointerEvent
from teamcanvas.renderer.svg_renderer import render_canvas_svg


class TeamCanvasWidget:
    """
    Headless team canvas: owns the live layout for one team and routes
    pointer events to the drag controller.

    With ``editable=False`` every pointer handler is inert.
    """

    def __init__(
        self,
        team: Team,
        editable: bool = True,
        on_update: Optional[Callable[[TeamCanvas], None]] = None,
    ):
        self.editable = editable
        self.on_update = on_update
        self.team = team
        self.controller = DragController(
            self._base_canvas(team),
            on_update=self._commit,
            editable=editable,
        )

    @property
    def canvas(self) -> TeamCanvas:
        return self.controller.canvas

    @property
    def container_size(self) -> tuple:
        return (self.controller.container_width, self.controller.container_height)

    @property
    def dragging_id(self) -> Optional[str]:
        return self.controller.dragging_id

    def set_team(self, team: Team) -> None:
        self.team = team
        self.controller.reset(self._base_canvas(team))

    def resize(self, width: float, height: float) -> None:
        self.controller.resize(width, height)

    def container_rect(self) -> ContainerRect:
        width, height = self.container_size
        return ContainerRect(width=width, height=height)

    def pointer_down(self, node_id: str, event: PointerEvent) -> bool:
        return self.controller.pointer_down(node_id, event)

    def pointer_move(self, event: PointerEvent, rect: Optional[ContainerRect] = None):
        return self.controller.pointer_move(event, rect or self.container_rect())

    def pointer_up(self) -> Optional[TeamCanvas]:
        return self.controller.pointer_up()

    def pointer_cancel(self) -> Optional[TeamCanvas]:
        return self.controller.pointer_cancel()

    def pointer_leave(self) -> Optional[TeamCanvas]:
        return self.controller.pointer_leave()

    def render(self) -> str:
        width, height = self.container_size
        return render_canvas_svg(
            self.canvas,
            width=width,
            height=height,
            editable=self.editable,
            dragging_id=self.dragging_id,
        )

    @staticmethod
    def _base_canvas(team: Team) -> TeamCanvas:
        # Drags mutate the live copy, never the team's stored canvas
        return copy.deepcopy(resolve_base_canvas(team))

    def _commit(self, canvas: TeamCanvas) -> None:
        if self.on_update is not None:
            self.on_update(canvas)
