from teamcanvas.canvas.schema import (
    Progress,
    Team,
    TeamAssistant,
    TeamCanvas,
    TeamCanvasEdge,
    TeamCanvasNode,
    TeamMember,
)


__all__ = [
    "Progress",
    "Team",
    "TeamAssistant",
    "TeamCanvas",
    "TeamCanvasEdge",
    "TeamCanvasNode",
    "TeamMember",
]
