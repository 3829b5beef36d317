from typing import List, Optional

from teamcanvas.canvas.schema import (
    Progress,
    Team,
    TeamAssistant,
    TeamCanvas,
    TeamCanvasEdge,
    TeamCanvasNode,
)
from teamcanvas.layout.geometry import clamp


LEADER_POSITION = (50.0, 24.0)
MAX_PER_ROW = 6
SINGLE_ROW_Y = 68.0
ROWS_TOP_Y = 58.0
ROWS_BOTTOM_Y = 82.0


def node_id_for(assistant_id: str) -> str:
    return f"node_{assistant_id}"


def _edge_status(status: str) -> str:
    if status == "done":
        return "done"
    if status == "running":
        return "active"
    return "idle"


def _row_ys(row_count: int) -> List[float]:
    if row_count == 1:
        return [SINGLE_ROW_Y]
    step = (ROWS_BOTTOM_Y - ROWS_TOP_Y) / (row_count - 1)
    return [ROWS_TOP_Y + index * step for index in range(row_count)]


def _row_xs(row_size: int) -> List[float]:
    if row_size == 1:
        return [50.0]
    span = clamp(28 + (row_size - 1) * 12, 28, 72)
    x_start = 50 - span / 2
    x_end = 50 + span / 2
    return [x_start + (i * (x_end - x_start)) / (row_size - 1) for i in range(row_size)]


def _make_node(assistant: TeamAssistant, kind: str, x: float, y: float,
               progress: Progress, status: str) -> TeamCanvasNode:
    return TeamCanvasNode(
        id=node_id_for(assistant.id),
        assistant_id=assistant.id,
        icon_text=assistant.icon_text,
        label=assistant.name,
        subtitle=assistant.model,
        role=assistant.role,
        kind=kind,
        x=x,
        y=y,
        progress=Progress(done=progress.done, total=progress.total),
        status=status,
        accent=assistant.accent,
    )


def build_team_canvas(
    assistants: List[TeamAssistant],
    leader_id: Optional[str] = None,
    progress: Optional[Progress] = None,
    status: Optional[str] = None,
) -> TeamCanvas:
    """
    Derive the default star layout for a team roster.

    The leader (``leader_id``, or the first assistant when that id is
    missing) sits top-centre. Followers fill rows of at most six beneath it,
    each row centred, and every follower gets one edge from the leader.
    Output depends only on the arguments.
    """
    if not assistants:
        return TeamCanvas()

    leader = next((a for a in assistants if a.id == leader_id), assistants[0])
    followers = [a for a in assistants if a.id != leader.id]
    progress = progress or Progress(done=2, total=2)
    status = status or "done"

    leader_node = _make_node(leader, "leader", *LEADER_POSITION, progress, status)
    nodes = [leader_node]

    count = len(followers)
    row_count = max(1, -(-count // MAX_PER_ROW))
    base_row_size = count // row_count
    remainder = count % row_count

    cursor = 0
    for row_index, y in enumerate(_row_ys(row_count)):
        row_size = base_row_size + (1 if row_index < remainder else 0)
        if row_size <= 0:
            continue
        for i, x in enumerate(_row_xs(row_size)):
            nodes.append(_make_node(followers[cursor + i], "assistant", x, y, progress, status))
        cursor += row_size

    edges = [
        TeamCanvasEdge(
            id=f"edge_{leader.id}_{assistant.id}",
            from_id=leader_node.id,
            to_id=node_id_for(assistant.id),
            status=_edge_status(status),
        )
        for assistant in followers
    ]

    return TeamCanvas(nodes=nodes, edges=edges)


def resolve_base_canvas(team: Team) -> TeamCanvas:
    """The team's saved layout, or a freshly derived one when nothing is saved."""
    if team.canvas and team.canvas.nodes:
        return team.canvas
    return build_team_canvas(team.assistants, team.leader_id)
