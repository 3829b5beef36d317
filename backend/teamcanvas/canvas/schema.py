from typing import List, Optional, Literal
from dataclasses import dataclass, field


NodeKind = Literal["leader", "assistant"]
RunStatus = Literal["idle", "running", "done"]
EdgeStatus = Literal["idle", "active", "done"]


@dataclass
class Progress:
    done: int
    total: int


@dataclass
class TeamCanvasNode:
    id: str
    label: str
    kind: NodeKind                          # leader | assistant
    x: float                                # 0-100, percent of container width
    y: float                                # 0-100, percent of container height
    assistant_id: Optional[str] = None
    icon_text: Optional[str] = None
    subtitle: Optional[str] = None
    role: Optional[str] = None
    accent: Optional[str] = None            # gradient token, e.g. "from-sky-500 to-blue-600"
    status: Optional[RunStatus] = None
    progress: Optional[Progress] = None


@dataclass
class TeamCanvasEdge:
    id: str
    from_id: str
    to_id: str
    status: EdgeStatus = "idle"


@dataclass
class TeamCanvas:
    nodes: List[TeamCanvasNode] = field(default_factory=list)
    edges: List[TeamCanvasEdge] = field(default_factory=list)

    def node_index(self) -> dict:
        return {node.id: node for node in self.nodes}

    def get_node(self, node_id: str) -> Optional[TeamCanvasNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


@dataclass
class TeamAssistant:
    id: str
    name: str
    model: str
    provider: str
    type: str                               # chat | embedding | rerank | tool
    role: str
    icon_text: str
    accent: str
    summary: Optional[str] = None
    status: Optional[RunStatus] = None


@dataclass
class TeamMember:
    id: str
    name: str
    role: str                               # owner | member
    avatar: str
    color: str
    online: Optional[bool] = None


@dataclass
class Team:
    id: str
    name: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    members: List[TeamMember] = field(default_factory=list)
    assistants: List[TeamAssistant] = field(default_factory=list)
    leader_id: Optional[str] = None
    goal: Optional[str] = None
    alerts: Optional[int] = None
    status: Optional[str] = None            # active | paused | archived
    canvas: Optional[TeamCanvas] = None
