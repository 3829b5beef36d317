from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional


class _Payload(BaseModel):
    # Stored JSON uses camelCase keys
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProgressPayload(_Payload):
    done: int
    total: int


class CanvasNodePayload(_Payload):
    id: str
    label: str
    kind: Literal["leader", "assistant"]
    x: float
    y: float
    assistant_id: Optional[str] = Field(default=None, alias="assistantId")
    icon_text: Optional[str] = Field(default=None, alias="iconText")
    subtitle: Optional[str] = None
    role: Optional[str] = None
    accent: Optional[str] = None
    status: Optional[Literal["idle", "running", "done"]] = None
    progress: Optional[ProgressPayload] = None


class CanvasEdgePayload(_Payload):
    id: str
    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")
    status: Literal["idle", "active", "done"] = "idle"

    @field_validator("status", mode="before")
    @classmethod
    def pending_is_idle(cls, value):
        if value is None or value == "pending":
            return "idle"
        return value


class CanvasPayload(_Payload):
    nodes: List[CanvasNodePayload] = []
    edges: List[CanvasEdgePayload] = []


class AssistantPayload(_Payload):
    id: str
    name: str
    model: str
    provider: str
    type: str = "chat"
    role: str = ""
    summary: Optional[str] = None
    icon_text: str = Field(default="", alias="iconText")
    accent: str = ""
    status: Optional[Literal["idle", "running", "done"]] = None


class MemberPayload(_Payload):
    id: str
    name: str
    role: Literal["owner", "member"] = "member"
    avatar: str = ""
    color: str = ""
    online: Optional[bool] = None


class TeamPayload(_Payload):
    id: str
    name: str
    description: str = ""
    tags: List[str] = []
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    members: List[MemberPayload] = []
    assistants: List[AssistantPayload] = []
    leader_id: Optional[str] = Field(default=None, alias="leaderId")
    goal: Optional[str] = None
    alerts: Optional[int] = None
    status: Optional[Literal["active", "paused", "archived"]] = None
    canvas: Optional[CanvasPayload] = None


class CustomAssistantPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    model: str = ""
    provider: str = ""
    type: str = "chat"
    role: Optional[str] = None
    summary: Optional[str] = None
    icon_text: Optional[str] = Field(default=None, alias="iconText")
    accent: Optional[str] = None
