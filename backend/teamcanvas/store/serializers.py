from typing import Any

from teamcanvas.canvas.catalog import TeamAssistantCatalogItem
from teamcanvas.canvas.schema import (
    Progress,
    Team,
    TeamAssistant,
    TeamCanvas,
    TeamCanvasEdge,
    TeamCanvasNode,
    TeamMember,
)
from teamcanvas.schemas import (
    CanvasPayload,
    CustomAssistantPayload,
    TeamPayload,
)


PRIMITIVE_TYPES = (str, int, float, bool, type(None))

# Stored key names that do not follow the plain camelCase rule
KEY_OVERRIDES = {
    "from_id": "from",
    "to_id": "to",
}


def _camel(key: str) -> str:
    if key in KEY_OVERRIDES:
        return KEY_OVERRIDES[key]
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def serialize(obj: Any):
    """
    Serialize canvas/team dataclasses into the stored JSON shape.
    Deterministic. Keys become camelCase; None fields are omitted.
    """
    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, (list, tuple)):
        return [serialize(item) for item in obj]

    if isinstance(obj, dict):
        return {k: serialize(v) for k, v in obj.items()}

    if hasattr(obj, "__dict__"):
        return {
            _camel(key): serialize(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_") and value is not None
        }

    return str(obj)


def canvas_from_payload(payload: CanvasPayload) -> TeamCanvas:
    return TeamCanvas(
        nodes=[
            TeamCanvasNode(
                id=n.id,
                label=n.label,
                kind=n.kind,
                x=n.x,
                y=n.y,
                assistant_id=n.assistant_id,
                icon_text=n.icon_text,
                subtitle=n.subtitle,
                role=n.role,
                accent=n.accent,
                status=n.status,
                progress=Progress(done=n.progress.done, total=n.progress.total) if n.progress else None,
            )
            for n in payload.nodes
        ],
        edges=[
            TeamCanvasEdge(id=e.id, from_id=e.from_id, to_id=e.to_id, status=e.status)
            for e in payload.edges
        ],
    )


def parse_canvas(raw: dict) -> TeamCanvas:
    """Raises pydantic.ValidationError on malformed input."""
    return canvas_from_payload(CanvasPayload.model_validate(raw))


def parse_team(raw: dict) -> Team:
    """Raises pydantic.ValidationError on malformed input."""
    payload = TeamPayload.model_validate(raw)
    return Team(
        id=payload.id,
        name=payload.name,
        description=payload.description,
        tags=list(payload.tags),
        created_at=payload.created_at,
        updated_at=payload.updated_at,
        members=[
            TeamMember(
                id=m.id,
                name=m.name,
                role=m.role,
                avatar=m.avatar,
                color=m.color,
                online=m.online,
            )
            for m in payload.members
        ],
        assistants=[
            TeamAssistant(
                id=a.id,
                name=a.name,
                model=a.model,
                provider=a.provider,
                type=a.type,
                role=a.role,
                summary=a.summary,
                icon_text=a.icon_text,
                accent=a.accent,
                status=a.status,
            )
            for a in payload.assistants
        ],
        leader_id=payload.leader_id,
        goal=payload.goal,
        alerts=payload.alerts,
        status=payload.status,
        canvas=canvas_from_payload(payload.canvas) if payload.canvas else None,
    )


def parse_custom_assistant(raw: dict) -> CustomAssistantPayload:
    return CustomAssistantPayload.model_validate(raw)


def serialize_custom_assistant(item: TeamAssistantCatalogItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "model": item.model,
        "provider": item.provider,
        "type": item.type,
        "role": item.role,
        "summary": item.summary,
        "iconText": item.icon_text,
        "accent": item.accent,
    }
