"""
Assistant Catalog - built-in assistants plus helpers for custom entries,
and the factories that turn a roster into a Team.
"""

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from teamcanvas.canvas.builder import build_team_canvas
from teamcanvas.canvas.schema import Progress, Team, TeamAssistant, TeamMember
from teamcanvas.canvas.style import (
    FALLBACK_PROVIDER_ACCENT,
    MEMBER_COLORS,
    PROVIDER_ACCENTS,
)


CUSTOM_ROLE = "自定义"
SEED_DATE = "2026-01-26T08:00:00.000Z"


@dataclass
class TeamAssistantCatalogItem:
    id: str
    name: str
    model: str
    provider: str
    type: str
    role: str
    summary: str
    icon_text: str
    accent: str
    source: str = "builtin"                 # builtin | custom


@dataclass
class TeamDraft:
    name: str
    description: str
    tags: List[str] = field(default_factory=list)
    assistant_ids: List[str] = field(default_factory=list)
    goal: Optional[str] = None


def _builtin(id: str, name: str, model: str, provider: str, type: str,
             role: str, summary: str, icon_text: str, accent: str) -> TeamAssistantCatalogItem:
    return TeamAssistantCatalogItem(
        id=id,
        name=name,
        model=model,
        provider=provider,
        type=type,
        role=role,
        summary=summary,
        icon_text=icon_text,
        accent=accent,
        source="builtin",
    )


TEAM_ASSISTANT_CATALOG: List[TeamAssistantCatalogItem] = [
    _builtin("gpt-5.1", "ChatGPT", "gpt-5.1", "OpenAI", "chat",
             "总协调", "负责统筹与任务拆解", "GPT", "from-emerald-500 to-green-600"),
    _builtin("gpt-4o", "ChatGPT", "gpt-4o", "OpenAI", "chat",
             "行业研究", "趋势解读与洞察总结", "4O", "from-teal-500 to-emerald-600"),
    _builtin("gpt-4.1-mini", "ChatGPT", "gpt-4.1-mini", "OpenAI", "chat",
             "快检助手", "快速补充与校验资料", "4.1", "from-cyan-500 to-sky-600"),
    _builtin("grok-4.1", "Grok", "grok-4.1", "xAI", "chat",
             "竞品情报", "跟踪竞争格局与动态", "X", "from-neutral-700 to-neutral-900"),
    _builtin("gemini-3-pro", "Gemini", "gemini-3-pro", "Google", "chat",
             "技术路线", "评估模型和技术突破", "G", "from-sky-500 to-blue-600"),
    _builtin("deepseek-r1", "DeepSeek", "r1", "DeepSeek", "chat",
             "商业化分析", "测算商业机会与风险", "DS", "from-indigo-500 to-purple-600"),
    _builtin("cohere-rerank", "Cohere", "rerank", "Cohere", "rerank",
             "资料排序", "对资料进行相关度排序", "CR", "from-amber-500 to-orange-500"),
    _builtin("doubao", "Doubao", "pro", "ByteDance", "chat",
             "中文整理", "本地化内容重写与整理", "DB", "from-rose-500 to-pink-500"),
    _builtin("gemini-embedding", "Gemini", "embedding", "Google", "embedding",
             "向量索引", "知识库向量化", "EM", "from-violet-500 to-purple-600"),
]


def create_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4()}"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_provider(provider: str) -> str:
    return provider.strip().lower()


def accent_for_provider(provider: str) -> str:
    return PROVIDER_ACCENTS.get(normalize_provider(provider), FALLBACK_PROVIDER_ACCENT)


def icon_from_name(name: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        return "AI"
    compact = re.sub(r"[^A-Za-z0-9一-龥]", "", trimmed)
    if len(compact) >= 2:
        return compact[:2].upper()
    return trimmed[:2].upper()


def initials_from_name(name: str) -> str:
    parts = name.split()
    if not parts:
        return "U"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return f"{parts[0][0]}{parts[-1][0]}".upper()


def pick_color(index: int) -> str:
    return MEMBER_COLORS[index % len(MEMBER_COLORS)]


def build_custom_assistant(
    name: str,
    model: str,
    provider: str,
    type: str = "chat",
    role: Optional[str] = None,
    summary: Optional[str] = None,
    icon_text: Optional[str] = None,
    accent: Optional[str] = None,
    id: Optional[str] = None,
) -> Optional[TeamAssistantCatalogItem]:
    """Returns None when name, model or provider is blank."""
    name = (name or "").strip()
    model = (model or "").strip()
    provider = (provider or "").strip()
    if not name or not model or not provider:
        return None

    return TeamAssistantCatalogItem(
        id=id or create_id("custom"),
        name=name,
        model=model,
        provider=provider,
        type=type or "chat",
        role=(role or "").strip() or CUSTOM_ROLE,
        summary=(summary or "").strip(),
        icon_text=(icon_text or "").strip() or icon_from_name(name),
        accent=(accent or "").strip() or accent_for_provider(provider),
        source="custom",
    )


def get_assistant_catalog(
    custom: Optional[List[TeamAssistantCatalogItem]] = None,
) -> List[TeamAssistantCatalogItem]:
    return [*TEAM_ASSISTANT_CATALOG, *(custom or [])]


def resolve_assistants(
    ids: List[str],
    custom: Optional[List[TeamAssistantCatalogItem]] = None,
) -> List[TeamAssistant]:
    """Catalog lookups in the order given; unknown ids are dropped."""
    catalog: Dict[str, TeamAssistantCatalogItem] = {}
    for item in get_assistant_catalog(custom):
        catalog.setdefault(item.id, item)

    resolved = []
    for assistant_id in ids:
        item = catalog.get(assistant_id)
        if item is None:
            continue
        resolved.append(TeamAssistant(
            id=item.id,
            name=item.name,
            model=item.model,
            provider=item.provider,
            type=item.type,
            role=item.role,
            summary=item.summary,
            icon_text=item.icon_text,
            accent=item.accent,
            status="idle",
        ))
    return resolved


def create_team_from_draft(
    draft: TeamDraft,
    owner_name: Optional[str] = None,
    custom: Optional[List[TeamAssistantCatalogItem]] = None,
) -> Team:
    assistants = resolve_assistants(draft.assistant_ids, custom)
    leader_id = assistants[0].id if assistants else None
    now = now_iso()
    owner = owner_name or "Owner"

    return Team(
        id=create_id("team"),
        name=draft.name.strip(),
        description=draft.description.strip(),
        tags=list(draft.tags),
        created_at=now,
        updated_at=now,
        members=[
            TeamMember(
                id=create_id("member"),
                name=owner,
                role="owner",
                avatar=initials_from_name(owner),
                color=pick_color(0),
                online=True,
            )
        ],
        assistants=assistants,
        leader_id=leader_id,
        goal=(draft.goal or "").strip() or draft.description.strip(),
        alerts=0,
        status="active",
        canvas=build_team_canvas(
            assistants,
            leader_id,
            progress=Progress(done=0, total=2),
            status="idle",
        ),
    )


def seed_teams(owner_name: Optional[str] = None) -> List[Team]:
    """The demo team shown when storage holds nothing usable."""
    assistants = resolve_assistants([
        "gpt-5.1",
        "grok-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gemini-3-pro",
    ])
    for assistant in assistants:
        assistant.status = "done"
    leader_id = assistants[0].id if assistants else None

    owner = owner_name or "JUNJIE DUAN"
    members = [
        TeamMember(
            id=create_id("member"),
            name=owner,
            role="owner",
            avatar=initials_from_name(owner),
            color=pick_color(0),
            online=True,
        ),
        TeamMember(
            id=create_id("member"),
            name="Jiang Yi",
            role="member",
            avatar=initials_from_name("Jiang Yi"),
            color=pick_color(1),
            online=False,
        ),
    ]

    return [
        Team(
            id="team-computing-industry",
            name="计算产业分析",
            description="分析 2026 年 AI 行业发展趋势、技术突破、市场规模与投资热点。",
            tags=["行业分析", "AI", "投资趋势"],
            created_at=SEED_DATE,
            updated_at=SEED_DATE,
            members=members,
            assistants=assistants,
            leader_id=leader_id,
            goal="分析 2026 年 AI 行业发展趋势，覆盖技术突破、市场规模与投资热点。",
            alerts=99,
            status="active",
            canvas=build_team_canvas(assistants, leader_id),
        )
    ]
