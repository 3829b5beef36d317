"""
Team Repository - teams and custom assistants persisted through a StorePort.

Teams are stored as one JSON list under a single key. Bad JSON, a
non-list value, no usable team, or mojibake left behind by a broken
encoding is replaced with the seed teams. Single entries that fail schema
validation are skipped; the rest of the list is kept.
"""

import copy
import json
import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from teamcanvas.canvas.catalog import (
    TeamAssistantCatalogItem,
    TeamDraft,
    build_custom_assistant,
    create_team_from_draft,
    now_iso,
    seed_teams,
)
from teamcanvas.canvas.schema import Team, TeamCanvas
from teamcanvas.config import (
    CUSTOM_ASSISTANTS_STORAGE_KEY,
    OWNER_NAME,
    TEAMS_STORAGE_KEY,
)
from teamcanvas.store.base import StorePort
from teamcanvas.store.serializers import (
    parse_custom_assistant,
    parse_team,
    serialize,
    serialize_custom_assistant,
)
from teamcanvas.validation import validate_and_fix_canvas


logger = logging.getLogger(__name__)


def looks_corrupted(text: Optional[str]) -> bool:
    if not text:
        return False
    if "???" in text or "�" in text:
        return True
    q_count = text.count("?")
    return q_count >= 3 and q_count >= int(len(text) * 0.25)


def team_looks_corrupted(team: Team) -> bool:
    if looks_corrupted(team.name) or looks_corrupted(team.description) or looks_corrupted(team.goal):
        return True
    if any(looks_corrupted(tag) for tag in team.tags):
        return True
    return any(
        looks_corrupted(a.role) or looks_corrupted(a.summary)
        for a in team.assistants
    )


class TeamRepository:

    def __init__(
        self,
        store: StorePort,
        owner_name: Optional[str] = None,
        key: str = TEAMS_STORAGE_KEY,
        custom_key: str = CUSTOM_ASSISTANTS_STORAGE_KEY,
    ):
        self.store = store
        self.owner_name = owner_name or OWNER_NAME or None
        self.key = key
        self.custom_key = custom_key

    # -------------------------
    # Teams
    # -------------------------

    def load_teams(self) -> List[Team]:
        cached = self._read_teams()
        if cached and not any(team_looks_corrupted(team) for team in cached):
            return cached

        if cached:
            logger.warning("[STORE] stored teams look corrupted, reseeding")
        seeded = seed_teams(self.owner_name)
        self.save_teams(seeded)
        return seeded

    def save_teams(self, teams: List[Team]) -> None:
        self.store.set(self.key, json.dumps(serialize(teams), ensure_ascii=False))

    def find_team(self, team_id: str) -> Optional[Team]:
        return next((team for team in self.load_teams() if team.id == team_id), None)

    def create_team(self, draft: TeamDraft) -> Team:
        team = create_team_from_draft(draft, self.owner_name, self.load_custom_assistants())
        self.save_teams([team, *self.load_teams()])
        return team

    def update_canvas(self, team_id: str, canvas: TeamCanvas) -> Optional[Team]:
        teams = self.load_teams()
        team = next((t for t in teams if t.id == team_id), None)
        if team is None:
            logger.warning("[STORE] canvas update for unknown team '%s' dropped", team_id)
            return None

        team.canvas = copy.deepcopy(canvas)
        team.updated_at = now_iso()
        self.save_teams(teams)
        return team

    def canvas_committer(self, team_id: str) -> Callable[[TeamCanvas], None]:
        """Callback suitable for TeamCanvasWidget(on_update=...)."""
        def commit(canvas: TeamCanvas) -> None:
            self.update_canvas(team_id, canvas)
        return commit

    def subscribe(self, listener: Callable[[List[Team]], None]) -> Callable[[], None]:
        """Notify ``listener`` with the fresh team list whenever teams are written."""
        def on_change(_key: str, _value: Optional[str]) -> None:
            listener(self.load_teams())
        return self.store.subscribe(self.key, on_change)

    def _read_teams(self) -> Optional[List[Team]]:
        raw = self.store.get(self.key)
        if not raw:
            return None
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.warning("[STORE] '%s' is not valid JSON", self.key)
            return None
        if not isinstance(parsed, list):
            return None

        teams = []
        for index, item in enumerate(parsed):
            if not isinstance(item, dict):
                logger.warning("[STORE] skipping stored team #%d: not an object", index)
                continue
            try:
                team = parse_team(item)
            except ValidationError as e:
                logger.warning(
                    "[STORE] skipping stored team #%d (%s): %d validation errors",
                    index, item.get("id", "?"), e.error_count(),
                )
                continue
            if team.canvas is not None:
                team.canvas, _, result = validate_and_fix_canvas(team.canvas)
                if result.changes_made:
                    logger.info("[STORE] repaired canvas of team '%s'", team.id)
            teams.append(team)
        return teams

    # -------------------------
    # Custom assistants
    # -------------------------

    def load_custom_assistants(self) -> List[TeamAssistantCatalogItem]:
        raw = self.store.get(self.custom_key)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            return []
        if not isinstance(parsed, list):
            return []

        items = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            try:
                payload = parse_custom_assistant(entry)
            except ValidationError:
                continue
            item = build_custom_assistant(
                name=payload.name,
                model=payload.model,
                provider=payload.provider,
                type=payload.type,
                role=payload.role,
                summary=payload.summary,
                icon_text=payload.icon_text,
                accent=payload.accent,
                id=payload.id,
            )
            if item is not None:
                items.append(item)
        return items

    def add_custom_assistant(self, **fields) -> Optional[TeamAssistantCatalogItem]:
        item = build_custom_assistant(**fields)
        if item is None:
            return None
        self._save_custom([item, *self.load_custom_assistants()])
        return item

    def remove_custom_assistant(self, assistant_id: str) -> None:
        remaining = [a for a in self.load_custom_assistants() if a.id != assistant_id]
        self._save_custom(remaining)

    def _save_custom(self, items: List[TeamAssistantCatalogItem]) -> None:
        payload = [serialize_custom_assistant(item) for item in items]
        self.store.set(self.custom_key, json.dumps(payload, ensure_ascii=False))
