"""Shared test fixtures."""

from typing import List

import pytest

from teamcanvas.canvas.schema import TeamAssistant, Team
from teamcanvas.store.memory import MemoryStore


def make_assistant(id: str, name: str = "", role: str = "研究", accent: str = "from-sky-500 to-blue-600") -> TeamAssistant:
    return TeamAssistant(
        id=id,
        name=name or id.upper(),
        model=f"{id}-model",
        provider="OpenAI",
        type="chat",
        role=role,
        icon_text=id[:2].upper(),
        accent=accent,
    )


@pytest.fixture
def roster() -> List[TeamAssistant]:
    return [make_assistant(f"a{i}") for i in range(5)]


@pytest.fixture
def team(roster) -> Team:
    return Team(id="team-1", name="Research", assistants=roster, leader_id="a0")


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()
