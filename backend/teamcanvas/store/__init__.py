"""
Persistence port, change bus and the team repository built on them.
"""

from teamcanvas.store.base import StoreError, StorePort
from teamcanvas.store.events import ChangeBus
from teamcanvas.store.memory import MemoryStore
from teamcanvas.store.sql import SqlStore
from teamcanvas.store.teams import TeamRepository, looks_corrupted


__all__ = [
    "ChangeBus",
    "MemoryStore",
    "SqlStore",
    "StoreError",
    "StorePort",
    "TeamRepository",
    "looks_corrupted",
]
