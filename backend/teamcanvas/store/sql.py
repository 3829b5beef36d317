import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from teamcanvas.db.models import Base, StoreEntry
from teamcanvas.db.session import make_engine, make_session_factory
from teamcanvas.store.base import StoreError, StorePort
from teamcanvas.store.events import ChangeBus


logger = logging.getLogger(__name__)


class SqlStore(StorePort):
    """StorePort backed by the ``store_entries`` table."""

    def __init__(self, engine: Optional[Engine] = None, bus: Optional[ChangeBus] = None):
        super().__init__(bus)
        self.engine = engine or make_engine()
        self._session_factory = make_session_factory(self.engine)
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not initialise store tables: {e}") from e

    def get(self, key: str) -> Optional[str]:
        try:
            with self._session_factory() as session:
                entry = session.execute(
                    select(StoreEntry).where(StoreEntry.key == key)
                ).scalar_one_or_none()
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to read '{key}': {e}") from e

    def _write(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as session, session.begin():
                entry = session.execute(
                    select(StoreEntry).where(StoreEntry.key == key)
                ).scalar_one_or_none()
                if entry is None:
                    session.add(StoreEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to write '{key}': {e}") from e
        logger.debug("[STORE] wrote %s (%d chars)", key, len(value))

    def _remove(self, key: str) -> None:
        try:
            with self._session_factory() as session, session.begin():
                entry = session.execute(
                    select(StoreEntry).where(StoreEntry.key == key)
                ).scalar_one_or_none()
                if entry is not None:
                    session.delete(entry)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete '{key}': {e}") from e
