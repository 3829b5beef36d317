from typing import Dict, Optional

from teamcanvas.store.base import StorePort
from teamcanvas.store.events import ChangeBus


class MemoryStore(StorePort):

    def __init__(self, bus: Optional[ChangeBus] = None, initial: Optional[Dict[str, str]] = None):
        super().__init__(bus)
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write(self, key: str, value: str) -> None:
        self._data[key] = value

    def _remove(self, key: str) -> None:
        self._data.pop(key, None)
