from abc import ABC, abstractmethod
from typing import Callable, Optional

from teamcanvas.store.events import ChangeBus, Listener


class StoreError(Exception):
    """Raised when the backing store cannot be read or written."""


class StorePort(ABC):
    """
    Keyed string store with change notification.

    Writes publish on the store's ChangeBus, so anything sharing the bus
    (other widgets, other repositories) sees the new value.
    """

    def __init__(self, bus: Optional[ChangeBus] = None):
        self.bus = bus or ChangeBus()

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def _write(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def _remove(self, key: str) -> None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        self._write(key, value)
        self.bus.publish(key, value)

    def delete(self, key: str) -> None:
        self._remove(key)
        self.bus.publish(key, None)

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        return self.bus.subscribe(key, listener)
