import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional


logger = logging.getLogger(__name__)

Listener = Callable[[str, Optional[str]], None]


class ChangeBus:
    """
    Publish/subscribe scoped per resource key.

    Listeners receive ``(key, new_value)``; ``new_value`` is None after a
    delete. A failing listener is logged and does not block the others.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        self._listeners[key].append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def publish(self, key: str, value: Optional[str]) -> None:
        for listener in list(self._listeners.get(key, [])):
            try:
                listener(key, value)
            except Exception:
                logger.exception("[BUS] listener for '%s' failed", key)

    def listener_count(self, key: str) -> int:
        return len(self._listeners.get(key, []))
