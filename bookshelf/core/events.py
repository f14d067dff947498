from loguru import logger
from typing import Callable, List


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Used wherever a QObject is not available (config, fake signal sources).
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable):
        """Connect a callback function to this signal."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        # Copy: a subscriber may disconnect itself while being notified
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")
