"""Scroll direction classification with a dead-zone."""

from enum import Enum

from loguru import logger


class ScrollDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class ScrollDirectionTracker:
    """
    Classifies a stream of scroll offsets as moving up or down.

    A sample only counts when it is more than `dead_zone` pixels away from
    the last counted sample; smaller moves leave both the direction and the
    stored offset untouched.
    """

    def __init__(self, dead_zone: int = 10):
        self.dead_zone = dead_zone
        self._previous = 0
        self._direction = ScrollDirection.UP

    @property
    def direction(self) -> ScrollDirection:
        return self._direction

    @property
    def previous_offset(self) -> int:
        return self._previous

    def accepts(self, offset: int) -> bool:
        """True when `offset` is far enough from the last counted sample to count."""
        return abs(offset - self._previous) > self.dead_zone

    def update(self, offset: int) -> ScrollDirection:
        """Feed a scroll sample and return the current direction."""
        if self.accepts(offset):
            direction = ScrollDirection.UP if self._previous - offset > 0 else ScrollDirection.DOWN
            if direction is not self._direction:
                logger.debug(f"Scroll direction: {self._direction.value} -> {direction.value}")
            self._direction = direction
            self._previous = offset
        return self._direction

    def reset(self):
        self._previous = 0
        self._direction = ScrollDirection.UP
