"""
StickyController - Pinned/hidden state of the catalog header.

States:
    NORMAL          header scrolls with the content
    PINNED_VISIBLE  header fixed to the top of the viewport
    PINNED_HIDDEN   header fixed but slid out of view while scrolling down

Not enough content forces NORMAL regardless of scroll position. Only a
scroll sample past the dead zone moves between the two pinned states.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from loguru import logger

from bookshelf.ui.catalog.controllers.scroll_controller import ScrollDirection


class StickyMode(str, Enum):
    NORMAL = "normal"
    PINNED_VISIBLE = "pinned-visible"
    PINNED_HIDDEN = "pinned-hidden"


@dataclass(frozen=True, slots=True)
class StickyState:
    """Render state of the header. `is_hidden` only applies while pinned."""

    is_pinned: bool = False
    is_hidden: bool = False

    @classmethod
    def from_mode(cls, mode: StickyMode) -> "StickyState":
        return cls(
            is_pinned=mode is not StickyMode.NORMAL,
            is_hidden=mode is StickyMode.PINNED_HIDDEN,
        )

    @property
    def mode(self) -> StickyMode:
        if not self.is_pinned:
            return StickyMode.NORMAL
        return StickyMode.PINNED_HIDDEN if self.is_hidden else StickyMode.PINNED_VISIBLE

    @property
    def needs_placeholder(self) -> bool:
        """Reserve the header's height in the flow while it is pinned."""
        return self.is_pinned

    def css_classes(self) -> Tuple[str, ...]:
        classes = []
        if self.is_pinned:
            classes.append("sticky")
            if self.is_hidden:
                classes.append("hidden")
        return tuple(classes)


@dataclass(frozen=True, slots=True)
class StickyInputs:
    """
    Values sampled for one scroll, resize or filter event.

    `scrolled` is True only for a scroll sample that moved past the dead
    zone; other events never change which pinned state is shown.
    """

    scroll_offset: int
    filtered_count: int
    min_results: int
    direction: ScrollDirection
    scrolled: bool = False

    @property
    def has_enough_content(self) -> bool:
        return self.filtered_count >= self.min_results


def resolve_sticky_state(previous: StickyState, inputs: StickyInputs, pin_offset: int = 100) -> StickyState:
    """
    Header state for the current inputs.

    Args:
        previous: State shown before this event
        inputs: Values sampled for this event
        pin_offset: Scroll offset above which the header may pin

    Returns:
        State to show after this event
    """
    if not inputs.has_enough_content or inputs.scroll_offset <= pin_offset:
        return StickyState()
    if not previous.is_pinned:
        return StickyState.from_mode(StickyMode.PINNED_VISIBLE)
    if not inputs.scrolled:
        return previous
    return StickyState(is_pinned=True, is_hidden=inputs.direction is ScrollDirection.DOWN)


class StickyHeaderController:
    """
    Keeps the last resolved header state and logs transitions.

    Example:
        controller = StickyHeaderController(pin_offset=100)
        state = controller.update(StickyInputs(150, 20, 12, ScrollDirection.DOWN, scrolled=True))
        state.is_pinned  # True
    """

    def __init__(self, pin_offset: int = 100):
        self.pin_offset = pin_offset
        self._state = StickyState()

    @property
    def mode(self) -> StickyMode:
        return self._state.mode

    @property
    def state(self) -> StickyState:
        return self._state

    def update(self, inputs: StickyInputs) -> StickyState:
        state = resolve_sticky_state(self._state, inputs, self.pin_offset)
        if state != self._state:
            logger.debug(
                f"Sticky header: {self._state.mode.value} -> {state.mode.value} "
                f"(offset={inputs.scroll_offset}, results={inputs.filtered_count}/{inputs.min_results})"
            )
            self._state = state
        return self._state

    def reset(self):
        self._state = StickyState()
