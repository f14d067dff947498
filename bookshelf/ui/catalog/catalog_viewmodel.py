"""
CatalogViewModel - MVVM ViewModel for the catalog view.

Composes the filter, geometry, scroll and sticky controllers and publishes
their combined output as bindable properties.
"""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal
from loguru import logger

from bookshelf.core.catalog.models import CatalogEntry, CatalogIndex
from bookshelf.core.config import AppConfig
from bookshelf.ui.mvvm import BaseViewModel, BindableProperty
from bookshelf.ui.catalog.controllers.filter_controller import (
    ALL_TOPICS,
    FilterController,
    available_topics,
)
from bookshelf.ui.catalog.controllers.geometry_controller import (
    ViewportGeometry,
    ViewportGeometryEstimator,
)
from bookshelf.ui.catalog.controllers.scroll_controller import (
    ScrollDirection,
    ScrollDirectionTracker,
)
from bookshelf.ui.catalog.controllers.sticky_controller import (
    StickyHeaderController,
    StickyInputs,
    StickyState,
)
from bookshelf.ui.catalog.signal_sources import (
    ScrollSignalSource,
    Subscription,
    ViewportGeometryProvider,
)

NO_RESULTS_SUGGESTIONS: Tuple[str, ...] = (
    "Check the spelling",
    "Use more general terms",
    "Select different categories",
    "Clear all filters",
)


@dataclass(frozen=True, slots=True)
class NoResultsHint:
    """What to show when the filters leave nothing to display."""

    message: str
    suggestions: Tuple[str, ...] = NO_RESULTS_SUGGESTIONS
    can_clear: bool = False

    @classmethod
    def for_filters(cls, search_active: bool, selection_restricted: bool) -> "NoResultsHint":
        if search_active:
            message = "No books match your search"
        else:
            message = "No books are available for the selected filters"
        return cls(message=message, can_clear=selection_restricted)


class CatalogViewModel(BaseViewModel):
    """
    ViewModel for CatalogView.

    Properties (Bindable):
        filtered_items: Entries left after category and search filters
        selected_topics: Active category filters ("All" when unrestricted)
        search_text: Current search text
        min_results: Results needed before the header may pin
        scroll_direction: Last classified scroll direction
        sticky_state: Pinned/hidden state of the header
        no_results: Hint to show when filtered_items is empty, else None

    Example:
        vm = CatalogViewModel(load_catalog("books.json"))
        with vm.attached(viewport_provider, scroll_source):
            vm.toggle_topic("React")
            vm.set_search_text("hooks")
    """

    # Signals
    filteredItemsChanged = Signal(list)
    selectedTopicsChanged = Signal(list)
    searchTextChanged = Signal(str)
    minResultsChanged = Signal(int)
    scrollDirectionChanged = Signal(object)
    stickyStateChanged = Signal(object)
    noResultsChanged = Signal(object)
    availableTopicsChanged = Signal(list)

    # Bindable properties
    filtered_items = BindableProperty(default=[], signal_name="filteredItemsChanged")
    selected_topics = BindableProperty(default=[ALL_TOPICS], signal_name="selectedTopicsChanged")
    search_text = BindableProperty(default="", signal_name="searchTextChanged")
    min_results = BindableProperty(default=3, signal_name="minResultsChanged")
    scroll_direction = BindableProperty(default=ScrollDirection.UP, signal_name="scrollDirectionChanged")
    sticky_state = BindableProperty(default=StickyState(), signal_name="stickyStateChanged")
    no_results = BindableProperty(default=None, signal_name="noResultsChanged")
    available_topics = BindableProperty(default=[ALL_TOPICS], signal_name="availableTopicsChanged")

    def __init__(
        self,
        index: Optional[CatalogIndex] = None,
        config: Optional[AppConfig] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        config = config or AppConfig()

        # Controllers
        self.filter_controller = FilterController()
        self.geometry_estimator = ViewportGeometryEstimator(config.layout)
        self.scroll_tracker = ScrollDirectionTracker(dead_zone=config.scroll.dead_zone)
        self.sticky_controller = StickyHeaderController(pin_offset=config.scroll.pin_offset)

        self._index = index if index is not None else CatalogIndex()
        self._scroll_offset = 0
        self._geometry: Optional[ViewportGeometry] = None
        self._subscriptions: List[Subscription] = []
        self.min_results = config.layout.min_results_floor

        self.available_topics = available_topics(self._index)
        self._apply_transformations()

    # --- Data Loading ---

    @property
    def index(self) -> CatalogIndex:
        return self._index

    def load_catalog(self, index: CatalogIndex):
        """
        Replace the catalog. Filters are kept.

        Args:
            index: Catalog to display
        """
        self._index = index
        self.available_topics = available_topics(index)
        self._apply_transformations()
        logger.debug(f"Catalog loaded: {len(index)} categories, {index.total_items} items")

    # --- Filters ---

    def toggle_topic(self, topic: str):
        """
        Toggle a category filter.

        Names absent from the catalog are accepted; they match nothing.
        """
        if topic != ALL_TOPICS and not self._index.has_topic(topic):
            logger.warning(f"Filter '{topic}' is not a catalog category and will match nothing")
        self.filter_controller.toggle_topic(topic)
        self._apply_transformations()

    def is_topic_selected(self, topic: str) -> bool:
        return topic in self.filter_controller.selection

    def set_search_text(self, text: str):
        self.filter_controller.set_text_filter(text)
        self._apply_transformations()

    def clear_filters(self):
        """Reset category filters to "All" and clear the search text."""
        self.filter_controller.clear()
        self._apply_transformations()

    # --- Viewport / Scroll ---

    def on_viewport_resized(self, geometry: ViewportGeometry):
        self._geometry = geometry
        self.min_results = self.geometry_estimator.min_results(geometry)
        self._refresh_sticky()

    def on_scroll(self, offset: int):
        self._scroll_offset = offset
        scrolled = self.scroll_tracker.accepts(offset)
        self.scroll_direction = self.scroll_tracker.update(offset)
        self._refresh_sticky(scrolled=scrolled)

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def has_enough_content(self) -> bool:
        return len(self.filtered_items) >= self.min_results

    def apply_settings(self, config: AppConfig):
        """
        Adopt new layout and scroll settings.

        The last viewport size is re-estimated so the threshold follows the
        new breakpoints without waiting for a resize.
        """
        self.geometry_estimator = ViewportGeometryEstimator(config.layout)
        self.scroll_tracker.dead_zone = config.scroll.dead_zone
        self.sticky_controller.pin_offset = config.scroll.pin_offset
        if self._geometry is not None:
            self.min_results = self.geometry_estimator.min_results(self._geometry)
        else:
            self.min_results = config.layout.min_results_floor
        self._refresh_sticky()
        logger.debug("CatalogViewModel settings applied")

    # --- Activation ---

    @property
    def is_active(self) -> bool:
        return bool(self._subscriptions)

    def activate(
        self,
        geometry_provider: ViewportGeometryProvider,
        scroll_source: ScrollSignalSource,
    ):
        """
        Start following viewport size and scroll position.

        Samples both sources once so state is correct before the first event.
        """
        self.deactivate()
        self._subscriptions = [
            geometry_provider.subscribe(self.on_viewport_resized),
            scroll_source.subscribe(self.on_scroll),
        ]
        self.on_viewport_resized(geometry_provider.current())
        self.on_scroll(scroll_source.current_offset())
        logger.debug("CatalogViewModel activated")

    def deactivate(self):
        """Release all listeners. Safe to call repeatedly."""
        if not self._subscriptions:
            return
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.close()
        self.scroll_tracker.reset()
        logger.debug("CatalogViewModel deactivated")

    @contextmanager
    def attached(
        self,
        geometry_provider: ViewportGeometryProvider,
        scroll_source: ScrollSignalSource,
    ) -> Iterator["CatalogViewModel"]:
        """Activate for the duration of a with-block; always deactivates."""
        self.activate(geometry_provider, scroll_source)
        try:
            yield self
        finally:
            self.deactivate()

    # --- Transformations ---

    def _apply_transformations(self):
        """Apply category -> search pipeline and refresh derived state."""
        controller = self.filter_controller
        result: List[CatalogEntry] = controller.apply(self._index)

        self.selected_topics = list(controller.selection.topics)
        self.search_text = controller.text_filter
        self.filtered_items = result

        if result:
            self.no_results = None
        else:
            self.no_results = NoResultsHint.for_filters(
                search_active=controller.query.is_active,
                selection_restricted=not controller.selection.is_unrestricted,
            )

        self._refresh_sticky()
        logger.debug(
            f"Filters applied: {self._index.total_items} -> {len(result)} items"
        )

    def _refresh_sticky(self, scrolled: bool = False):
        self.sticky_state = self.sticky_controller.update(
            StickyInputs(
                scroll_offset=self._scroll_offset,
                filtered_count=len(self.filtered_items),
                min_results=self.min_results,
                direction=self.scroll_tracker.direction,
                scrolled=scrolled,
            )
        )
