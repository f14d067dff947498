"""
FilterController - Category selection and text search for the catalog.

Two-stage pipeline: category filter first, then title/author search.
"""
from typing import Iterable, List, Optional
from loguru import logger

from bookshelf.core.catalog.models import CatalogEntry, CatalogIndex

ALL_TOPICS = "All"


class FilterSelection:
    """
    Set of active category filters with multi-select toggle semantics.

    Either exactly {"All"} or a non-empty set of concrete category names.
    Insertion order is kept so the active filters display in click order.

    Example:
        selection = FilterSelection()
        selection.toggle("React")     # {"React"}
        selection.toggle("CSS")       # {"React", "CSS"}
        selection.toggle("React")     # {"CSS"}
        selection.toggle("CSS")       # {"All"}
    """

    def __init__(self, topics: Optional[Iterable[str]] = None):
        self._topics: List[str] = []
        for topic in topics or ():
            if topic not in self._topics:
                self._topics.append(topic)
        if not self._topics or ALL_TOPICS in self._topics:
            self._topics = [ALL_TOPICS]

    @property
    def topics(self) -> tuple[str, ...]:
        return tuple(self._topics)

    @property
    def is_unrestricted(self) -> bool:
        return self._topics == [ALL_TOPICS]

    def toggle(self, topic: str):
        """
        Toggle a topic in the selection.

        Args:
            topic: Category name or "All"
        """
        if topic == ALL_TOPICS:
            self._topics = [ALL_TOPICS]
        else:
            topics = [t for t in self._topics if t != ALL_TOPICS]
            if topic in topics:
                topics.remove(topic)
            else:
                topics.append(topic)
            self._topics = topics or [ALL_TOPICS]
        logger.debug(f"Filter selection: {self._topics}")

    def reset(self):
        self._topics = [ALL_TOPICS]

    def includes_category(self, name: str) -> bool:
        """Whether a category is in scope for this selection."""
        return self.is_unrestricted or name in self._topics

    def copy(self) -> "FilterSelection":
        return FilterSelection(self._topics)

    def __contains__(self, topic: object) -> bool:
        return topic in self._topics

    def __len__(self) -> int:
        return len(self._topics)

    def __iter__(self):
        return iter(self._topics)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterSelection):
            return set(self._topics) == set(other._topics)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FilterSelection({self._topics!r})"


class SearchQuery:
    """Raw search text, matched case-insensitively against title and author."""

    def __init__(self, text: str = ""):
        self.text = text or ""

    @property
    def is_active(self) -> bool:
        return self.text.strip() != ""

    def matches(self, entry: CatalogEntry) -> bool:
        return entry.matches_text(self.text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchQuery):
            return self.text == other.text
        return NotImplemented

    def __repr__(self) -> str:
        return f"SearchQuery({self.text!r})"


def filter_catalog(
    index: CatalogIndex,
    selection: FilterSelection,
    query: SearchQuery,
) -> List[CatalogEntry]:
    """
    Apply category and search filters to a catalog.

    Args:
        index: Source catalog (not modified)
        selection: Active category filters
        query: Search text

    Returns:
        Entries in catalog order, each stamped with its category as topic
    """
    in_scope = [c for c in index.categories if selection.includes_category(c.name)]
    entries = [
        CatalogEntry.from_item(item, category.name)
        for category in in_scope
        for item in category.items
    ]
    return [entry for entry in entries if query.matches(entry)]


def available_topics(index: CatalogIndex) -> List[str]:
    """Filter button labels: "All" followed by category names."""
    return [ALL_TOPICS, *index.topic_names]


class FilterController:
    """
    Owns the session's FilterSelection and SearchQuery.

    Example:
        controller = FilterController()
        controller.toggle_topic("React")
        controller.set_text_filter("hooks")
        entries = controller.apply(index)
    """

    def __init__(self):
        self.selection = FilterSelection()
        self.query = SearchQuery()

    # --- Category Filter ---

    def toggle_topic(self, topic: str):
        self.selection.toggle(topic)

    # --- Text Filter ---

    def set_text_filter(self, text: str):
        """
        Set search text.

        Args:
            text: Search text (case-insensitive, matched as typed)
        """
        self.query = SearchQuery(text)
        logger.debug(f"Text filter set: '{self.query.text}'")

    @property
    def text_filter(self) -> str:
        return self.query.text

    # --- State ---

    @property
    def is_active(self) -> bool:
        """Check if any filter is active."""
        return self.query.is_active or not self.selection.is_unrestricted

    def clear(self):
        """Reset selection to "All" and clear search text."""
        self.selection.reset()
        self.query = SearchQuery()

    # --- Apply ---

    def apply(self, index: CatalogIndex) -> List[CatalogEntry]:
        return filter_catalog(index, self.selection, self.query)
