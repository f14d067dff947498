"""
Catalog Controllers Package.
"""
from bookshelf.ui.catalog.controllers.filter_controller import (
    ALL_TOPICS,
    FilterController,
    FilterSelection,
    SearchQuery,
    available_topics,
    filter_catalog,
)
from bookshelf.ui.catalog.controllers.geometry_controller import (
    GeometryEstimate,
    ViewportGeometry,
    ViewportGeometryEstimator,
)
from bookshelf.ui.catalog.controllers.scroll_controller import ScrollDirection, ScrollDirectionTracker
from bookshelf.ui.catalog.controllers.sticky_controller import (
    StickyHeaderController,
    StickyInputs,
    StickyMode,
    StickyState,
    resolve_sticky_state,
)

__all__ = [
    "ALL_TOPICS",
    "FilterController",
    "FilterSelection",
    "SearchQuery",
    "available_topics",
    "filter_catalog",
    "GeometryEstimate",
    "ViewportGeometry",
    "ViewportGeometryEstimator",
    "ScrollDirection",
    "ScrollDirectionTracker",
    "StickyHeaderController",
    "StickyInputs",
    "StickyMode",
    "StickyState",
    "resolve_sticky_state",
]
