"""
Catalog Module - Filterable book grid with an adaptive sticky header.

- Pure controllers (filter, geometry, scroll, sticky) hold the logic
- CatalogViewModel composes them and exposes bindable properties
- CatalogView renders cards, filters and the sticky header

Usage:
    from bookshelf.ui.catalog import CatalogView, CatalogViewModel

    vm = CatalogViewModel(index, config)
    view = CatalogView()
    view.set_data_context(vm)
"""
from bookshelf.ui.catalog.catalog_viewmodel import CatalogViewModel, NoResultsHint
from bookshelf.ui.catalog.category_style import CategoryStyle, css_slug
from bookshelf.ui.catalog.signal_sources import (
    ScrollBarSignalSource,
    ScrollSignalSource,
    SignalScrollSource,
    SignalViewportProvider,
    Subscription,
    ViewportGeometryProvider,
    WidgetViewportProvider,
)
from bookshelf.ui.catalog.flow_layout import FlowLayout
from bookshelf.ui.catalog.book_card_widget import BookCardWidget
from bookshelf.ui.catalog.catalog_view import CatalogView

__all__ = [
    # Main widget
    "CatalogView",
    "BookCardWidget",
    # ViewModel
    "CatalogViewModel",
    "NoResultsHint",
    # Styles
    "CategoryStyle",
    "css_slug",
    # Signal sources
    "Subscription",
    "ViewportGeometryProvider",
    "ScrollSignalSource",
    "SignalViewportProvider",
    "SignalScrollSource",
    "WidgetViewportProvider",
    "ScrollBarSignalSource",
    # Layout
    "FlowLayout",
]
