"""
CatalogView - Searchable, filterable grid of book cards.

The header (search box and category filters) scrolls with the content
until the ViewModel pins it. While pinned it floats over the top of the
scroll area and a placeholder keeps its height in the flow, so the cards
do not jump.
"""
from typing import Dict, List, Optional

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QHideEvent, QResizeEvent, QShowEvent
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from bookshelf.core.catalog.models import CatalogEntry
from bookshelf.ui.catalog.book_card_widget import BookCardWidget
from bookshelf.ui.catalog.catalog_viewmodel import CatalogViewModel, NoResultsHint
from bookshelf.ui.catalog.category_style import ALL_FILTER_GLYPH, CategoryStyle
from bookshelf.ui.catalog.controllers.filter_controller import ALL_TOPICS
from bookshelf.ui.catalog.controllers.sticky_controller import StickyState
from bookshelf.ui.catalog.flow_layout import FlowLayout
from bookshelf.ui.catalog.signal_sources import ScrollBarSignalSource, WidgetViewportProvider

CATALOG_STYLESHEET = """
#pageTitle { font-size: 22px; font-weight: bold; padding: 16px; }
#searchingMethods { padding: 12px 16px; }
#searchingMethods[sticky="true"] {
    background: palette(window);
    border-bottom: 1px solid palette(mid);
}
#searchingMethods[headerHidden="true"] { border-bottom: none; }
#bookCard { border: 1px solid palette(mid); border-radius: 10px; }
#bookTitle { font-size: 15px; font-weight: bold; }
#description { color: palette(dark); }
QPushButton[filterButton="true"] { border-radius: 12px; padding: 4px 12px; }
QPushButton[filterButton="true"]:checked { background: palette(highlight); color: palette(highlighted-text); }
#noResults { padding: 32px; }
"""


class CatalogView(QWidget):
    """
    Catalog page bound to a CatalogViewModel.

    Activates the ViewModel while shown and deactivates it when hidden,
    so scroll and resize listeners never outlive the visible page.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._viewmodel: Optional[CatalogViewModel] = None
        self._topic_buttons: Dict[str, QPushButton] = {}
        self._header_floating = False
        self._setup_ui()

        self._viewport_provider = WidgetViewportProvider(self)
        self._scroll_source = ScrollBarSignalSource(self.scroll_area.verticalScrollBar())

    def _setup_ui(self):
        self.setStyleSheet(CATALOG_STYLESHEET)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)

        self.content = QWidget()
        self._content_layout = QVBoxLayout(self.content)
        self._content_layout.setContentsMargins(0, 0, 0, 0)
        self._content_layout.setSpacing(0)

        self.title_label = QLabel("Interactive Library")
        self.title_label.setObjectName("pageTitle")
        self._content_layout.addWidget(self.title_label)

        self.header_placeholder = QWidget()
        self.header_placeholder.hide()
        self._content_layout.addWidget(self.header_placeholder)

        self.header = self._build_header()
        self._content_layout.addWidget(self.header)

        self.cards_container = QWidget()
        self.flow_layout = FlowLayout(self.cards_container, margin=16, spacing=16)
        self._content_layout.addWidget(self.cards_container)

        self.no_results_panel = self._build_no_results_panel()
        self.no_results_panel.hide()
        self._content_layout.addWidget(self.no_results_panel)
        self._content_layout.addStretch()

        self.scroll_area.setWidget(self.content)
        layout.addWidget(self.scroll_area)

    def _build_header(self) -> QFrame:
        header = QFrame()
        header.setObjectName("searchingMethods")
        header_layout = QVBoxLayout(header)
        header_layout.setSpacing(8)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Title or author")
        self.search_input.setClearButtonEnabled(True)
        self.search_input.textChanged.connect(self._on_search_edited)
        header_layout.addWidget(self.search_input)

        header_layout.addWidget(QLabel("Filter by:"))

        self.filter_buttons = QWidget()
        self.filter_buttons_layout = FlowLayout(self.filter_buttons, spacing=8)
        header_layout.addWidget(self.filter_buttons)
        return header

    def _build_no_results_panel(self) -> QFrame:
        panel = QFrame()
        panel.setObjectName("noResults")
        panel_layout = QVBoxLayout(panel)
        panel_layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        icon = QLabel("📚")
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        panel_layout.addWidget(icon)

        heading = QLabel("No books found")
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        panel_layout.addWidget(heading)

        self.no_results_message = QLabel()
        self.no_results_message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        panel_layout.addWidget(self.no_results_message)

        self.no_results_suggestions = QLabel()
        self.no_results_suggestions.setTextFormat(Qt.TextFormat.RichText)
        panel_layout.addWidget(self.no_results_suggestions)

        self.clear_filters_button = QPushButton("Clear filters and search")
        self.clear_filters_button.clicked.connect(self._on_clear_clicked)
        panel_layout.addWidget(self.clear_filters_button)
        return panel

    # --- DataContext / ViewModel ---

    def set_data_context(self, viewmodel: CatalogViewModel):
        """Bind ViewModel and render its current state."""
        if self._viewmodel is not None:
            self._viewmodel.deactivate()
            for signal, slot in self._bindings(self._viewmodel):
                signal.disconnect(slot)
        self._viewmodel = viewmodel
        for signal, slot in self._bindings(viewmodel):
            signal.connect(slot)

        self._on_topics_changed(viewmodel.available_topics)
        self._on_search_text_changed(viewmodel.search_text)
        self._on_items_changed(viewmodel.filtered_items)
        self._on_no_results_changed(viewmodel.no_results)
        self._apply_sticky_state(viewmodel.sticky_state)

        if self.isVisible():
            self._activate()

    @property
    def data_context(self) -> Optional[CatalogViewModel]:
        return self._viewmodel

    def _bindings(self, viewmodel: CatalogViewModel):
        return (
            (viewmodel.availableTopicsChanged, self._on_topics_changed),
            (viewmodel.selectedTopicsChanged, self._on_selection_changed),
            (viewmodel.searchTextChanged, self._on_search_text_changed),
            (viewmodel.filteredItemsChanged, self._on_items_changed),
            (viewmodel.noResultsChanged, self._on_no_results_changed),
            (viewmodel.stickyStateChanged, self._apply_sticky_state),
        )

    # --- Activation ---

    def _activate(self):
        if self._viewmodel is not None:
            self._viewmodel.activate(self._viewport_provider, self._scroll_source)

    def _deactivate(self):
        if self._viewmodel is not None:
            self._viewmodel.deactivate()

    def showEvent(self, event: QShowEvent):
        super().showEvent(event)
        self._activate()

    def hideEvent(self, event: QHideEvent):
        self._deactivate()
        super().hideEvent(event)

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        if self._header_floating and self._viewmodel is not None:
            self._position_floating_header(self._viewmodel.sticky_state.is_hidden)

    # --- User Input ---

    def _on_search_edited(self, text: str):
        if self._viewmodel is not None:
            self._viewmodel.set_search_text(text)

    def _on_topic_clicked(self, topic: str):
        if self._viewmodel is None:
            return
        self._viewmodel.toggle_topic(topic)
        # Re-sync even when the selection did not change ("All" clicked twice)
        self._on_selection_changed(self._viewmodel.selected_topics)

    def _on_clear_clicked(self):
        if self._viewmodel is not None:
            self._viewmodel.clear_filters()

    # --- ViewModel Updates ---

    def _on_topics_changed(self, topics: List[str]):
        self.filter_buttons_layout.clear()
        self._topic_buttons.clear()
        for topic in topics:
            if topic == ALL_TOPICS:
                label = f"{ALL_FILTER_GLYPH}  {topic}"
            else:
                label = f"{CategoryStyle.resolve(topic).glyph}  {topic}"
            button = QPushButton(label, self.filter_buttons)
            button.setCheckable(True)
            button.setProperty("filterButton", True)
            button.clicked.connect(lambda _checked=False, t=topic: self._on_topic_clicked(t))
            self.filter_buttons_layout.addWidget(button)
            self._topic_buttons[topic] = button
        if self._viewmodel is not None:
            self._on_selection_changed(self._viewmodel.selected_topics)

    def _on_selection_changed(self, topics: List[str]):
        selected = set(topics)
        for topic, button in self._topic_buttons.items():
            button.setChecked(topic in selected)

    def _on_search_text_changed(self, text: str):
        if self.search_input.text() != text:
            self.search_input.setText(text)

    def _on_items_changed(self, items: List[CatalogEntry]):
        self.cards_container.setUpdatesEnabled(False)
        self.flow_layout.clear()
        for entry in items:
            card = BookCardWidget(self.cards_container)
            card.bind_data(entry)
            self.flow_layout.addWidget(card)
        self.cards_container.setVisible(bool(items))
        self.cards_container.setUpdatesEnabled(True)
        logger.debug(f"CatalogView rendered {len(items)} cards")

    def _on_no_results_changed(self, hint: Optional[NoResultsHint]):
        if hint is None:
            self.no_results_panel.hide()
            return
        self.no_results_message.setText(hint.message)
        items = "".join(f"<li>{suggestion}</li>" for suggestion in hint.suggestions)
        self.no_results_suggestions.setText(f"<p>Try:</p><ul>{items}</ul>")
        self.clear_filters_button.setVisible(hint.can_clear)
        self.no_results_panel.show()

    # --- Sticky Header ---

    @property
    def header_floating(self) -> bool:
        return self._header_floating

    def _apply_sticky_state(self, state: StickyState):
        # The header floats exactly while its height is reserved in the flow
        if state.needs_placeholder and not self._header_floating:
            self._float_header()
        elif not state.needs_placeholder and self._header_floating:
            self._dock_header()

        if self._header_floating:
            self._position_floating_header(state.is_hidden)

        classes = state.css_classes()
        self.header.setProperty("sticky", "sticky" in classes)
        self.header.setProperty("headerHidden", "hidden" in classes)
        self.header.style().unpolish(self.header)
        self.header.style().polish(self.header)

    def _header_height(self) -> int:
        return self.header.sizeHint().height()

    def _float_header(self):
        self.header_placeholder.setFixedHeight(self._header_height())
        self.header_placeholder.show()
        self._content_layout.removeWidget(self.header)
        self.header.setParent(self)
        self.header.show()
        self.header.raise_()
        self._header_floating = True

    def _dock_header(self):
        self.header.setParent(self.content)
        index = self._content_layout.indexOf(self.header_placeholder) + 1
        self._content_layout.insertWidget(index, self.header)
        self.header_placeholder.hide()
        self.header.show()
        self._header_floating = False

    def _position_floating_header(self, hidden: bool):
        viewport = self.scroll_area.viewport()
        top_left = viewport.mapTo(self, QPoint(0, 0))
        height = self._header_height()
        y = top_left.y() - height if hidden else top_left.y()
        self.header.setGeometry(top_left.x(), y, viewport.width(), height)
