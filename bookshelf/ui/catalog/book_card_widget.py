"""
BookCardWidget - Card displaying one catalog entry.
"""
from html import escape
from typing import Optional
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from bookshelf.core.catalog.models import CatalogEntry
from bookshelf.ui.catalog.category_style import CategoryStyle, css_slug


class BookCardWidget(QFrame):
    """
    Card with category badge, title, author, publication info, level,
    rationale and a link to the resource.
    """

    CARD_WIDTH = 270

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._data_context: Optional[CatalogEntry] = None
        self.setObjectName("bookCard")
        self.setFixedWidth(self.CARD_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Preferred)
        self._build_content()

    def _build_content(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        badge_row = QHBoxLayout()
        self._badge = QLabel()
        self._badge.setObjectName("categoryBadge")
        badge_row.addWidget(self._badge)
        badge_row.addStretch()
        layout.addLayout(badge_row)

        self._title_label = QLabel()
        self._title_label.setObjectName("bookTitle")
        self._title_label.setWordWrap(True)
        self._title_label.setTextFormat(Qt.TextFormat.PlainText)
        layout.addWidget(self._title_label)

        self._author_label = QLabel()
        self._publication_label = QLabel()
        self._publication_label.setObjectName("publicationInfo")
        self._level_label = QLabel()
        self._rationale_label = QLabel()
        self._rationale_label.setObjectName("description")
        for label in (self._author_label, self._publication_label, self._level_label, self._rationale_label):
            label.setWordWrap(True)
            label.setTextFormat(Qt.TextFormat.RichText)
            layout.addWidget(label)

        layout.addStretch()

        self._link_label = QLabel()
        self._link_label.setTextFormat(Qt.TextFormat.RichText)
        self._link_label.setOpenExternalLinks(True)
        layout.addWidget(self._link_label)

    # --- DataContext Pattern ---

    @property
    def data_context(self) -> Optional[CatalogEntry]:
        return self._data_context

    def bind_data(self, entry: CatalogEntry):
        self._data_context = entry
        self.update_display()

    def update_display(self):
        entry = self._data_context
        if entry is None:
            return

        style = CategoryStyle.resolve(entry.topic)
        self.setProperty("category", css_slug(entry.topic))
        self._badge.setText(f"{style.glyph}  {entry.topic}")
        self._badge.setStyleSheet(
            f"color: {style.color}; border: 1px solid {style.color}; border-radius: 8px; padding: 2px 8px;"
        )
        self._title_label.setText(entry.title)
        self._author_label.setText(f"<b>Author:</b> {escape(entry.author)}")
        self._publication_label.setText(
            f"<b>Publisher:</b> {escape(entry.publisher)} · <b>Edition:</b> {escape(entry.edition)}"
        )
        self._level_label.setText(f"<b>Level:</b> {escape(entry.level)}")
        self._rationale_label.setText(escape(entry.rationale))
        if entry.resource_link:
            self._link_label.setText(f'<a href="{escape(entry.resource_link)}">View resource</a>')
            self._link_label.show()
        else:
            self._link_label.hide()
