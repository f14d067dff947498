"""
FlowLayout - Responsive grid for book cards.

Places items left to right and wraps to a new row when the available
width is used up, so the column count follows the window width.
"""
from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget


class FlowLayout(QLayout):
    """
    Wrapping layout for fixed-size cards.

    Example:
        layout = FlowLayout(container, margin=16, spacing=16)
        for card in cards:
            layout.addWidget(card)
    """

    def __init__(self, parent: QWidget | None = None, margin: int = 0, spacing: int = 16):
        super().__init__(parent)
        self._item_list: list[QLayoutItem] = []
        self._spacing = spacing
        self.setContentsMargins(margin, margin, margin, margin)

    def addItem(self, item: QLayoutItem):
        self._item_list.append(item)

    def count(self) -> int:
        return len(self._item_list)

    def itemAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._item_list):
            return self._item_list[index]
        return None

    def takeAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._item_list):
            return self._item_list.pop(index)
        return None

    def expandingDirections(self) -> Qt.Orientation:
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return self._do_layout(QRect(0, 0, width, 0), test_only=True)

    def setGeometry(self, rect: QRect):
        super().setGeometry(rect)
        self._do_layout(rect, test_only=False)

    def sizeHint(self) -> QSize:
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        size = QSize()
        for item in self._item_list:
            size = size.expandedTo(item.minimumSize())
        margins = self.contentsMargins()
        size += QSize(margins.left() + margins.right(), margins.top() + margins.bottom())
        return size

    def clear(self):
        """Remove and delete all widgets."""
        while self.count():
            item = self.takeAt(0)
            widget = item.widget() if item else None
            if widget:
                widget.setParent(None)
                widget.deleteLater()

    def _do_layout(self, rect: QRect, test_only: bool) -> int:
        """
        Position items row by row.

        Returns:
            Total height used
        """
        margins = self.contentsMargins()
        effective = rect.adjusted(margins.left(), margins.top(), -margins.right(), -margins.bottom())
        x = effective.x()
        y = effective.y()
        row_height = 0

        for item in self._item_list:
            widget = item.widget()
            if widget and widget.isHidden():
                continue

            size = item.sizeHint()
            if x + size.width() > effective.right() + 1 and row_height > 0:
                x = effective.x()
                y += row_height + self._spacing
                row_height = 0

            if not test_only:
                item.setGeometry(QRect(QPoint(x, y), size))

            x += size.width() + self._spacing
            row_height = max(row_height, size.height())

        return y + row_height - rect.y() + margins.bottom()
