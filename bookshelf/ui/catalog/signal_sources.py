"""
Viewport and scroll signal sources.

The catalog ViewModel never reads the window directly. It receives a
ViewportGeometryProvider and a ScrollSignalSource, subscribes while it is
active and releases the subscriptions when it is deactivated.

Two families of implementations:
- SignalViewportProvider / SignalScrollSource: driven programmatically
  (tests, headless use)
- WidgetViewportProvider / ScrollBarSignalSource: follow a live Qt widget
"""
from typing import Callable, Optional, Protocol

from loguru import logger
from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QScrollBar, QWidget

from bookshelf.core.events import Signal
from bookshelf.ui.catalog.controllers.geometry_controller import ViewportGeometry

GeometryCallback = Callable[[ViewportGeometry], None]
ScrollCallback = Callable[[int], None]


class Subscription:
    """
    Handle for a connected listener. `close()` releases it exactly once.

    Usable as a context manager:
        with source.subscribe(on_scroll):
            ...
    """

    def __init__(self, release: Callable[[], None]):
        self._release: Optional[Callable[[], None]] = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def close(self):
        release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ViewportGeometryProvider(Protocol):
    def current(self) -> ViewportGeometry: ...

    def subscribe(self, callback: GeometryCallback) -> Subscription: ...


class ScrollSignalSource(Protocol):
    def current_offset(self) -> int: ...

    def subscribe(self, callback: ScrollCallback) -> Subscription: ...


# --- Programmatic sources ---

class SignalViewportProvider:
    """Viewport whose size is set by calling `resize()`."""

    def __init__(self, width: int = 0, height: int = 0):
        self._geometry = ViewportGeometry(width, height)
        self.resized = Signal("ViewportResized")

    def current(self) -> ViewportGeometry:
        return self._geometry

    def resize(self, width: int, height: int):
        self._geometry = ViewportGeometry(width, height)
        self.resized.emit(self._geometry)

    def subscribe(self, callback: GeometryCallback) -> Subscription:
        self.resized.connect(callback)
        return Subscription(lambda: self.resized.disconnect(callback))


class SignalScrollSource:
    """Scroll position moved by calling `scroll_to()`."""

    def __init__(self, offset: int = 0):
        self._offset = offset
        self.scrolled = Signal("Scrolled")

    def current_offset(self) -> int:
        return self._offset

    def scroll_to(self, offset: int):
        self._offset = offset
        self.scrolled.emit(offset)

    def subscribe(self, callback: ScrollCallback) -> Subscription:
        self.scrolled.connect(callback)
        return Subscription(lambda: self.scrolled.disconnect(callback))


# --- Qt sources ---

def _disconnect_qt(signal, callback):
    try:
        signal.disconnect(callback)
    except (RuntimeError, TypeError) as e:
        # Sender already destroyed or never connected
        logger.debug(f"Qt disconnect skipped: {e}")


class WidgetViewportProvider(QObject):
    """
    Reports the size of a widget (usually a scroll area viewport).

    Observes Resize events through an event filter that never consumes them.
    """

    def __init__(self, widget: QWidget):
        super().__init__(widget)
        self._widget = widget
        self.resized = Signal("ViewportResized")
        widget.installEventFilter(self)

    def current(self) -> ViewportGeometry:
        return ViewportGeometry(self._widget.width(), self._widget.height())

    def subscribe(self, callback: GeometryCallback) -> Subscription:
        self.resized.connect(callback)
        return Subscription(lambda: self.resized.disconnect(callback))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self._widget and event.type() == QEvent.Type.Resize:
            self.resized.emit(self.current())
        return False


class ScrollBarSignalSource:
    """Follows the value of a vertical scroll bar."""

    def __init__(self, scroll_bar: QScrollBar):
        self._scroll_bar = scroll_bar

    def current_offset(self) -> int:
        return self._scroll_bar.value()

    def subscribe(self, callback: ScrollCallback) -> Subscription:
        signal = self._scroll_bar.valueChanged
        signal.connect(callback)
        return Subscription(lambda: _disconnect_qt(signal, callback))
