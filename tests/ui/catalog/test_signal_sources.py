"""
Tests for viewport/scroll signal sources and subscriptions.
"""
from unittest.mock import MagicMock

from PySide6.QtWidgets import QScrollBar, QWidget
from PySide6.QtCore import Qt

from bookshelf.ui.catalog.controllers.geometry_controller import ViewportGeometry
from bookshelf.ui.catalog.signal_sources import (
    ScrollBarSignalSource,
    SignalScrollSource,
    SignalViewportProvider,
    Subscription,
    WidgetViewportProvider,
)


class TestSubscription:
    def test_close_releases_once(self):
        release = MagicMock()
        subscription = Subscription(release)

        assert subscription.active
        subscription.close()
        subscription.close()

        release.assert_called_once_with()
        assert not subscription.active

    def test_context_manager_releases_on_error(self):
        release = MagicMock()

        try:
            with Subscription(release):
                raise ValueError("teardown")
        except ValueError:
            pass

        release.assert_called_once_with()


class TestProgrammaticSources:
    def test_viewport_provider(self):
        provider = SignalViewportProvider(1300, 900)
        callback = MagicMock()

        assert provider.current() == ViewportGeometry(1300, 900)

        subscription = provider.subscribe(callback)
        provider.resize(800, 600)
        callback.assert_called_once_with(ViewportGeometry(800, 600))

        subscription.close()
        provider.resize(400, 300)
        assert callback.call_count == 1
        assert provider.resized.subscriber_count == 0

    def test_scroll_source(self):
        source = SignalScrollSource()
        callback = MagicMock()

        with source.subscribe(callback):
            source.scroll_to(120)

        source.scroll_to(300)
        callback.assert_called_once_with(120)
        assert source.current_offset() == 300


class TestQtSources:
    def test_scroll_bar_source(self, qapp):
        scroll_bar = QScrollBar(Qt.Orientation.Vertical)
        scroll_bar.setRange(0, 1000)
        source = ScrollBarSignalSource(scroll_bar)
        received = []

        def on_scroll(value):
            received.append(value)

        subscription = source.subscribe(on_scroll)
        scroll_bar.setValue(250)
        assert received == [250]
        assert source.current_offset() == 250

        subscription.close()
        scroll_bar.setValue(500)
        assert received == [250]

    def test_widget_viewport_provider(self, qapp):
        widget = QWidget()
        widget.resize(400, 300)
        provider = WidgetViewportProvider(widget)
        callback = MagicMock()

        with provider.subscribe(callback):
            widget.resize(1024, 768)
            qapp.processEvents()
            widget.show()
            qapp.processEvents()

        assert provider.current() == ViewportGeometry(1024, 768)
        assert callback.called
        assert callback.call_args[0][0] == ViewportGeometry(1024, 768)
        widget.hide()
