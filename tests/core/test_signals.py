from unittest.mock import MagicMock

from bookshelf.core.events import Signal


def test_signal_event():
    """Verify Signal connect/emit/disconnect."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1


def test_signal_connect_is_idempotent():
    sig = Signal("dup")
    handler = MagicMock()

    sig.connect(handler)
    sig.connect(handler)
    sig.emit()

    assert sig.subscriber_count == 1
    handler.assert_called_once_with()


def test_signal_isolates_failing_subscriber():
    sig = Signal("failing")
    after = MagicMock()

    def broken(*args):
        raise RuntimeError("boom")

    sig.connect(broken)
    sig.connect(after)
    sig.emit(1)

    after.assert_called_once_with(1)


def test_signal_subscriber_may_disconnect_itself():
    sig = Signal("self-disconnect")
    calls = []

    def once(value):
        calls.append(value)
        sig.disconnect(once)

    sig.connect(once)
    sig.emit(1)
    sig.emit(2)

    assert calls == [1]
