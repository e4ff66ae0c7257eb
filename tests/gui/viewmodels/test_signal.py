"""Tests for the pure Python Signal and ObservableProperty classes."""

import pytest

from contactview.gui.viewmodels.signal import ObservableProperty, Signal


class TestSignal:
    def test_connect_and_emit(self):
        sig = Signal()
        received = []
        sig.connect(lambda v: received.append(v))

        sig.emit(42)

        assert received == [42]

    def test_disconnect(self):
        sig = Signal()
        received = []
        handler = lambda v: received.append(v)  # noqa: E731
        sig.connect(handler)
        sig.emit(1)
        sig.disconnect(handler)
        sig.emit(2)

        assert received == [1]

    def test_disconnect_missing_raises(self):
        sig = Signal()
        with pytest.raises(ValueError):
            sig.disconnect(lambda: None)

    def test_disconnect_all(self):
        sig = Signal()
        sig.connect(lambda: None)
        sig.connect(lambda: None)
        sig.disconnect_all()
        assert sig.handler_count == 0

    def test_duplicate_connect_ignored(self):
        sig = Signal()
        handler = lambda: None  # noqa: E731
        sig.connect(handler)
        sig.connect(handler)
        assert sig.handler_count == 1

    def test_handler_exception_does_not_break_others(self):
        sig = Signal()
        received = []

        def bad_handler(v):
            raise RuntimeError("boom")

        sig.connect(bad_handler)
        sig.connect(lambda v: received.append(v))

        sig.emit(1)

        assert received == [1]

    def test_handler_may_disconnect_itself_during_emit(self):
        sig = Signal()
        calls = []

        def once(v):
            calls.append(v)
            sig.disconnect(once)

        sig.connect(once)
        sig.emit(1)
        sig.emit(2)

        assert calls == [1]


class TestObservableProperty:
    def test_changed_emits_on_new_value(self):
        prop = ObservableProperty(0)
        changes = []
        prop.changed.connect(lambda new, old: changes.append((new, old)))

        prop.value = 5
        prop.value = 5

        assert changes == [(5, 0)]

    def test_default_none(self):
        assert ObservableProperty().value is None
