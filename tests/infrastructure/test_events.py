from dataclasses import dataclass

from contactview.events.bus import Event, EventBus
from contactview.events.contact_events import CommitSucceededEvent, RecordsLoadedEvent


@dataclass(kw_only=True)
class SimpleEvent(Event):
    payload: str = ""


def test_subscribe_publish():
    bus = EventBus()
    received = []
    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))

    bus.publish(SimpleEvent(payload="hello"))

    assert received == ["hello"]


def test_handlers_run_in_subscription_order():
    bus = EventBus()
    order = []
    bus.subscribe(SimpleEvent, lambda e: order.append(1))
    bus.subscribe(SimpleEvent, lambda e: order.append(2))

    bus.publish(SimpleEvent())

    assert order == [1, 2]


def test_events_are_routed_by_exact_type():
    bus = EventBus()
    loaded = []
    bus.subscribe(RecordsLoadedEvent, loaded.append)

    bus.publish(CommitSucceededEvent(record_ids=["1"]))

    assert loaded == []


def test_unsubscribe():
    bus = EventBus()
    received = []
    sub = bus.subscribe(SimpleEvent, lambda e: received.append(e))
    bus.unsubscribe(sub)

    bus.publish(SimpleEvent())

    assert received == []
    assert sub.active is False
    assert bus.subscriber_count(SimpleEvent) == 0


def test_cancelled_subscription_is_skipped():
    bus = EventBus()
    received = []
    sub = bus.subscribe(SimpleEvent, lambda e: received.append(e))
    sub.cancel()
    bus.publish(SimpleEvent())
    assert received == []


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def bad(event):
        raise RuntimeError("boom")

    bus.subscribe(SimpleEvent, bad)
    bus.subscribe(SimpleEvent, lambda e: received.append(e.payload))

    bus.publish(SimpleEvent(payload="ok"))

    assert received == ["ok"]
