from .bus import Event, EventBus, Subscription
from .contact_events import (
    CommitFailedEvent,
    CommitSucceededEvent,
    DraftRecordedEvent,
    NotificationEvent,
    RecordsLoadedEvent,
)

__all__ = [
    "CommitFailedEvent",
    "CommitSucceededEvent",
    "DraftRecordedEvent",
    "Event",
    "EventBus",
    "NotificationEvent",
    "RecordsLoadedEvent",
    "Subscription",
]
