"""Notifier implementations: logging, recording, no-op and event-bus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from contactview.application.interfaces import NotificationSeverity, Notifier
from contactview.events.bus import EventBus
from contactview.events.contact_events import NotificationEvent

LOGGER = logging.getLogger(__name__)

_LEVELS = {
    NotificationSeverity.SUCCESS: logging.INFO,
    NotificationSeverity.INFO: logging.INFO,
    NotificationSeverity.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    severity: NotificationSeverity


class NullNotifier(Notifier):
    def notify(self, title: str, message: str, severity: NotificationSeverity) -> None:
        pass


class LoggingNotifier(Notifier):
    """Write notifications to a logger; used by the CLI and headless runs."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or LOGGER

    def notify(self, title: str, message: str, severity: NotificationSeverity) -> None:
        self._logger.log(_LEVELS.get(severity, logging.INFO), "%s: %s", title, message)


class RecordingNotifier(Notifier):
    """Keep every notification in memory so callers can inspect them."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, title: str, message: str, severity: NotificationSeverity) -> None:
        self.notifications.append(Notification(title, message, NotificationSeverity(severity)))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def severities(self) -> List[NotificationSeverity]:
        return [n.severity for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()


class EventBusNotifier(Notifier):
    """Publish notifications as ``NotificationEvent`` for UI layers to toast."""

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus

    def notify(self, title: str, message: str, severity: NotificationSeverity) -> None:
        self._event_bus.publish(
            NotificationEvent(title=title, message=message, severity=NotificationSeverity(severity).value)
        )
