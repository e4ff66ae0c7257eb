"""Central reporting path for recoverable runtime failures."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from contactview.events.bus import Event, EventBus

if TYPE_CHECKING:  # pragma: no cover - import only for type checking
    from contactview.application.interfaces import Notifier


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Log a failure, publish it on the bus and surface it to the viewer.

    Only ERROR and CRITICAL failures reach the notifier; lower severities are
    logged and published but stay invisible to the viewer.
    """

    def __init__(
        self,
        logger: logging.Logger,
        event_bus: EventBus,
        notifier: Optional["Notifier"] = None,
    ):
        self._logger = logger
        self._events = event_bus
        self._notifier = notifier

    def set_notifier(self, notifier: Optional["Notifier"]) -> None:
        self._notifier = notifier

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        *,
        title: str = "Error",
        message: Optional[str] = None,
        context: Optional[dict] = None,
    ) -> None:
        context = context or {}
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method("%s: %s", error.__class__.__name__, error, extra={"context": context})

        self._events.publish(ErrorOccurredEvent(
            error=error,
            severity=severity,
            context=context,
        ))

        if self._notifier is not None and severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            from contactview.application.interfaces import NotificationSeverity

            self._notifier.notify(title, message or str(error), NotificationSeverity.ERROR)
