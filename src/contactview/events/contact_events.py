from dataclasses import dataclass, field

from .bus import Event


@dataclass(kw_only=True)
class RecordsLoadedEvent(Event):
    record_count: int = 0


@dataclass(kw_only=True)
class DraftRecordedEvent(Event):
    record_id: str = ""
    field_name: str = ""


@dataclass(kw_only=True)
class CommitSucceededEvent(Event):
    record_ids: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class CommitFailedEvent(Event):
    record_ids: list[str] = field(default_factory=list)
    reason: str = ""


@dataclass(kw_only=True)
class NotificationEvent(Event):
    title: str = ""
    message: str = ""
    severity: str = "info"
