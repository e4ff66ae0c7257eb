from .edit_batch import EditBatchManager, EditState
from .notifiers import EventBusNotifier, LoggingNotifier, NullNotifier, RecordingNotifier
from .record_store import RecordStore

__all__ = [
    "EditBatchManager",
    "EditState",
    "EventBusNotifier",
    "LoggingNotifier",
    "NullNotifier",
    "RecordStore",
    "RecordingNotifier",
]
