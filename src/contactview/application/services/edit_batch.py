"""Batched draft edits committed to the backend as one all-or-nothing write."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Collection, Dict, List, Optional

from contactview.application.interfaces import NotificationSeverity, Notifier
from contactview.application.services.notifiers import NullNotifier
from contactview.application.services.record_store import RecordStore
from contactview.domain.models import DraftEdit
from contactview.errors import FetchFailure, InvariantViolation, SaveFailure, UnknownFieldError
from contactview.events.bus import EventBus
from contactview.events.contact_events import (
    CommitFailedEvent,
    CommitSucceededEvent,
    DraftRecordedEvent,
)

LOGGER = logging.getLogger(__name__)

SaveFn = Callable[[List[DraftEdit]], Any]

SUCCESS_TITLE = "Success"
SUCCESS_MESSAGE = "Contacts updated successfully!"
ERROR_TITLE = "Error"
ERROR_MESSAGE = "Error updating contacts. Please try again."
REFRESH_ERROR_MESSAGE = "Contacts were saved but could not be reloaded."


class EditState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    COMMITTING = "committing"


class EditBatchManager:
    """Accumulate per-record drafts and commit them as a single unit.

    The batch is snapshotted when a commit starts and a fresh batch begins
    accumulating at once, so edits that arrive while the save is in flight
    are never part of it.  On failure the snapshot is put back underneath
    those newer edits; on success the store is refreshed with a full fetch.
    """

    def __init__(
        self,
        store: RecordStore,
        save: Optional[SaveFn] = None,
        notifier: Optional[Notifier] = None,
        editable_fields: Optional[Collection[str]] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._store = store
        self._save = save
        self._notifier = notifier or NullNotifier()
        self._editable_fields = frozenset(editable_fields) if editable_fields is not None else None
        self._event_bus = event_bus
        self._drafts: Dict[str, DraftEdit] = {}
        self._state = EditState.IDLE

    # -- properties --------------------------------------------------------

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def has_pending(self) -> bool:
        return bool(self._drafts)

    @property
    def drafts(self) -> List[DraftEdit]:
        """Copies of the pending drafts, in first-edited order."""
        return [draft.copy() for draft in self._drafts.values()]

    def draft_for(self, record_id: str) -> Optional[DraftEdit]:
        draft = self._drafts.get(record_id)
        return draft.copy() if draft is not None else None

    @property
    def editable_fields(self) -> Optional[frozenset[str]]:
        return self._editable_fields

    # -- public API --------------------------------------------------------

    def record_edit(self, record_id: str, field_name: str, value: Any) -> None:
        """Merge one field change into the draft for *record_id*."""
        if self._editable_fields is not None and field_name not in self._editable_fields:
            raise UnknownFieldError(f"{field_name!r} is not an editable field")
        draft = self._drafts.get(record_id)
        if draft is None:
            draft = DraftEdit(record_id=record_id)
            self._drafts[record_id] = draft
        draft.merge(field_name, value)
        if self._state is EditState.IDLE:
            self._set_state(EditState.EDITING)
        self._publish(DraftRecordedEvent(record_id=record_id, field_name=field_name))

    def commit(self, save_fn: Optional[SaveFn] = None) -> bool:
        """Send the whole batch to the backend in one call.

        Returns ``True`` when the backend accepted the batch.  Failures are
        reported through the notifier and never raised.
        """
        save = save_fn or self._save
        if save is None:
            raise InvariantViolation("no save operation configured")
        if self._state is EditState.COMMITTING:
            LOGGER.warning("Commit requested while another commit is in flight; ignored")
            return False
        if not self._drafts:
            LOGGER.debug("Commit requested with no pending drafts")
            return False

        snapshot = self._drafts
        self._drafts = {}
        self._set_state(EditState.COMMITTING)
        batch = [draft.copy() for draft in snapshot.values()]
        record_ids = list(snapshot)

        try:
            save(batch)
        except Exception as exc:
            failure = exc if isinstance(exc, SaveFailure) else SaveFailure(str(exc))
            LOGGER.error("Error updating contacts: %s", failure)
            self._restore(snapshot)
            self._set_state(EditState.EDITING)
            self._notifier.notify(ERROR_TITLE, ERROR_MESSAGE, NotificationSeverity.ERROR)
            self._publish(CommitFailedEvent(record_ids=record_ids, reason=str(failure)))
            return False

        try:
            self._store.load()
        except FetchFailure as exc:
            LOGGER.error("Refresh after commit failed: %s", exc)
            self._notifier.notify(ERROR_TITLE, REFRESH_ERROR_MESSAGE, NotificationSeverity.ERROR)
        finally:
            # The save went through; never leave the manager in COMMITTING.
            self._set_state(EditState.EDITING if self._drafts else EditState.IDLE)

        self._notifier.notify(SUCCESS_TITLE, SUCCESS_MESSAGE, NotificationSeverity.SUCCESS)
        self._publish(CommitSucceededEvent(record_ids=record_ids))
        return True

    def discard(self) -> None:
        """Drop every pending draft."""
        if self._state is EditState.COMMITTING:
            raise InvariantViolation("cannot discard drafts while a commit is in flight")
        self._drafts = {}
        self._set_state(EditState.IDLE)

    # -- internal ----------------------------------------------------------

    def _restore(self, snapshot: Dict[str, DraftEdit]) -> None:
        newer = self._drafts
        restored: Dict[str, DraftEdit] = {
            record_id: draft.merged_with(newer.get(record_id))
            for record_id, draft in snapshot.items()
        }
        for record_id, draft in newer.items():
            if record_id not in restored:
                restored[record_id] = draft
        self._drafts = restored

    def _set_state(self, state: EditState) -> None:
        if state is not self._state:
            LOGGER.debug("Edit batch %s -> %s", self._state.value, state.value)
            self._state = state

    def _publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
