"""Pure Python ContactListViewModel (MVVM) with no Qt dependency.

Owns the single ``ViewState`` of the contact list and derives the visible
page from the canonical collection with :func:`compute_view`.  Every
operation that can change the search key, the sort order, the page position
or the canonical collection ends with an explicit :meth:`recompute_view`.
"""

from __future__ import annotations

import logging
from typing import Any, Collection, Dict, Optional, Sequence

from contactview.application.interfaces import Notifier
from contactview.application.services.edit_batch import EditBatchManager, EditState
from contactview.application.services.notifiers import NullNotifier
from contactview.application.services.record_store import RecordStore
from contactview.config import ViewConfig
from contactview.core.filtering import filter_records
from contactview.core.pagination import clamp_page, paginate, total_pages
from contactview.core.sorting import sort_records
from contactview.domain.models import PageResult, Record, SortDirection, ViewState
from contactview.domain.repositories import IContactGateway
from contactview.errors import FetchFailure, InvariantViolation, UnsortableFieldError
from contactview.errors.handler import ErrorHandler
from contactview.events.bus import EventBus
from contactview.events.contact_events import CommitFailedEvent
from contactview.gui.viewmodels.base import BaseViewModel
from contactview.gui.viewmodels.signal import ObservableProperty, Signal

LOAD_ERROR_MESSAGE = "Error loading contacts."


def compute_view(
    canonical: Sequence[Record],
    state: ViewState,
    searchable_fields: Collection[str],
    sortable_fields: Optional[Collection[str]] = None,
) -> PageResult:
    """Filter, sort and paginate *canonical* for *state*.

    The page number in the result is clamped into ``[1, total_pages]``; the
    caller writes it back into its view state.
    """
    filtered = filter_records(canonical, state.search_key, searchable_fields)
    ordered = sort_records(filtered, state.sort_field, state.sort_direction, sortable_fields)
    page = clamp_page(state.current_page, total_pages(len(ordered), state.page_size))
    return paginate(ordered, page, state.page_size)


class ContactListViewModel(BaseViewModel):
    """Contact list ViewModel: search, sort, paging and batched edits."""

    def __init__(
        self,
        gateway: IContactGateway,
        config: Optional[ViewConfig] = None,
        notifier: Optional[Notifier] = None,
        event_bus: Optional[EventBus] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__()
        self._config = config or ViewConfig()
        self._notifier = notifier or NullNotifier()
        self._event_bus = event_bus or EventBus()
        self._logger = logging.getLogger(__name__)
        self._errors = error_handler or ErrorHandler(self._logger, self._event_bus, self._notifier)

        self._store = RecordStore(gateway.fetch_records, self._event_bus)
        self._edits = EditBatchManager(
            self._store,
            save=gateway.save_records,
            notifier=self._notifier,
            editable_fields=self._config.editable_fields,
            event_bus=self._event_bus,
        )
        self._state = ViewState(
            sort_field=self._config.default_sort_field,
            sort_direction=SortDirection.parse(self._config.default_sort_direction),
            page_size=self._config.page_size,
        )
        self._view = PageResult(page_size=self._config.page_size)

        # Observable properties
        self.records = ObservableProperty([])
        self.current_page = ObservableProperty(1)
        self.total_pages = ObservableProperty(1)
        self.total_count = ObservableProperty(0)
        self.is_first_page = ObservableProperty(True)
        self.is_last_page = ObservableProperty(True)
        self.search_key = ObservableProperty("")
        self.sort_field = ObservableProperty(self._state.sort_field)
        self.sort_direction = ObservableProperty(self._state.sort_direction)
        self.loading = ObservableProperty(False)
        self.edit_state = ObservableProperty(EditState.IDLE)
        self.pending_count = ObservableProperty(0)

        # Signals
        self.view_changed = Signal()  # emits PageResult
        self.error_occurred = Signal()

        self.subscribe_event(self._event_bus, CommitFailedEvent, self._on_commit_failed)

    # -- read-only state ----------------------------------------------------

    @property
    def config(self) -> ViewConfig:
        return self._config

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def edits(self) -> EditBatchManager:
        return self._edits

    @property
    def view_state(self) -> ViewState:
        return ViewState(**vars(self._state))

    @property
    def view(self) -> PageResult:
        return self._view

    # -- loading ------------------------------------------------------------

    def load(self) -> bool:
        """Fetch the canonical collection; failures keep the current view."""
        self.loading.value = True
        try:
            self._store.load()
        except FetchFailure as exc:
            self._errors.handle(exc, message=LOAD_ERROR_MESSAGE, context={"operation": "load"})
            self.error_occurred.emit(str(exc))
            return False
        finally:
            self.loading.value = False
        self.recompute_view()
        return True

    # -- view operations ----------------------------------------------------

    def search(self, search_key: str) -> None:
        self._state.search_key = search_key or ""
        self.recompute_view()

    def sort(self, field_name: str, direction: "SortDirection | str | None" = None) -> None:
        """Order the view by *field_name*.

        Without an explicit *direction*, re-sorting the current field flips
        the direction and a new field starts ascending.
        """
        if field_name not in self._config.sortable_fields:
            raise UnsortableFieldError(f"{field_name!r} is not a sortable field")
        if direction is None:
            if field_name == self._state.sort_field:
                direction = self._state.sort_direction.reversed()
            else:
                direction = SortDirection.ASC
        self._state.sort_field = field_name
        self._state.sort_direction = SortDirection.parse(direction)
        self.recompute_view()

    def next_page(self) -> bool:
        if self._state.current_page >= self._view.total_pages:
            return False
        self._state.current_page += 1
        self.recompute_view()
        return True

    def previous_page(self) -> bool:
        if self._state.current_page <= 1:
            return False
        self._state.current_page -= 1
        self.recompute_view()
        return True

    def go_to_page(self, page: int) -> None:
        self._state.current_page = page
        self.recompute_view()

    def set_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise InvariantViolation(f"page_size must be positive, got {page_size}")
        self._state.page_size = page_size
        self.recompute_view()

    def recompute_view(self) -> PageResult:
        """Rebuild the visible page from the canonical data and view state."""
        result = compute_view(
            self._store.records,
            self._state,
            self._config.searchable_fields,
            self._config.sortable_fields,
        )
        self._state.current_page = result.page
        self._view = result

        self.records.value = list(result.items)
        self.current_page.value = result.page
        self.total_pages.value = result.total_pages
        self.total_count.value = result.total_count
        self.is_first_page.value = result.is_first_page
        self.is_last_page.value = result.is_last_page
        self.search_key.value = self._state.search_key
        self.sort_field.value = self._state.sort_field
        self.sort_direction.value = self._state.sort_direction
        self.view_changed.emit(result)
        return result

    # -- edits --------------------------------------------------------------

    def edit(self, record_id: str, field_name: str, value: Any) -> None:
        self._edits.record_edit(record_id, field_name, value)
        self._sync_edit_state()

    def save(self) -> bool:
        """Commit pending drafts; the view refreshes from the reloaded store."""
        try:
            committed = self._edits.commit()
        finally:
            self._sync_edit_state()
        self.recompute_view()
        return committed

    def discard(self) -> None:
        self._edits.discard()
        self._sync_edit_state()

    def row_values(self, record: Record) -> Dict[str, Any]:
        """Return *record*'s fields overlaid with its pending draft, if any."""
        values = dict(record.fields)
        draft = self._edits.draft_for(record.id)
        if draft is not None:
            values.update(draft.changed_fields)
        return values

    # -- internal -----------------------------------------------------------

    def _sync_edit_state(self) -> None:
        self.edit_state.value = self._edits.state
        self.pending_count.value = len(self._edits.drafts)

    def _on_commit_failed(self, event: CommitFailedEvent) -> None:
        self._logger.debug("Commit of %d drafts failed", len(event.record_ids))
        self.error_occurred.emit(event.reason)
