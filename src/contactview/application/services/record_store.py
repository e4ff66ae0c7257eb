"""Canonical contact collection as last fetched from the backend."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from contactview.domain.models import Record
from contactview.errors import FetchFailure, InvariantViolation, RecordNotFoundError
from contactview.events.bus import EventBus
from contactview.events.contact_events import RecordsLoadedEvent

LOGGER = logging.getLogger(__name__)

FetchFn = Callable[[], Iterable[Record]]


class RecordStore:
    """Single owner of the canonical collection.

    The collection is only ever swapped wholesale: ``load`` replaces it with
    a fresh fetch and ``replace`` installs a caller-supplied list.  A failed
    load leaves the previous contents in place.
    """

    def __init__(self, fetch: FetchFn, event_bus: Optional[EventBus] = None) -> None:
        self._fetch = fetch
        self._event_bus = event_bus
        self._records: tuple[Record, ...] = ()
        self._loaded = False

    @property
    def records(self) -> Sequence[Record]:
        return self._records

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def require(self, record_id: str) -> Record:
        record = self.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"no contact with id {record_id!r}")
        return record

    def load(self) -> List[Record]:
        """Fetch the canonical collection and swap it in.

        Raises :class:`FetchFailure` when the fetch collaborator fails; the
        store keeps whatever it held before.
        """
        try:
            fetched = list(self._fetch())
        except Exception as exc:
            LOGGER.error("Failed to fetch records: %s", exc)
            raise FetchFailure(str(exc)) from exc
        self.replace(fetched)
        return fetched

    def replace(self, records: Iterable[Record]) -> None:
        snapshot = tuple(records)
        seen: set[str] = set()
        for record in snapshot:
            if record.id in seen:
                raise InvariantViolation(f"duplicate record id {record.id!r}")
            seen.add(record.id)
        self._records = snapshot
        self._loaded = True
        LOGGER.debug("Record store replaced with %d records", len(snapshot))
        if self._event_bus is not None:
            self._event_bus.publish(RecordsLoadedEvent(record_count=len(snapshot)))
