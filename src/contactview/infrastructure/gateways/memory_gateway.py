"""In-memory backend gateways for tests, demos and headless runs."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from contactview.application.dtos import InquiryRequest
from contactview.application.interfaces import IGreetingGateway, IInquiryGateway
from contactview.domain.models import DraftEdit, Record
from contactview.domain.repositories import IContactGateway
from contactview.errors import GatewayError

LOGGER = logging.getLogger(__name__)


class InMemoryContactGateway(IContactGateway):
    """Contact backend held in a dict.

    ``fail_next_fetch`` / ``fail_next_save`` make the next call raise a
    :class:`GatewayError`, which lets callers exercise the failure paths.
    Saves are all-or-nothing: a draft naming an unknown record rejects the
    whole batch before anything is applied.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._rows: dict[str, Record] = {record.id: record for record in records}
        self.fail_next_fetch = False
        self.fail_next_save = False
        self.fetch_count = 0
        self.saved_batches: List[List[DraftEdit]] = []

    def fetch_records(self) -> List[Record]:
        self.fetch_count += 1
        if self.fail_next_fetch:
            self.fail_next_fetch = False
            raise GatewayError("fetch failed")
        return list(self._rows.values())

    def save_records(self, drafts: List[DraftEdit]) -> None:
        if self.fail_next_save:
            self.fail_next_save = False
            raise GatewayError("save rejected")
        missing = [draft.record_id for draft in drafts if draft.record_id not in self._rows]
        if missing:
            raise GatewayError(f"unknown record ids: {', '.join(missing)}")
        for draft in drafts:
            current = self._rows[draft.record_id]
            self._rows[draft.record_id] = Record(
                id=current.id,
                fields={**current.fields, **draft.changed_fields},
            )
        self.saved_batches.append([draft.copy() for draft in drafts])
        LOGGER.debug("Saved %d drafts", len(drafts))


class InMemoryInquiryGateway(IInquiryGateway):
    def __init__(self) -> None:
        self.inquiries: List[InquiryRequest] = []
        self.fail_next = False

    def create_inquiry(self, request: InquiryRequest) -> None:
        if self.fail_next:
            self.fail_next = False
            raise GatewayError("inquiry rejected")
        self.inquiries.append(request)


class StaticGreetingGateway(IGreetingGateway):
    def __init__(self, template: str = "Hello, {name}!", error: Optional[Exception] = None) -> None:
        self._template = template
        self._error = error

    def get_greeting(self, name: str) -> str:
        if self._error is not None:
            raise self._error
        return self._template.format(name=name)
