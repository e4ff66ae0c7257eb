"""Contact gateway backed by a JSON array of backend rows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from contactview.domain.models import DEFAULT_ID_FIELD, DraftEdit, Record
from contactview.domain.repositories import IContactGateway
from contactview.errors import GatewayError
from contactview.utils.jsonio import read_json, write_json

LOGGER = logging.getLogger(__name__)


class JsonFileContactGateway(IContactGateway):
    """Read and write contacts stored as ``[{"Id": ..., "FirstName": ...}, ...]``.

    A save rewrites the whole file only after every draft has been applied in
    memory, so a rejected batch leaves the file untouched.
    """

    def __init__(self, path: Path, id_field: str = DEFAULT_ID_FIELD) -> None:
        self._path = Path(path)
        self._id_field = id_field

    @property
    def path(self) -> Path:
        return self._path

    def fetch_records(self) -> List[Record]:
        return [Record.from_mapping(row, self._id_field) for row in self._read_rows()]

    def save_records(self, drafts: List[DraftEdit]) -> None:
        rows = self._read_rows()
        by_id: Dict[str, Dict[str, Any]] = {str(row[self._id_field]): row for row in rows}
        missing = [draft.record_id for draft in drafts if draft.record_id not in by_id]
        if missing:
            raise GatewayError(f"unknown record ids: {', '.join(missing)}")
        for draft in drafts:
            by_id[draft.record_id].update(draft.changed_fields)
        try:
            write_json(self._path, rows)
        except OSError as exc:
            raise GatewayError(f"could not write {self._path}: {exc}") from exc
        LOGGER.info("Saved %d drafts to %s", len(drafts), self._path)

    def _read_rows(self) -> List[Dict[str, Any]]:
        try:
            payload = read_json(self._path)
        except (OSError, ValueError) as exc:
            raise GatewayError(f"could not read {self._path}: {exc}") from exc
        if not isinstance(payload, list):
            raise GatewayError(f"{self._path} must contain a JSON array")
        for row in payload:
            if not isinstance(row, dict) or self._id_field not in row:
                raise GatewayError(f"every row needs an {self._id_field!r} key")
        return payload
