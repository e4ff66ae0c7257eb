from abc import ABC, abstractmethod
from typing import List

from .models import DraftEdit, Record


class IContactGateway(ABC):
    """Remote read/write access to the canonical contact collection."""

    @abstractmethod
    def fetch_records(self) -> List[Record]:
        """Return the full canonical collection; raise on failure."""
        pass

    @abstractmethod
    def save_records(self, drafts: List[DraftEdit]) -> None:
        """Apply every draft or none of them; raise on rejection."""
        pass
