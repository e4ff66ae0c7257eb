from abc import ABC, abstractmethod
from enum import Enum

from .dtos import InquiryRequest


class NotificationSeverity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notifier(ABC):
    """Fire-and-forget, user-visible notification sink."""

    @abstractmethod
    def notify(self, title: str, message: str, severity: NotificationSeverity) -> None:
        pass


class IInquiryGateway(ABC):
    """Remote creation of a customer inquiry."""

    @abstractmethod
    def create_inquiry(self, request: InquiryRequest) -> None:
        """Persist *request*; raise on failure."""
        pass


class IGreetingGateway(ABC):
    """Remote one-shot greeting lookup."""

    @abstractmethod
    def get_greeting(self, name: str) -> str:
        pass
