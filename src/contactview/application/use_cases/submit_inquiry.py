import logging
from dataclasses import dataclass, field

from .base import UseCase, UseCaseRequest, UseCaseResponse
from contactview.application.dtos import InquiryRequest
from contactview.application.interfaces import IInquiryGateway
from contactview.errors import ValidationFailure

REQUIRED_FIELDS = ("name", "email", "description")


@dataclass(frozen=True)
class SubmitInquiryRequest(UseCaseRequest):
    inquiry: InquiryRequest = field(default_factory=InquiryRequest)


@dataclass(frozen=True)
class SubmitInquiryResponse(UseCaseResponse):
    pass


class SubmitInquiryUseCase(UseCase):
    def __init__(self, gateway: IInquiryGateway):
        self._gateway = gateway
        self._logger = logging.getLogger(__name__)

    def execute(self, request: SubmitInquiryRequest) -> SubmitInquiryResponse:
        """Send *request* to the backend.

        Backend failures come back as an unsuccessful response.  An inquiry
        with a blank required field raises :class:`ValidationFailure` and is
        never sent.
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(request.inquiry, name).strip()]
        if missing:
            raise ValidationFailure(f"inquiry is missing {', '.join(missing)}")

        try:
            self._gateway.create_inquiry(request.inquiry)
        except Exception as exc:
            self._logger.error("Failed to create inquiry: %s", exc)
            return SubmitInquiryResponse(success=False, error=str(exc))

        self._logger.info("Created inquiry for %s", request.inquiry.email)
        return SubmitInquiryResponse(success=True)
