import logging
from dataclasses import dataclass

from .base import UseCase, UseCaseRequest, UseCaseResponse
from contactview.application.interfaces import IGreetingGateway


@dataclass(frozen=True)
class FetchGreetingRequest(UseCaseRequest):
    name: str = ""


@dataclass(frozen=True)
class FetchGreetingResponse(UseCaseResponse):
    greeting: str = ""


class FetchGreetingUseCase(UseCase):
    def __init__(self, gateway: IGreetingGateway):
        self._gateway = gateway
        self._logger = logging.getLogger(__name__)

    def execute(self, request: FetchGreetingRequest) -> FetchGreetingResponse:
        try:
            greeting = self._gateway.get_greeting(request.name)
        except Exception as exc:
            self._logger.error("Greeting lookup failed: %s", exc)
            return FetchGreetingResponse(success=False, error=str(exc))
        return FetchGreetingResponse(success=True, greeting=greeting)
