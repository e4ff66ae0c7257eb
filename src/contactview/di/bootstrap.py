import logging
from typing import Optional

from .container import Container
from .lifetime import Lifetime
from ..application.interfaces import IGreetingGateway, IInquiryGateway, Notifier
from ..application.services.notifiers import LoggingNotifier
from ..application.use_cases.fetch_greeting import FetchGreetingUseCase
from ..application.use_cases.submit_inquiry import SubmitInquiryUseCase
from ..config import ViewConfig
from ..domain.repositories import IContactGateway
from ..errors.handler import ErrorHandler
from ..events.bus import EventBus
from ..infrastructure.gateways.memory_gateway import (
    InMemoryContactGateway,
    InMemoryInquiryGateway,
    StaticGreetingGateway,
)
from ..utils.logging import get_logger


def bootstrap(
    container: Container,
    contact_gateway: Optional[IContactGateway] = None,
    view_config: Optional[ViewConfig] = None,
    notifier: Optional[Notifier] = None,
) -> Container:
    """Register all application services in the DI container."""
    container.register_singleton(EventBus, EventBus)
    container.register_instance(ViewConfig, view_config or ViewConfig())
    container.register_instance(Notifier, notifier or LoggingNotifier(get_logger("notifications")))
    container.register_instance(IContactGateway, contact_gateway or InMemoryContactGateway())
    container.register_singleton(IInquiryGateway, InMemoryInquiryGateway)
    container.register_singleton(IGreetingGateway, StaticGreetingGateway)
    container.register_factory(
        ErrorHandler,
        lambda c: ErrorHandler(get_logger("errors"), c.resolve(EventBus), c.resolve(Notifier)),
        Lifetime.SINGLETON,
    )
    container.register_factory(
        SubmitInquiryUseCase,
        lambda c: SubmitInquiryUseCase(c.resolve(IInquiryGateway)),
    )
    container.register_factory(
        FetchGreetingUseCase,
        lambda c: FetchGreetingUseCase(c.resolve(IGreetingGateway)),
    )
    logging.getLogger(__name__).debug("Container bootstrapped")
    return container
