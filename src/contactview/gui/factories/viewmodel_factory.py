"""ViewModelFactory: centralised ViewModel creation.

Uses the DI ``Container`` to resolve dependencies.
"""

from __future__ import annotations

from contactview.application.interfaces import Notifier
from contactview.application.use_cases.fetch_greeting import FetchGreetingUseCase
from contactview.application.use_cases.submit_inquiry import SubmitInquiryUseCase
from contactview.config import ViewConfig
from contactview.di.container import Container
from contactview.domain.repositories import IContactGateway
from contactview.errors.handler import ErrorHandler
from contactview.events.bus import EventBus
from contactview.gui.viewmodels.contact_list_viewmodel import ContactListViewModel
from contactview.gui.viewmodels.greeting_viewmodel import GreetingViewModel
from contactview.gui.viewmodels.inquiry_form_viewmodel import InquiryFormViewModel


class ViewModelFactory:
    """Centrally creates ViewModels from the container's services."""

    def __init__(self, container: Container) -> None:
        self._container = container

    def create_contact_list_vm(self) -> ContactListViewModel:
        resolve = self._container.resolve
        return ContactListViewModel(
            gateway=resolve(IContactGateway),
            config=resolve(ViewConfig),
            notifier=resolve(Notifier),
            event_bus=resolve(EventBus),
            error_handler=resolve(ErrorHandler),
        )

    def create_inquiry_form_vm(self) -> InquiryFormViewModel:
        return InquiryFormViewModel(
            submit_use_case=self._container.resolve(SubmitInquiryUseCase),
            notifier=self._container.resolve(Notifier),
        )

    def create_greeting_vm(self) -> GreetingViewModel:
        return GreetingViewModel(self._container.resolve(FetchGreetingUseCase))
