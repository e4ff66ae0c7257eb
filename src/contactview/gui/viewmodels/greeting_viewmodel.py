"""One-shot greeting lookup."""

from __future__ import annotations

import logging

from contactview.application.use_cases.fetch_greeting import (
    FetchGreetingRequest,
    FetchGreetingUseCase,
)
from contactview.gui.viewmodels.base import BaseViewModel
from contactview.gui.viewmodels.signal import ObservableProperty, Signal

DEFAULT_NAME = "World"


class GreetingViewModel(BaseViewModel):
    def __init__(self, use_case: FetchGreetingUseCase, name: str = DEFAULT_NAME) -> None:
        super().__init__()
        self._use_case = use_case
        self._logger = logging.getLogger(__name__)

        self.name = ObservableProperty(name)
        self.greeting = ObservableProperty("")
        self.error_occurred = Signal()

    def set_name(self, value: str) -> None:
        self.name.value = value

    def fetch_greeting(self) -> bool:
        response = self._use_case.execute(FetchGreetingRequest(name=self.name.value))
        if not response.success:
            self._logger.error("Could not fetch greeting for %r: %s", self.name.value, response.error)
            self.error_occurred.emit(response.error)
            return False
        self.greeting.value = response.greeting
        return True
