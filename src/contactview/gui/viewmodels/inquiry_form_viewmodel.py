"""Inquiry form ViewModel: name, email and description with inline validation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from contactview.application.dtos import InquiryRequest
from contactview.application.interfaces import NotificationSeverity, Notifier
from contactview.application.services.notifiers import NullNotifier
from contactview.application.use_cases.submit_inquiry import (
    SubmitInquiryRequest,
    SubmitInquiryUseCase,
)
from contactview.errors import UnknownFieldError
from contactview.gui.viewmodels.base import BaseViewModel
from contactview.gui.viewmodels.signal import ObservableProperty, Signal

NAME_REQUIRED = "Please enter your name."
EMAIL_INVALID = "Please enter a valid email address."
DESCRIPTION_REQUIRED = "Please describe your inquiry."


def _validate_name(value: str) -> str:
    return NAME_REQUIRED if not value.strip() else ""


def _validate_email(value: str) -> str:
    return EMAIL_INVALID if "@" not in value else ""


def _validate_description(value: str) -> str:
    return DESCRIPTION_REQUIRED if not value.strip() else ""


class InquiryFormViewModel(BaseViewModel):
    """Single inquiry form.

    Field updates go through an explicit dispatch table; unknown field names
    raise :class:`UnknownFieldError` instead of creating new state.
    Validation errors stay local to the form.
    """

    def __init__(
        self,
        submit_use_case: SubmitInquiryUseCase,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self._submit = submit_use_case
        self._notifier = notifier or NullNotifier()
        self._clock = clock
        self._logger = logging.getLogger(__name__)

        self.name = ObservableProperty("")
        self.email = ObservableProperty("")
        self.description = ObservableProperty("")
        self.errors = ObservableProperty({})
        self.is_loading = ObservableProperty(False)

        self.submitted = Signal()

        self._fields: Dict[str, ObservableProperty] = {
            "name": self.name,
            "email": self.email,
            "description": self.description,
        }
        self._validators: Dict[str, Callable[[str], str]] = {
            "name": _validate_name,
            "email": _validate_email,
            "description": _validate_description,
        }

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def set_field(self, field_name: str, value: Optional[str]) -> None:
        prop = self._fields.get(field_name)
        if prop is None:
            raise UnknownFieldError(f"inquiry form has no field {field_name!r}")
        prop.value = value or ""
        self.validate_field(field_name)

    def validate_field(self, field_name: str) -> str:
        validator = self._validators.get(field_name)
        if validator is None:
            raise UnknownFieldError(f"inquiry form has no field {field_name!r}")
        message = validator(self._fields[field_name].value)
        errors = dict(self.errors.value)
        errors[field_name] = message
        self.errors.value = errors
        return message

    def validate_form(self) -> bool:
        for field_name in self._fields:
            self.validate_field(field_name)
        return all(message == "" for message in self.errors.value.values())

    def submit(self) -> bool:
        if not self.validate_form():
            return False

        self.is_loading.value = True
        try:
            request = InquiryRequest(
                name=self.name.value,
                email=self.email.value,
                description=self.description.value,
                inquiry_date=self._clock().isoformat(),
            )
            response = self._submit.execute(SubmitInquiryRequest(inquiry=request))
            if not response.success:
                self._logger.error("Inquiry submission failed: %s", response.error)
                self._notifier.notify(
                    "Error",
                    "An error occurred while sending your inquiry.",
                    NotificationSeverity.ERROR,
                )
                return False
            self.clear()
            self._notifier.notify("Success", "Your inquiry has been sent.", NotificationSeverity.SUCCESS)
            self.submitted.emit(request)
            return True
        finally:
            self.is_loading.value = False

    def clear(self) -> None:
        for prop in self._fields.values():
            prop.value = ""
        self.errors.value = {}
