"""Tests for InquiryFormViewModel: dispatch table, validation and submit."""

from datetime import datetime

import pytest

from contactview.application.interfaces import NotificationSeverity
from contactview.application.services.notifiers import RecordingNotifier
from contactview.application.use_cases.submit_inquiry import SubmitInquiryUseCase
from contactview.errors import UnknownFieldError
from contactview.gui.viewmodels.inquiry_form_viewmodel import (
    EMAIL_INVALID,
    NAME_REQUIRED,
    InquiryFormViewModel,
)
from contactview.infrastructure.gateways.memory_gateway import InMemoryInquiryGateway


def _form():
    gateway = InMemoryInquiryGateway()
    notifier = RecordingNotifier()
    form = InquiryFormViewModel(
        SubmitInquiryUseCase(gateway),
        notifier=notifier,
        clock=lambda: datetime(2024, 1, 2, 3, 4, 5),
    )
    return form, gateway, notifier


def _fill(form):
    form.set_field("name", "Ann")
    form.set_field("email", "ann@example.com")
    form.set_field("description", "Please call me back")


def test_field_names():
    form, _, _ = _form()
    assert form.field_names == ("name", "email", "description")


def test_unknown_field_is_rejected():
    form, _, _ = _form()
    with pytest.raises(UnknownFieldError):
        form.set_field("phone", "0123456789")
    with pytest.raises(UnknownFieldError):
        form.set_field("__class__", "x")


def test_set_field_validates_inline():
    form, _, _ = _form()
    form.set_field("name", "   ")
    form.set_field("email", "not-an-email")
    assert form.errors.value == {"name": NAME_REQUIRED, "email": EMAIL_INVALID}

    form.set_field("email", "a@b")
    assert form.errors.value["email"] == ""


def test_invalid_form_does_not_reach_gateway():
    form, gateway, notifier = _form()
    form.set_field("name", "Ann")

    assert form.submit() is False

    assert gateway.inquiries == []
    assert notifier.notifications == []
    assert form.errors.value["description"] != ""


def test_successful_submit_clears_form():
    form, gateway, notifier = _form()
    _fill(form)
    submitted = []
    form.submitted.connect(submitted.append)

    assert form.submit() is True

    assert len(gateway.inquiries) == 1
    sent = gateway.inquiries[0]
    assert (sent.name, sent.email, sent.description) == ("Ann", "ann@example.com", "Please call me back")
    assert sent.inquiry_date == "2024-01-02T03:04:05"
    assert form.name.value == "" and form.errors.value == {}
    assert notifier.last.severity is NotificationSeverity.SUCCESS
    assert submitted == [sent]
    assert form.is_loading.value is False


def test_failed_submit_keeps_values():
    form, gateway, notifier = _form()
    _fill(form)
    gateway.fail_next = True
    loading = []
    form.is_loading.changed.connect(lambda new, old: loading.append(new))

    assert form.submit() is False

    assert form.name.value == "Ann"
    assert notifier.last.severity is NotificationSeverity.ERROR
    assert loading == [True, False]
