import pytest

from contactview.domain.models import DraftEdit, Record
from contactview.errors import GatewayError
from contactview.infrastructure.gateways.memory_gateway import (
    InMemoryContactGateway,
    InMemoryInquiryGateway,
    StaticGreetingGateway,
)
from contactview.application.dtos import InquiryRequest


@pytest.fixture
def gateway():
    return InMemoryContactGateway(
        [
            Record(id="1", fields={"FirstName": "Ann", "Email": "ann@x.com"}),
            Record(id="2", fields={"FirstName": "Bob", "Email": "bob@x.com"}),
        ]
    )


def test_fetch_returns_records_in_insertion_order(gateway):
    assert [r.id for r in gateway.fetch_records()] == ["1", "2"]
    assert gateway.fetch_count == 1


def test_save_applies_changed_fields_only(gateway):
    gateway.save_records([DraftEdit("1", {"Email": "new@x.com"})])

    ann = gateway.fetch_records()[0]
    assert ann.fields == {"FirstName": "Ann", "Email": "new@x.com"}
    assert len(gateway.saved_batches) == 1


def test_unknown_id_rejects_whole_batch(gateway):
    drafts = [DraftEdit("1", {"Email": "changed@x.com"}), DraftEdit("9", {"Email": "ghost@x.com"})]

    with pytest.raises(GatewayError):
        gateway.save_records(drafts)

    assert gateway.fetch_records()[0]["Email"] == "ann@x.com"
    assert gateway.saved_batches == []


def test_failure_flags_apply_once(gateway):
    gateway.fail_next_fetch = True
    with pytest.raises(GatewayError):
        gateway.fetch_records()
    assert len(gateway.fetch_records()) == 2

    gateway.fail_next_save = True
    with pytest.raises(GatewayError):
        gateway.save_records([DraftEdit("1", {"Email": "a@x.com"})])
    gateway.save_records([DraftEdit("1", {"Email": "a@x.com"})])
    assert gateway.fetch_records()[0]["Email"] == "a@x.com"


def test_inquiry_gateway_records_requests():
    gateway = InMemoryInquiryGateway()
    request = InquiryRequest(name="Ann", email="ann@x.com", description="Hi")
    gateway.create_inquiry(request)
    assert gateway.inquiries == [request]

    gateway.fail_next = True
    with pytest.raises(GatewayError):
        gateway.create_inquiry(request)
    assert len(gateway.inquiries) == 1


def test_static_greeting_gateway():
    assert StaticGreetingGateway().get_greeting("Ann") == "Hello, Ann!"
    with pytest.raises(GatewayError):
        StaticGreetingGateway(error=GatewayError("down")).get_greeting("Ann")
