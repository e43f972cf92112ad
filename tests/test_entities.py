import pytest

from entities.attachment import Attachment
from entities.run_statistics import RunStatistics
from entities.ticket import Ticket
from services.errors import MissingIdentifier


def test_ticket_from_record():
    ticket = Ticket.from_record({"id": 12, "status": "Closed", "closedOn": "2026-01-01"})
    assert ticket == Ticket(TicketId="12", Status="Closed", ClosedOn="2026-01-01")


def test_ticket_id_fallback():
    assert Ticket.from_record({"ticketId": "T-9"}).TicketId == "T-9"


@pytest.mark.parametrize("record", [{}, {"id": None}, {"id": ""}, None, "12"])
def test_ticket_without_id(record):
    with pytest.raises(MissingIdentifier):
        Ticket.from_record(record)


def test_attachment_fields_and_fallbacks():
    attachment = Attachment.from_record(
        {"attachmentId": 5, "fileName": "scan.pdf", "updateId": 77}, ticket_id=3
    )
    assert attachment == Attachment(
        AttachmentId="5", TicketId="3", FileName="scan.pdf", ActivityId="77"
    )


def test_attachment_activity_id_precedence():
    record = {"id": 1, "activityId": 10, "updateId": 20, "activityID": 30}
    assert Attachment.from_record(record, "1").ActivityId == "10"
    assert Attachment.from_record({"id": 1, "updateID": 40}, "1").ActivityId == "40"


def test_attachment_defaults():
    attachment = Attachment.from_record({"id": 1}, "2")
    assert attachment.FileName == "(no name)"
    assert attachment.ActivityId is None


def test_attachment_without_id():
    with pytest.raises(MissingIdentifier):
        Attachment.from_record({"name": "x.png"}, "2")


def test_run_statistics_cap():
    stats = RunStatistics(max_deletes=2)
    assert stats.record_processed() is False
    assert stats.record_processed() is True
    assert stats.as_dict()["processed"] == 2
    assert stats.as_dict()["cap_reached"] is True
