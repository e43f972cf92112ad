from dataclasses import dataclass
from typing import Optional

from services.errors import MissingIdentifier


@dataclass(frozen=True)
class Ticket:
    TicketId: str
    Status: Optional[str] = None
    ClosedOn: Optional[str] = None

    @classmethod
    def from_record(cls, record):
        if not isinstance(record, dict):
            raise MissingIdentifier(f"Ticket record is not an object: {record!r}")
        ticket_id = record.get("id") or record.get("ticketId")
        if not ticket_id:
            raise MissingIdentifier("Ticket record without id/ticketId")
        return cls(
            TicketId=str(ticket_id),
            Status=record.get("status"),
            ClosedOn=record.get("closedOn"),
        )
