from dataclasses import dataclass
from typing import Optional

from services.errors import MissingIdentifier

NO_NAME = "(no name)"
ACTIVITY_ID_KEYS = ("activityId", "updateId", "activityID", "updateID")


@dataclass(frozen=True)
class Attachment:
    AttachmentId: str
    TicketId: str
    FileName: str = NO_NAME
    ActivityId: Optional[str] = None

    @classmethod
    def from_record(cls, record, ticket_id):
        if not isinstance(record, dict):
            raise MissingIdentifier(f"Attachment record is not an object: {record!r}")
        attachment_id = record.get("id") or record.get("attachmentId")
        if not attachment_id:
            raise MissingIdentifier(f"Attachment on ticket {ticket_id} without id")

        # updateId doubles as the activity id on some tenants
        activity_id = None
        for key in ACTIVITY_ID_KEYS:
            if record.get(key) is not None:
                activity_id = str(record[key])
                break

        return cls(
            AttachmentId=str(attachment_id),
            TicketId=str(ticket_id),
            FileName=record.get("name") or record.get("fileName") or NO_NAME,
            ActivityId=activity_id,
        )
