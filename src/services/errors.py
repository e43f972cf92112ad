class CleanupError(Exception):
    """Base class for every error raised by the attachment cleanup."""


class HttpError(CleanupError):
    """A helpdesk request returned a non-success status."""

    def __init__(self, status_code, reason, body=""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"HTTP {status_code} {reason} - {body}")

    @property
    def is_not_found(self):
        return self.status_code == 404


class MissingIdentifier(CleanupError):
    """A listing record carries none of the keys that hold its id."""


class MissingActivityIdentifier(CleanupError):
    """No delete route can be rendered without the attachment's activity id."""

    def __init__(self, attachment_id, ticket_id):
        self.attachment_id = attachment_id
        self.ticket_id = ticket_id
        super().__init__(
            f"Attachment {attachment_id} on ticket {ticket_id} has no activityId/updateId"
        )


class AllCandidatesExhausted(CleanupError):
    """Every candidate delete route answered 404."""

    def __init__(self, attachment_id, attempted):
        self.attachment_id = attachment_id
        self.attempted = list(attempted)
        super().__init__(
            f"No delete route accepted attachment {attachment_id}; "
            f"tried: {', '.join(self.attempted)}"
        )
