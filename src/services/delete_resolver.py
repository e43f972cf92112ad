import string

from config.logger import setup_logger
from services.errors import (
    AllCandidatesExhausted,
    HttpError,
    MissingActivityIdentifier,
)

logger = setup_logger(__name__)


def _placeholders(template):
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


class DeleteRouteResolver:
    """
    Deletes an attachment through the first candidate route the tenant accepts.

    Candidates are tried in their configured order. A 404 means the route does
    not exist on this tenant and the next one is tried; any other failure is
    raised as is.
    """

    def __init__(self, client, candidates):
        if not candidates:
            raise ValueError("At least one delete route candidate is required")
        self.client = client
        self.candidates = tuple(candidates)

    def render_candidates(self, attachment):
        values = {
            "attachment_id": attachment.AttachmentId,
            "ticket_id": attachment.TicketId,
            "activity_id": attachment.ActivityId,
        }
        rendered = []
        for template in self.candidates:
            if any(values.get(name) is None for name in _placeholders(template)):
                continue
            rendered.append(template.format(**values))
        return rendered

    def delete(self, attachment):
        paths = self.render_candidates(attachment)
        if not paths:
            raise MissingActivityIdentifier(attachment.AttachmentId, attachment.TicketId)

        attempted = []
        for path in paths:
            try:
                self.client.delete(path)
            except HttpError as e:
                if not e.is_not_found:
                    raise
                attempted.append(path)
                logger.debug(f"Delete route {path} returned 404, trying next candidate")
                continue
            return path

        raise AllCandidatesExhausted(attachment.AttachmentId, attempted)
