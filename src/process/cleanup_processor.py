from datetime import datetime, timedelta, timezone

from config.aop_logging import log_execution
from config.logger import setup_logger
from entities.attachment import Attachment
from entities.run_statistics import RunStatistics
from entities.ticket import Ticket
from services.delete_resolver import DeleteRouteResolver
from services.errors import MissingActivityIdentifier, MissingIdentifier
from services.helpdesk_client import HelpdeskClient
from services.pagination import iter_records

logger = setup_logger(__name__)


def compute_cutoff(retention_days, now=None):
    """Returns `now - retention_days` as an ISO-8601 UTC string ending in `Z`."""
    now = now or datetime.now(timezone.utc)
    cutoff = now.astimezone(timezone.utc) - timedelta(days=retention_days)
    return cutoff.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CleanupProcessor:
    """
    Deletes the attachments of closed tickets older than the retention window.

    The run is strictly sequential and stops as soon as `max_deletes`
    attachments have been processed (deleted, or logged in dry-run).
    """

    def __init__(self, config, client=None, now=None):
        self.config = config
        self._owns_client = client is None
        self.client = client or HelpdeskClient(config)
        self.resolver = DeleteRouteResolver(self.client, config.delete_routes)
        self.now = now
        self.stats = RunStatistics(
            max_deletes=config.max_deletes, dry_run=config.dry_run
        )

    def _log_decision(self, action, attachment, level="INFO", **extra):
        entry = {
            "function": "process_attachment",
            "action": action,
            "level": level,
            "timestamp": datetime.now().isoformat(),
            "ticket_id": attachment.TicketId,
            "attachment_id": attachment.AttachmentId,
            "attachment_name": attachment.FileName,
            "activity_id": attachment.ActivityId,
        }
        entry.update(extra)
        if level == "WARNING":
            logger.warning(entry)
        else:
            logger.info(entry)

    def _log_summary(self):
        summary = {
            "function": "execute",
            "action": "summary",
            "level": "INFO",
            "timestamp": datetime.now().isoformat(),
            "message": f"Done. processed: {self.stats.processed}",
        }
        summary.update(self.stats.as_dict())
        logger.info(summary)

    def iter_tickets(self, cutoff_iso):
        records = iter_records(
            lambda page, size: self.client.list_closed_tickets(cutoff_iso, page, size),
            self.config.tickets_page_size,
            label="tickets",
        )
        for record in records:
            try:
                yield Ticket.from_record(record)
            except MissingIdentifier:
                continue

    def iter_attachments(self, ticket):
        records = iter_records(
            lambda page, size: self.client.list_ticket_attachments(
                ticket.TicketId, page, size
            ),
            self.config.attachments_page_size,
            label=f"ticket {ticket.TicketId} attachments",
        )
        for record in records:
            try:
                yield Attachment.from_record(record, ticket.TicketId)
            except MissingIdentifier:
                continue

    def process_attachment(self, attachment):
        """
        Deletes (or, in dry-run, announces) one attachment.

        Returns True when the attachment counted towards the cap.
        """
        if self.config.require_activity_id and not attachment.ActivityId:
            self.stats.skipped += 1
            self._log_decision(
                "skip",
                attachment,
                level="WARNING",
                message="missing activityId/updateId; cannot delete via activities endpoint",
            )
            return False

        if self.config.dry_run:
            self._log_decision("dry_run", attachment, message="Would delete attachment")
            return True

        try:
            route = self.resolver.delete(attachment)
        except MissingActivityIdentifier as e:
            self.stats.skipped += 1
            self._log_decision("cannot_delete", attachment, level="WARNING", message=str(e))
            return False

        self._log_decision("deleted", attachment, route=route, message="Deleted attachment")
        self.stats.routes[route] += 1
        return True

    def run(self):
        cutoff_iso = compute_cutoff(self.config.retention_days, self.now)
        logger.info(
            f"Starting cleanup: DAYS={self.config.retention_days}, "
            f"DRY_RUN={self.config.dry_run}, MAX_DELETES={self.config.max_deletes}, "
            f"cutoff={cutoff_iso}"
        )

        for ticket in self.iter_tickets(cutoff_iso):
            self.stats.tickets_seen += 1
            for attachment in self.iter_attachments(ticket):
                if not self.process_attachment(attachment):
                    continue
                if self.stats.record_processed():
                    logger.info(
                        f"Reached MAX_DELETES ({self.config.max_deletes}). Stopping."
                    )
                    return self.stats

        logger.info("No more tickets found.")
        return self.stats

    @log_execution
    def execute(self):
        try:
            stats = self.run()
        finally:
            if self._owns_client:
                self.client.close()
        self._log_summary()
        return stats
