"""Pytest fixtures."""
import os
import sys
from pathlib import Path

import pytest

# Sources live under src/ with top-level packages
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
os.environ.setdefault("LOGGER_OUTPUT", "CONSOLE")
os.environ.setdefault("ENV_FILE", os.devnull)

from config.settings import CleanupConfig  # noqa: E402
from services.errors import HttpError  # noqa: E402

DOMAIN = "acme.bolddesk.com"


class FakeHelpdeskClient:
    """In-memory stand-in for HelpdeskClient that records every call."""

    def __init__(self, ticket_pages=None, attachment_pages=None, delete_outcomes=None):
        self.ticket_pages = ticket_pages or []
        self.attachment_pages = attachment_pages or {}
        self.delete_outcomes = delete_outcomes or {}
        self.calls = []
        self.closed = False

    @staticmethod
    def _page(pages, page):
        return pages[page - 1] if page <= len(pages) else []

    def list_closed_tickets(self, cutoff_iso, page=1, per_page=100):
        self.calls.append(("tickets", cutoff_iso, page, per_page))
        return self._page(self.ticket_pages, page)

    def list_ticket_attachments(self, ticket_id, page=1, per_page=50):
        self.calls.append(("attachments", ticket_id, page, per_page))
        return self._page(self.attachment_pages.get(ticket_id, []), page)

    def delete(self, path):
        self.calls.append(("delete", path))
        outcome = self.delete_outcomes.get(path, "ok")
        if isinstance(outcome, int):
            raise HttpError(outcome, "error", "")
        return outcome

    @property
    def deletes(self):
        return [call[1] for call in self.calls if call[0] == "delete"]

    def close(self):
        self.closed = True


@pytest.fixture
def make_config():
    def _make(**overrides):
        values = {
            "domain": DOMAIN,
            "api_key": "secret-key",
            "dry_run": False,
            "retention_days": 14,
            "max_deletes": 10,
            "delete_routes": ("/attachments/{attachment_id}",),
        }
        values.update(overrides)
        return CleanupConfig(**values)

    return _make


@pytest.fixture
def fake_client_factory():
    return FakeHelpdeskClient
