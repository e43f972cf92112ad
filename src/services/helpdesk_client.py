import json

import httpx

from config.logger import setup_logger
from services.errors import HttpError

logger = setup_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


class HelpdeskClient:
    """
    Thin authenticated wrapper around the helpdesk REST API.

    Every call issues exactly one request; failures are never retried.
    """

    def __init__(self, config, transport=None):
        self.config = config
        client_kwargs = {
            "base_url": config.base_url,
            "headers": {"x-api-key": config.api_key},
        }
        if config.http_timeout is not None:
            client_kwargs["timeout"] = config.http_timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self.http = httpx.Client(**client_kwargs)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.http.close()

    @staticmethod
    def _decode(response):
        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE in content_type:
            try:
                return response.json()
            except ValueError:
                return None
        return response.text

    def request(self, path, method="GET", params=None, body=None, accept=JSON_CONTENT_TYPE):
        headers = {"accept": accept}
        content = None
        if body is not None:
            headers["content-type"] = JSON_CONTENT_TYPE
            content = json.dumps(body)

        logger.debug(f"{method} {path} params={params}")
        response = self.http.request(
            method, path, params=params, content=content, headers=headers
        )
        payload = self._decode(response)

        if not response.is_success:
            message = payload if isinstance(payload, str) else json.dumps(payload)
            raise HttpError(response.status_code, response.reason_phrase, message)

        return payload

    def list_closed_tickets(self, cutoff_iso, page=1, per_page=100):
        params = {
            "status": "Closed",
            "closedOnTo": cutoff_iso,
            "page": page,
            "perPage": per_page,
        }
        return self.request("/tickets", params=params)

    def list_ticket_attachments(self, ticket_id, page=1, per_page=50):
        params = {"Page": page, "PerPage": per_page, "OrderBy": "createdOn desc"}
        return self.request(f"/tickets/{ticket_id}/attachments", params=params)

    def delete(self, path):
        return self.request(path, method="DELETE", accept=TEXT_CONTENT_TYPE)
