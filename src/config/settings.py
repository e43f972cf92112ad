import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from config.dotenv_loader import get_boolean_from_env, get_list_from_env

DEFAULT_DELETE_ROUTES = (
    "/activities/{activity_id}/attachments/{attachment_id}",
    "/tickets/{ticket_id}/attachments/{attachment_id}",
    "/attachments/{attachment_id}",
)


class ConfigError(ValueError):
    """Raised when the environment does not describe a runnable cleanup."""


@dataclass(frozen=True)
class CleanupConfig:
    domain: str
    api_key: str = field(repr=False)
    dry_run: bool = True
    retention_days: int = 14
    max_deletes: int = 200
    require_activity_id: bool = False
    delete_routes: Tuple[str, ...] = DEFAULT_DELETE_ROUTES
    tickets_page_size: int = 100
    attachments_page_size: int = 50
    http_timeout: Optional[float] = None

    @property
    def base_url(self):
        return f"https://{self.domain}/api/v1"


def _read_int(name, default, minimum):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer. Received: {raw!r}")
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}. Received: {value}")
    return value


def _read_timeout():
    raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        raise ConfigError(f"HTTP_TIMEOUT_SECONDS must be a number. Received: {raw!r}")
    if value <= 0:
        raise ConfigError(f"HTTP_TIMEOUT_SECONDS must be positive. Received: {value}")
    return value


def validate_domain(domain):
    if not domain:
        raise ConfigError("Missing BOLDDESK_DOMAIN or BOLDDESK_API_KEY")
    if "http" in domain or "/" in domain or any(c.isspace() for c in domain):
        raise ConfigError(
            "BOLDDESK_DOMAIN must be host only (no https://, no slashes, no spaces). "
            f'Received: "{domain}"'
        )
    return domain


def load_cleanup_config():
    """
    Builds the immutable run configuration from the process environment.
    Call `load_default_env()` first when a dotenv file should be honoured.
    """
    domain = (os.getenv("BOLDDESK_DOMAIN") or "").strip()
    api_key = (os.getenv("BOLDDESK_API_KEY") or "").strip()

    if not domain or not api_key:
        raise ConfigError("Missing BOLDDESK_DOMAIN or BOLDDESK_API_KEY")

    routes = get_list_from_env("DELETE_ROUTES")
    for route in routes or []:
        if "{attachment_id}" not in route:
            raise ConfigError(
                f"DELETE_ROUTES entry must contain {{attachment_id}}. Received: {route!r}"
            )

    return CleanupConfig(
        domain=validate_domain(domain),
        api_key=api_key,
        dry_run=get_boolean_from_env("DRY_RUN", default=True),
        retention_days=_read_int("DAYS", 14, minimum=0),
        max_deletes=_read_int("MAX_DELETES", 200, minimum=1),
        require_activity_id=get_boolean_from_env("REQUIRE_ACTIVITY_ID", default=False),
        delete_routes=tuple(routes) if routes else DEFAULT_DELETE_ROUTES,
        tickets_page_size=_read_int("TICKETS_PAGE_SIZE", 100, minimum=1),
        attachments_page_size=_read_int("ATTACHMENTS_PAGE_SIZE", 50, minimum=1),
        http_timeout=_read_timeout(),
    )
