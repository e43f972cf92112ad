from config.logger import setup_logger
from services.envelope import normalize_list

logger = setup_logger(__name__)


def iter_records(fetch_page, page_size, label="records"):
    """
    Lazily walks a page-numbered listing starting at page 1.

    Args:
        fetch_page: callable(page, page_size) returning a raw response body.
        page_size: requested page size; a shorter page is the last one.
        label: name used in debug logs.

    Stops on an empty page or on a page shorter than `page_size`.
    """
    page = 1
    while True:
        records = normalize_list(fetch_page(page, page_size))
        logger.debug(f"Fetched {label} page {page}: {len(records)} records")

        if not records:
            return

        yield from records

        if len(records) < page_size:
            return
        page += 1
