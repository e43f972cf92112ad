import os
import sys
import time

from schedule import run_pending

from config.dotenv_loader import load_default_env
from config.logger import setup_logger

load_default_env()

from config.settings import load_cleanup_config  # noqa: E402
from process.cleanup_processor import CleanupProcessor  # noqa: E402
from process.scheduler import register_cleanup_schedule  # noqa: E402

logger = setup_logger(__name__)


def run_once():
    try:
        config = load_cleanup_config()
        CleanupProcessor(config).execute()
    except Exception as e:
        logger.error(f"Cleanup job failed: {e}", exc_info=True)
        return 1
    return 0


def run_scheduled():
    config = load_cleanup_config()
    register_cleanup_schedule(config=config)

    # Main loop to run scheduled jobs
    while True:
        run_pending()
        time.sleep(30)


def main():
    if os.getenv("RUN_MODE", "once").strip().lower() == "schedule":
        run_scheduled()
        return 0
    return run_once()


if __name__ == "__main__":
    sys.exit(main())
