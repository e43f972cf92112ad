import os

from schedule import every

from config.aop_logging import log_execution
from config.logger import setup_logger
from config.settings import load_cleanup_config

from .cleanup_processor import CleanupProcessor

logger = setup_logger(__name__)

CLEANUP_SUCCESS = "CLEANUP_SUCCESS"
CLEANUP_FAILED = "CLEANUP_FAILED"


@log_execution
def run_cleanup_job(config=None):
    """
    Runs one attachment cleanup and reports its outcome instead of raising.
    """
    logger.info("Starting the attachment cleanup job...")
    try:
        config = config or load_cleanup_config()
        stats = CleanupProcessor(config).execute()
        logger.info(f"Attachment cleanup completed: processed {stats.processed}.")
        return CLEANUP_SUCCESS
    except Exception as e:
        logger.error(f"Error running the attachment cleanup: {e}", exc_info=True)
        return CLEANUP_FAILED


def get_schedule_times():
    return [t.strip() for t in os.getenv("SCHEDULE_TIME", "00:10").split(",") if t.strip()]


def register_cleanup_schedule(times=None, config=None):
    """Schedules the cleanup every day at each `HH:MM` in `times`."""
    jobs = []
    for horario in times or get_schedule_times():
        jobs.append(every().day.at(horario).do(run_cleanup_job, config))
        logger.info(f"Attachment cleanup scheduled daily at {horario}")
    return jobs
