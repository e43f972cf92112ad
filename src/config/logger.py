import json
import logging
import os
from datetime import datetime
from logging import StreamHandler

from config.elastic_client import ElasticLogHandler


def _base_record(record):
    return {
        "function": record.funcName,
        "action": "log_message",
        "level": record.levelname,
        "timestamp": datetime.fromtimestamp(record.created).isoformat(),
        "message": record.getMessage(),
    }


class ConsoleFormatter(logging.Formatter):
    """
    A formatter that ensures ALL console output is a JSON string.
    """

    def format(self, record):
        if isinstance(record.msg, dict):
            log_dict = dict(record.msg)
        else:
            log_dict = _base_record(record)
        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_dict, ensure_ascii=False, default=str)


class ElasticDictFormatter(logging.Formatter):
    """
    Ensures that EACH log sent to Elasticsearch is a dictionary
    with a consistent structure.
    """

    def format(self, record):
        if isinstance(record.msg, dict):
            return record.msg
        return _base_record(record)


def setup_logger(logger_name):

    logger = logging.getLogger(logger_name)
    logger.setLevel(os.getenv("LOGGER_LEVEL", "INFO"))

    console_formatter = ConsoleFormatter()
    elastic_formatter = ElasticDictFormatter()

    if logger.hasHandlers():
        logger.handlers.clear()

    logger_output = os.getenv("LOGGER_OUTPUT", "CONSOLE").split(",")

    if "FILE" in logger_output:
        fh = logging.FileHandler(os.getenv("LOGGER_FILE", "cleanup.log"))
        fh.setFormatter(console_formatter)
        logger.addHandler(fh)

    if "CONSOLE" in logger_output:
        ch = StreamHandler()
        ch.setFormatter(console_formatter)
        logger.addHandler(ch)

    if "ELASTIC" in logger_output:
        eh = ElasticLogHandler()
        eh.setFormatter(elastic_formatter)
        logger.addHandler(eh)

    return logger
