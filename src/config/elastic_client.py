import logging
import os

from elasticsearch import Elasticsearch
from elasticsearch.helpers import bulk

from .singleton_conn_elastic import SingletonConnElastic


class ElasticLogHandler(logging.Handler, metaclass=SingletonConnElastic):
    """
    Ships cleanup log records to the `ELASTICSEARCH_LOG_INDEX` index.
    """

    def __init__(self):
        super().__init__()

        self.elastic_url = os.getenv("ELASTICSEARCH_URL")
        self.log_index = os.getenv("ELASTICSEARCH_LOG_INDEX")
        self.elastic_user = os.getenv("ELASTICSEARCH_USER")
        self.elastic_password = os.getenv("ELASTICSEARCH_PASSWORD")

        self.es = Elasticsearch(
            self.elastic_url,
            basic_auth=(self.elastic_user, self.elastic_password),
            verify_certs=False,
            ssl_show_warn=False,
        )
        self._index_checked = False

    def _ensure_log_index(self):
        if self._index_checked:
            return
        if not self.es.indices.exists(index=self.log_index):
            try:
                self.es.indices.create(index=self.log_index)
            except Exception as e:
                print(f"ERROR: Could not create log index '{self.log_index}': {e}")
        self._index_checked = True

    def emit(self, record):
        if not self.log_index:
            print(
                "ERROR: Environment variable ELASTICSEARCH_LOG_INDEX not defined. Log will not be sent."
            )
            return

        try:
            self._ensure_log_index()
            log_entry = self.format(record)
            actions = [{"_index": self.log_index, "_source": log_entry}]
            bulk(self.es, actions, raise_on_error=False, raise_on_exception=False)
        except Exception as e:
            print(f"ERROR: Exception when sending log to Elasticsearch: {e}")
