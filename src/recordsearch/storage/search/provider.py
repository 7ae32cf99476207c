"""
Search client provider - one long-lived client per search engine base URL.
"""

import threading
from typing import Callable, Dict, Optional

from recordsearch.platform.logging import get_logger
from recordsearch.storage.search.base import SearchEngineClient
from recordsearch.storage.search.solr import SolrClient

logger = get_logger(__name__)

ClientFactory = Callable[[str], SearchEngineClient]


class SearchClientProvider:
    """
    Caches search engine clients keyed by base URL.

    Lookups of an existing URL take no lock. The first caller for a new URL
    creates the client under the lock; concurrent callers for the same URL
    wait and receive that same instance.
    """

    def __init__(self, client_factory: Optional[ClientFactory] = None):
        self._client_factory = client_factory or SolrClient
        self._clients: Dict[str, SearchEngineClient] = {}
        self._lock = threading.Lock()

    def get_client(self, base_url: str) -> SearchEngineClient:
        """Get the client for a base URL, creating it on first use."""
        client = self._clients.get(base_url)
        if client is not None:
            return client

        with self._lock:
            client = self._clients.get(base_url)
            if client is None:
                client = self._client_factory(base_url)
                self._clients[base_url] = client
                logger.info("search_client_created", base_url=base_url)
            return client

    def __contains__(self, base_url: str) -> bool:
        return base_url in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def close_all(self) -> None:
        """Close and forget every cached client."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()
