"""
RecordSearch Service

Long-lived entry point that wires the indexing and search gateways to one
shared search client provider, so every indexer and searcher for a base URL
uses the same connection.

Usage:
    service = RecordSearchService()
    indexer = service.indexer()
    searcher = service.searcher(term_storage)
    ...
    service.close()
"""

from typing import Optional

from recordsearch.index.indexer import RecordIndexer, RecordIndexerFactory
from recordsearch.platform.config import settings
from recordsearch.platform.logging import configure_logging, get_logger
from recordsearch.search.results import RecordDecoder
from recordsearch.search.searcher import RecordSearcher, RecordSearcherFactory
from recordsearch.search.term_storage import SearchTermStorage
from recordsearch.storage.search.provider import SearchClientProvider

logger = get_logger(__name__)


class RecordSearchService:
    """Owns the client provider and hands out gateways bound to it."""

    def __init__(
        self,
        client_provider: Optional[SearchClientProvider] = None,
        setup_logging: bool = True,
    ):
        if setup_logging:
            configure_logging()
        self.client_provider = (
            client_provider if client_provider is not None else SearchClientProvider()
        )
        self.indexer_factory = RecordIndexerFactory(self.client_provider)
        self.searcher_factory = RecordSearcherFactory(self.client_provider)
        logger.info("record_search_service_started", solr_url=settings.SOLR_URL)

    def indexer(self, base_url: Optional[str] = None) -> RecordIndexer:
        return self.indexer_factory.factor(base_url)

    def searcher(
        self,
        term_storage: SearchTermStorage,
        base_url: Optional[str] = None,
        record_decoder: Optional[RecordDecoder] = None,
    ) -> RecordSearcher:
        return self.searcher_factory.factor(term_storage, base_url, record_decoder)

    def health_check(self, base_url: Optional[str] = None) -> bool:
        """Check that the search engine at base_url (default SOLR_URL) answers."""
        return self.client_provider.get_client(base_url or settings.SOLR_URL).health_check()

    def close(self) -> None:
        """Close every cached client."""
        self.client_provider.close_all()
        logger.info("record_search_service_stopped")
