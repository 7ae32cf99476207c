"""
Record Searcher - runs searches against the search engine.

A query that references a field the engine does not know yet is treated as
having no matches: fields are created by the first write that uses them, so
searching a term nothing has been indexed under is a normal condition. Every
other failure is raised as a SearchError.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from recordsearch.errors import SearchError
from recordsearch.platform.config import settings
from recordsearch.search.models import SearchResultPage, SearchSpec
from recordsearch.search.query import QueryBuilder, parse_start
from recordsearch.search.results import RecordDecoder, ResultTranslator
from recordsearch.search.term_storage import SearchTermStorage
from recordsearch.storage.search.base import SearchEngineClient
from recordsearch.storage.search.provider import SearchClientProvider

logger = logging.getLogger(__name__)

UNDEFINED_FIELD_MARKER = "undefined field"


class SearchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass
class SearchOutcome:
    """Result of a search attempt: a page, an empty page, or a failure."""

    status: SearchStatus
    page: Optional[SearchResultPage] = None
    error: Optional[Exception] = None

    def unwrap(self) -> SearchResultPage:
        """Return the page, or raise SearchError for a failed search."""
        if self.status == SearchStatus.FAILED:
            raise SearchError(self.error) from self.error
        return self.page


def is_undefined_field_error(error: Exception) -> bool:
    """True if the engine rejected the query because a field does not exist."""
    return UNDEFINED_FIELD_MARKER in str(error)


def classify_failure(error: Exception, start: int) -> SearchOutcome:
    """Turn a search failure into an EMPTY or FAILED outcome."""
    if is_undefined_field_error(error):
        return SearchOutcome(SearchStatus.EMPTY, page=SearchResultPage(start=start))
    return SearchOutcome(SearchStatus.FAILED, error=error)


class RecordSearcher:
    """
    Searches records of the given types.

    Holds no per-call state, so a single instance can be shared between
    threads.
    """

    def __init__(
        self,
        client: SearchEngineClient,
        term_storage: SearchTermStorage,
        record_decoder: Optional[RecordDecoder] = None,
    ):
        """
        Initialize the searcher.

        Args:
            client: Search engine client to query through
            term_storage: Storage resolving search term definitions
            record_decoder: Converts a stored record JSON string into the
                generic record representation (default: json.loads)
        """
        self.client = client
        self.term_storage = term_storage
        self.query_builder = QueryBuilder(term_storage)
        self.translator = (
            ResultTranslator(record_decoder) if record_decoder else ResultTranslator()
        )

    def search(self, record_types: Sequence[str], spec: SearchSpec) -> SearchResultPage:
        """
        Search for records.

        Raises:
            SearchError: If the search fails for any reason other than an
                undefined field
        """
        return self.try_search(record_types, spec).unwrap()

    def try_search(self, record_types: Sequence[str], spec: SearchSpec) -> SearchOutcome:
        """Search for records, reporting failures as an outcome instead of raising."""
        start = parse_start(spec.start)
        try:
            descriptor = self.query_builder.build(record_types, spec)
            raw_page = self.client.query(descriptor.to_params())
            page = self.translator.translate(raw_page, start)
        except Exception as e:
            outcome = classify_failure(e, start)
            if outcome.status == SearchStatus.EMPTY:
                logger.warning(f"Search referenced an undefined field, returning no matches: {e}")
            else:
                logger.error(f"Search in {list(record_types)} failed: {e}")
            return outcome

        logger.debug(f"Search in {list(record_types)} matched {page.total_matches} records")
        return SearchOutcome(SearchStatus.OK, page=page)

    def health_check(self) -> bool:
        return self.client.health_check()


class RecordSearcherFactory:
    """Creates searchers whose clients are shared per base URL."""

    def __init__(self, client_provider: Optional[SearchClientProvider] = None):
        self.client_provider = client_provider if client_provider is not None else SearchClientProvider()

    def factor(
        self,
        term_storage: SearchTermStorage,
        base_url: Optional[str] = None,
        record_decoder: Optional[RecordDecoder] = None,
    ) -> RecordSearcher:
        """Create a searcher for a base URL (defaults to SOLR_URL)."""
        client = self.client_provider.get_client(base_url or settings.SOLR_URL)
        return RecordSearcher(client, term_storage, record_decoder)
