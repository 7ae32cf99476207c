"""
Record Indexer - writes record documents to the search engine.

Documents are added with an explicit commit, or left uncommitted for a
batching caller to commit later. Deletes are always committed immediately.
"""

import logging
from typing import Optional, Sequence

from recordsearch.errors import DeletionError, IndexingError
from recordsearch.index.document import (
    IndexTerm,
    RecordIdentity,
    assemble_document,
    composite_id,
)
from recordsearch.platform.config import settings
from recordsearch.storage.search.base import SearchEngineClient
from recordsearch.storage.search.provider import SearchClientProvider

logger = logging.getLogger(__name__)


class RecordIndexer:
    """
    Indexes and deletes record documents.

    Holds no per-call state, so a single instance can be shared between
    threads.
    """

    def __init__(self, client: SearchEngineClient):
        """
        Initialize the indexer.

        Args:
            client: Search engine client to write through
        """
        self.client = client

    def index_with_explicit_commit(
        self,
        identity: RecordIdentity,
        ids: Sequence[str],
        index_terms: Sequence[IndexTerm],
        record_as_json: str,
    ) -> bool:
        """Index a record and commit immediately."""
        return self.index(identity, ids, index_terms, record_as_json, explicit_commit=True)

    def index_without_explicit_commit(
        self,
        identity: RecordIdentity,
        ids: Sequence[str],
        index_terms: Sequence[IndexTerm],
        record_as_json: str,
    ) -> bool:
        """Index a record and leave the commit to the caller."""
        return self.index(identity, ids, index_terms, record_as_json, explicit_commit=False)

    def index(
        self,
        identity: RecordIdentity,
        ids: Sequence[str],
        index_terms: Sequence[IndexTerm],
        record_as_json: str,
        explicit_commit: bool = True,
    ) -> bool:
        """
        Index a record.

        Args:
            identity: Type and id of the record
            ids: Composite ids the record is known under
            index_terms: Collected index terms
            record_as_json: The serialized record
            explicit_commit: Commit right after the add

        Returns:
            True if a document was written, False if the record had no
            index terms and nothing was sent

        Raises:
            IndexingError: If the add or the commit fails
        """
        document = assemble_document(identity, ids, index_terms, record_as_json)
        if document is None:
            logger.debug(f"No index terms for {identity.composite_id}, skipping")
            return False

        try:
            self.client.add(document.to_dict())
            if explicit_commit:
                self.client.commit()
        except Exception as e:
            logger.error(f"Failed to index {document.id}: {e}")
            raise IndexingError(identity.record_type, identity.record_id, e) from e

        logger.info(
            f"Indexed {document.id}",
            extra={"doc_id": document.id, "committed": explicit_commit},
        )
        return True

    def delete(self, record_type: str, record_id: str) -> None:
        """
        Delete a record's document and commit.

        Raises:
            DeletionError: If the delete or the commit fails
        """
        doc_id = composite_id(record_type, record_id)
        try:
            self.client.delete_by_id(doc_id)
            self.client.commit()
        except Exception as e:
            logger.error(f"Failed to delete {doc_id}: {e}")
            raise DeletionError(record_type, record_id, e) from e

        logger.info(f"Deleted {doc_id} from index", extra={"doc_id": doc_id})


class RecordIndexerFactory:
    """Creates indexers whose clients are shared per base URL."""

    def __init__(self, client_provider: Optional[SearchClientProvider] = None):
        self.client_provider = client_provider if client_provider is not None else SearchClientProvider()

    def factor(self, base_url: Optional[str] = None) -> RecordIndexer:
        """Create an indexer for a base URL (defaults to SOLR_URL)."""
        return RecordIndexer(self.client_provider.get_client(base_url or settings.SOLR_URL))
