"""
Search engine transport interface for RecordSearch.
"""
from typing import List, Dict, Any
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class RawResultPage:
    num_found: int
    docs: List[Dict[str, Any]] = field(default_factory=list)


class SearchEngineClient(ABC):
    """Abstract interface for document search engine operations."""

    @abstractmethod
    def add(self, document: Dict[str, Any]) -> None:
        """Add or replace a document."""
        pass

    @abstractmethod
    def delete_by_id(self, doc_id: str) -> None:
        """Delete a document by its primary key."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Make pending writes visible to queries."""
        pass

    @abstractmethod
    def query(self, params: Dict[str, Any]) -> RawResultPage:
        """
        Run a query.

        Args:
            params: Engine query parameters (q, fq, rows, start)

        Raises:
            SearchEngineError: If the engine rejects the query
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if reachable."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close connection."""
        pass
