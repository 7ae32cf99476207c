"""
Search term storage - resolves search term and index term definitions.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from recordsearch.search.models import IndexTermDefinition, SearchTermDefinition


class SearchTermStorage(ABC):
    """Abstract interface to the storage holding term definitions."""

    @abstractmethod
    def get_search_term(self, term_id: str) -> SearchTermDefinition:
        """
        Get a search term definition.

        Raises:
            KeyError: If no search term has this id
        """
        pass

    @abstractmethod
    def get_index_term(self, term_id: str) -> IndexTermDefinition:
        """
        Get an index term definition.

        Raises:
            KeyError: If no index term has this id
        """
        pass


class InMemorySearchTermStorage(SearchTermStorage):
    """Term storage backed by dictionaries."""

    def __init__(
        self,
        search_terms: Optional[Dict[str, SearchTermDefinition]] = None,
        index_terms: Optional[Dict[str, IndexTermDefinition]] = None,
    ):
        self._search_terms = dict(search_terms or {})
        self._index_terms = dict(index_terms or {})

    def add_search_term(self, term_id: str, definition: SearchTermDefinition) -> None:
        self._search_terms[term_id] = definition

    def add_index_term(self, term_id: str, definition: IndexTermDefinition) -> None:
        self._index_terms[term_id] = definition

    def get_search_term(self, term_id: str) -> SearchTermDefinition:
        try:
            return self._search_terms[term_id]
        except KeyError:
            raise KeyError(f"Search term '{term_id}' not found") from None

    def get_index_term(self, term_id: str) -> IndexTermDefinition:
        try:
            return self._index_terms[term_id]
        except KeyError:
            raise KeyError(f"Index term '{term_id}' not found") from None
