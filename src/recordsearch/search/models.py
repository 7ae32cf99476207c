"""
Search request, definition and result types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from recordsearch.index.field_names import IndexType

# Paging values arrive as text from the record model and are parsed leniently.
PagingValue = Union[int, str, None]


@dataclass(frozen=True)
class SearchSpec:
    """An abstract search: paging plus named search-term values in order."""

    search_term_values: Dict[str, str] = field(default_factory=dict)
    rows: PagingValue = None
    start: PagingValue = None


@dataclass(frozen=True)
class IndexTermDefinition:
    """Stored definition of an index term: logical field name and type."""

    field_name: str
    index_type: IndexType = IndexType.TEXT


@dataclass(frozen=True)
class SearchTermDefinition:
    """
    Stored definition of a search term.

    A linked-data term matches on a different record type: linked_on names
    the index term on the searched record that holds the linked record's id,
    and linked_record_type is the type of the record the value must match on.
    """

    field_name: str
    index_type: IndexType = IndexType.TEXT
    linked_data: bool = False
    linked_on: Optional[str] = None
    linked_record_type: Optional[str] = None


@dataclass(frozen=True)
class QueryDescriptor:
    """Native query built for a single search call."""

    query: str
    filter_query: str
    rows: int
    offset: int

    def to_params(self) -> Dict[str, Any]:
        return {
            "q": self.query,
            "fq": self.filter_query or None,
            "rows": self.rows,
            "start": self.offset,
        }


@dataclass
class SearchResultPage:
    """A page of search results in the generic record representation."""

    start: int
    total_matches: int = 0
    records: List[Any] = field(default_factory=list)
