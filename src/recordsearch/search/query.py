"""
Query assembly - turns a search specification into a native Solr query.

Record types become a filter query so they do not affect scoring or the
match count. Each search term becomes a clause on its physical field; a
linked-data term becomes a join through the "ids" field of the linked
record. Clauses are combined with AND in the order the terms were given.
"""

import logging
from typing import Optional, Sequence

from recordsearch.index.document import IDS_FIELD, TYPE_FIELD
from recordsearch.index.field_names import resolve_field_name
from recordsearch.platform.config import settings
from recordsearch.search.models import (
    PagingValue,
    QueryDescriptor,
    SearchSpec,
    SearchTermDefinition,
)
from recordsearch.search.term_storage import SearchTermStorage

logger = logging.getLogger(__name__)

DEFAULT_START = 1
MATCH_ALL = "*:*"


class QueryBuilder:
    """Builds query descriptors using term definitions from storage."""

    def __init__(self, term_storage: SearchTermStorage, default_rows: Optional[int] = None):
        self.term_storage = term_storage
        self.default_rows = default_rows if default_rows is not None else settings.SEARCH_DEFAULT_ROWS

    def build(self, record_types: Sequence[str], spec: SearchSpec) -> QueryDescriptor:
        """
        Build the query for a search.

        Args:
            record_types: Record types to search in
            spec: Paging and search-term values

        Returns:
            Query descriptor with a zero-based offset
        """
        rows = parse_paging_value(spec.rows, self.default_rows, minimum=0)
        start = parse_start(spec.start)
        clauses = [
            self._clause(term_id, value) for term_id, value in spec.search_term_values.items()
        ]
        descriptor = QueryDescriptor(
            query=" AND ".join(clauses) or MATCH_ALL,
            filter_query=type_filter(record_types),
            rows=rows,
            offset=start - 1,
        )
        logger.debug(f"Built query q={descriptor.query!r} fq={descriptor.filter_query!r}")
        return descriptor

    def _clause(self, term_id: str, value: str) -> str:
        definition = self.term_storage.get_search_term(term_id)
        field_name = resolve_field_name(definition.field_name, definition.index_type)
        if definition.linked_data:
            return self._linked_clause(definition, field_name, value)
        return f"{field_name}:({escape_value(value)})"

    def _linked_clause(self, definition: SearchTermDefinition, field_name: str, value: str) -> str:
        # The linked value is sent unescaped, unlike plain clauses.
        join_field = self._join_field(definition.linked_on)
        return (
            f"{{!join from={IDS_FIELD} to={join_field}}}{field_name}:{value}"
            f" AND {TYPE_FIELD}:{definition.linked_record_type}"
        )

    def _join_field(self, linked_on: Optional[str]) -> str:
        if not linked_on:
            raise ValueError("Linked-data search term has no linked-on index term")
        index_term = self.term_storage.get_index_term(linked_on)
        return resolve_field_name(index_term.field_name, index_term.index_type)


def escape_value(value: str) -> str:
    """Backslash-escape ':' so a value cannot qualify a nested field."""
    return value.replace(":", "\\:")


def type_filter(record_types: Sequence[str]) -> str:
    """Filter query matching any of the record types: "type:a OR type:b"."""
    return " OR ".join(f"{TYPE_FIELD}:{record_type}" for record_type in record_types)


def parse_paging_value(value: PagingValue, default: int, minimum: int = 0) -> int:
    """Parse a paging value, falling back to the default if absent or malformed."""
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    # Out-of-range values are treated as malformed: a negative offset or page size is never sent.
    return parsed if parsed >= minimum else default


def parse_start(value: PagingValue) -> int:
    """Parse a 1-based start row, falling back to 1 (also for start < 1)."""
    return parse_paging_value(value, DEFAULT_START, minimum=1)
