"""RecordSearch searching - search specifications to queries and results."""

from .models import (
    IndexTermDefinition,
    QueryDescriptor,
    SearchResultPage,
    SearchSpec,
    SearchTermDefinition,
)
from .term_storage import InMemorySearchTermStorage, SearchTermStorage
from .query import QueryBuilder
from .results import ResultTranslator
from .searcher import RecordSearcher, RecordSearcherFactory, SearchOutcome, SearchStatus

__all__ = [
    "IndexTermDefinition",
    "QueryDescriptor",
    "SearchResultPage",
    "SearchSpec",
    "SearchTermDefinition",
    "SearchTermStorage",
    "InMemorySearchTermStorage",
    "QueryBuilder",
    "ResultTranslator",
    "RecordSearcher",
    "RecordSearcherFactory",
    "SearchOutcome",
    "SearchStatus",
]
