"""RecordSearch indexing - index terms to search documents."""

from .field_names import IndexType, resolve_field_name
from .document import IndexTerm, OutputDocument, RecordIdentity, assemble_document, composite_id
from .collected import index_terms_from_collected_data
from .indexer import RecordIndexer, RecordIndexerFactory

__all__ = [
    "IndexType",
    "resolve_field_name",
    "IndexTerm",
    "OutputDocument",
    "RecordIdentity",
    "assemble_document",
    "composite_id",
    "index_terms_from_collected_data",
    "RecordIndexer",
    "RecordIndexerFactory",
]
