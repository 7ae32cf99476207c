"""
Search document assembly.

Builds the Solr input document for one record from its identity, the
composite ids it is known under, its collected index terms and the
serialized record.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from recordsearch.index.field_names import IndexType, resolve_field_name

ID_FIELD = "id"
TYPE_FIELD = "type"
IDS_FIELD = "ids"
RECORD_FIELD = "recordAsJson"


@dataclass(frozen=True)
class IndexTerm:
    """A single named, typed value collected from a record for indexing."""

    field_name: str
    value: str
    index_type: IndexType = IndexType.TEXT


@dataclass(frozen=True)
class RecordIdentity:
    """Type and id of a record."""

    record_type: str
    record_id: str

    @property
    def composite_id(self) -> str:
        return composite_id(self.record_type, self.record_id)


def composite_id(record_type: str, record_id: str) -> str:
    """Document primary key for a record: "<type>_<id>"."""
    return f"{record_type}_{record_id}"


@dataclass
class OutputDocument:
    """Search document built for a single indexing call."""

    id: str
    type: str
    ids: List[str] = field(default_factory=list)
    fields: Dict[str, List[str]] = field(default_factory=dict)
    record_as_json: str = ""

    def add_field(self, name: str, value: str) -> None:
        """Append a value to a (possibly multi-valued) field."""
        self.fields.setdefault(name, []).append(value)

    def to_dict(self) -> Dict[str, object]:
        """Render the document in the engine's JSON update format."""
        document: Dict[str, object] = {
            ID_FIELD: self.id,
            TYPE_FIELD: self.type,
            IDS_FIELD: list(self.ids),
        }
        for name, values in self.fields.items():
            document[name] = list(values)
        document[RECORD_FIELD] = self.record_as_json
        return document


def assemble_document(
    identity: RecordIdentity,
    alternate_ids: Sequence[str],
    index_terms: Sequence[IndexTerm],
    record_as_json: str,
) -> Optional[OutputDocument]:
    """
    Build the search document for a record.

    Args:
        identity: Type and id of the record
        alternate_ids: Composite ids to store in the repeated "ids" field,
            including the canonical one, in the order given
        index_terms: Collected index terms; terms sharing a field name become
            one multi-valued field in supplied order
        record_as_json: The serialized record, stored verbatim

    Returns:
        The document, or None when there are no index terms and nothing
        should be indexed
    """
    if not index_terms:
        return None

    document = OutputDocument(
        id=identity.composite_id,
        type=identity.record_type,
        ids=list(alternate_ids),
        record_as_json=record_as_json,
    )
    for term in index_terms:
        document.add_field(resolve_field_name(term.field_name, term.index_type), term.value)
    return document
