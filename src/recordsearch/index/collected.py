"""
Conversion of collected record data into index terms.

Term collection happens upstream and hands over a plain mapping:

    {
        "index": [
            {"indexFieldName": "title", "indexType": "indexTypeString", "value": "Dune"},
            ...
        ]
    }
"""

from typing import Any, List, Mapping

from recordsearch.index.document import IndexTerm
from recordsearch.index.field_names import IndexType

INDEX_KEY = "index"


def index_terms_from_collected_data(collected_data: Mapping[str, Any]) -> List[IndexTerm]:
    """Build index terms from collected data, keeping their order."""
    terms = []
    for entry in collected_data.get(INDEX_KEY) or []:
        terms.append(
            IndexTerm(
                field_name=entry["indexFieldName"],
                value=str(entry["value"]),
                index_type=IndexType.parse(entry.get("indexType")),
            )
        )
    return terms
