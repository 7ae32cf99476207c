"""
Result translation - raw engine pages to generic search results.
"""

import json
from typing import Any, Callable, Dict

from recordsearch.index.document import RECORD_FIELD
from recordsearch.search.models import SearchResultPage
from recordsearch.storage.search.base import RawResultPage

RecordDecoder = Callable[[str], Any]


class ResultTranslator:
    """Decodes the stored record of every hit, keeping engine order."""

    def __init__(self, record_decoder: RecordDecoder = json.loads):
        self.record_decoder = record_decoder

    def translate(self, page: RawResultPage, start: int) -> SearchResultPage:
        """
        Args:
            page: Raw page returned by the engine
            start: The 1-based start row of the request, echoed in the result
        """
        return SearchResultPage(
            start=start,
            total_matches=page.num_found,
            records=[self._decode(doc) for doc in page.docs],
        )

    def _decode(self, doc: Dict[str, Any]) -> Any:
        stored = doc[RECORD_FIELD]
        # Multi-valued stored fields come back as lists.
        if isinstance(stored, list):
            stored = stored[0]
        return self.record_decoder(stored)
