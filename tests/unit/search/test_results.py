import json

from recordsearch.search.results import ResultTranslator
from recordsearch.storage.search.base import RawResultPage


def test_translate_decodes_records_in_engine_order():
    page = RawResultPage(
        num_found=57,
        docs=[
            {"id": "book_2", "recordAsJson": json.dumps({"name": "book", "id": "2"})},
            {"id": "book_1", "recordAsJson": [json.dumps({"name": "book", "id": "1"})]},
        ],
    )

    result = ResultTranslator().translate(page, start=11)

    assert result.start == 11
    assert result.total_matches == 57
    assert result.records == [{"name": "book", "id": "2"}, {"name": "book", "id": "1"}]


def test_translate_uses_record_decoder():
    page = RawResultPage(num_found=1, docs=[{"recordAsJson": "payload"}])

    result = ResultTranslator(record_decoder=str.upper).translate(page, start=1)

    assert result.records == ["PAYLOAD"]
