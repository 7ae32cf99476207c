import pytest

from recordsearch.index.field_names import IndexType, resolve_field_name, suffix_for


@pytest.mark.parametrize(
    "index_type,expected",
    [
        (IndexType.STRING, "title_s"),
        (IndexType.ID, "title_s"),
        (IndexType.BOOLEAN, "title_b"),
        (IndexType.DATE, "title_dt"),
        (IndexType.NUMBER, "title_l"),
        (IndexType.TEXT, "title_t"),
    ],
)
def test_resolve_field_name_suffixes(index_type, expected):
    assert resolve_field_name("title", index_type) == expected


def test_record_model_type_names_are_accepted():
    assert resolve_field_name("published", "indexTypeDate") == "published_dt"
    assert resolve_field_name("count", "NUMBER") == "count_l"


def test_unknown_type_falls_back_to_text():
    assert suffix_for("indexTypeGeoPoint") == "_t"
    assert suffix_for(None) == "_t"
    assert IndexType.parse("somethingElse") is IndexType.TEXT
