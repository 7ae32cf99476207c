"""
Unit tests for query assembly.
"""

import pytest

from recordsearch.search.models import SearchSpec
from recordsearch.search.query import (
    QueryBuilder,
    escape_value,
    parse_paging_value,
    parse_start,
    type_filter,
)


@pytest.fixture
def builder(term_storage):
    return QueryBuilder(term_storage, default_rows=100)


def test_defaults_when_paging_unset(builder):
    descriptor = builder.build(["book"], SearchSpec({"titleSearchTerm": "Dune"}))

    assert descriptor.rows == 100
    assert descriptor.offset == 0


def test_start_is_translated_to_zero_based_offset(builder):
    descriptor = builder.build(["book"], SearchSpec({"titleSearchTerm": "Dune"}, rows="10", start="21"))

    assert descriptor.rows == 10
    assert descriptor.offset == 20


def test_malformed_paging_falls_back_to_defaults(builder):
    descriptor = builder.build(
        ["book"], SearchSpec({"titleSearchTerm": "Dune"}, rows="many", start="not a number")
    )

    assert descriptor.rows == 100
    assert descriptor.offset == 0


def test_plain_term_query(builder):
    descriptor = builder.build(["book"], SearchSpec({"titleSearchTerm": "A title"}))

    assert descriptor.query == "title_s:(A title)"


def test_colon_in_plain_value_is_escaped(builder):
    descriptor = builder.build(["book"], SearchSpec({"titleSearchTerm": "a:b"}))

    assert descriptor.query == "title_s:(a\\:b)"


def test_linked_term_builds_join_query(builder):
    descriptor = builder.build(["book"], SearchSpec({"authorNameSearchTerm": "Herbert"}))

    assert descriptor.query == "{!join from=ids to=authorId_s}name_t:Herbert AND type:person"


def test_terms_are_combined_with_and_in_order(builder):
    spec = SearchSpec({"yearSearchTerm": "1965", "titleSearchTerm": "Dune"})

    descriptor = builder.build(["book"], spec)

    assert descriptor.query == "year_l:(1965) AND title_s:(Dune)"


def test_record_types_go_to_filter_query(builder):
    descriptor = builder.build(["book", "magazine"], SearchSpec({"titleSearchTerm": "Dune"}))

    assert descriptor.filter_query == "type:book OR type:magazine"
    assert "type:" not in descriptor.query


def test_no_terms_matches_all(builder):
    descriptor = builder.build(["book"], SearchSpec())

    assert descriptor.query == "*:*"


def test_unknown_search_term_raises(builder):
    with pytest.raises(KeyError):
        builder.build(["book"], SearchSpec({"missingSearchTerm": "x"}))


def test_to_params(builder):
    params = builder.build(["book"], SearchSpec({"titleSearchTerm": "Dune"}, rows=5, start=3)).to_params()

    assert params == {"q": "title_s:(Dune)", "fq": "type:book", "rows": 5, "start": 2}


def test_to_params_omits_empty_filter(builder):
    params = builder.build([], SearchSpec({"titleSearchTerm": "Dune"})).to_params()

    assert params["fq"] is None


def test_helpers():
    assert escape_value("a:b:c") == "a\\:b\\:c"
    assert type_filter(["a"]) == "type:a"
    assert type_filter([]) == ""
    assert parse_paging_value(" 7 ", 100) == 7
    assert parse_paging_value(-1, 100) == 100
    assert parse_start("0") == 1
    assert parse_start(None) == 1
