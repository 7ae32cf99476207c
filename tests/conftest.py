"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import MagicMock

sys.path.append(os.path.join(os.getcwd(), "src"))

from recordsearch.index.field_names import IndexType
from recordsearch.search.models import IndexTermDefinition, SearchTermDefinition
from recordsearch.search.term_storage import InMemorySearchTermStorage
from recordsearch.storage.search.base import SearchEngineClient, RawResultPage


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up test environment variables."""
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("SOLR_URL", "http://localhost:8983/solr/test")


@pytest.fixture
def mock_client():
    """Create a mock search engine client returning an empty page."""
    client = MagicMock(spec=SearchEngineClient)
    client.query.return_value = RawResultPage(num_found=0, docs=[])
    return client


@pytest.fixture
def term_storage():
    """Term storage with a plain title term and a linked author-name term."""
    return InMemorySearchTermStorage(
        search_terms={
            "titleSearchTerm": SearchTermDefinition("title", IndexType.STRING),
            "yearSearchTerm": SearchTermDefinition("year", IndexType.NUMBER),
            "authorNameSearchTerm": SearchTermDefinition(
                "name",
                IndexType.TEXT,
                linked_data=True,
                linked_on="authorIdIndexTerm",
                linked_record_type="person",
            ),
        },
        index_terms={
            "authorIdIndexTerm": IndexTermDefinition("authorId", IndexType.ID),
        },
    )
