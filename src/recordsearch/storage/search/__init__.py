from .base import SearchEngineClient, RawResultPage
from .solr import SolrClient
from .provider import SearchClientProvider

__all__ = ["SearchEngineClient", "RawResultPage", "SolrClient", "SearchClientProvider"]
