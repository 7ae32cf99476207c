"""
RecordSearch - Search-engine translation layer for generic records

This package translates between a schema-agnostic record model and a
document-oriented search engine (Solr):
- index: Index terms to search documents (field naming, assembly, indexing)
- search: Search specifications to native queries and back (query assembly,
  result translation, error classification)
- storage: Search engine transport and connection caching
- platform: Cross-cutting concerns (configuration, logging)
"""

__version__ = "0.1.0"
