"""
Error types raised by RecordSearch.

Every failure surfaced to callers derives from RecordSearchError. Transport
failures arrive as SearchEngineError and are wrapped by the gateways into
IndexingError, DeletionError or SearchError.
"""

from typing import Optional


class RecordSearchError(Exception):
    """Base class for all RecordSearch errors."""


class SearchEngineError(RecordSearchError):
    """The search engine rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class _RecordError(RecordSearchError):
    """Failure tied to a single record identified by type and id."""

    action = "processing"

    def __init__(self, record_type: str, record_id: str, cause: Exception):
        super().__init__(
            f"Error while {self.action} record with type: {record_type} "
            f"and id: {record_id} {cause}"
        )
        self.record_type = record_type
        self.record_id = record_id
        self.cause = cause


class IndexingError(_RecordError):
    """Adding a document or committing it failed."""

    action = "indexing"


class DeletionError(_RecordError):
    """Deleting a document or its mandatory commit failed."""

    action = "deleting index for"


class SearchError(RecordSearchError):
    """A query failed for a reason other than an undefined field."""

    def __init__(self, cause: Exception):
        super().__init__(f"Error searching for records: {cause}")
        self.cause = cause
