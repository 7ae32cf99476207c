from typing import Dict, Any, Optional
import httpx

from recordsearch.errors import SearchEngineError
from recordsearch.platform.config import settings
from recordsearch.platform.logging import get_logger
from recordsearch.storage.search.base import SearchEngineClient, RawResultPage

logger = get_logger(__name__)


class SolrClient(SearchEngineClient):
    """Solr implementation of SearchEngineClient using a shared httpx client."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            base_url=self._base_url,
            timeout=timeout if timeout is not None else settings.SOLR_TIMEOUT,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self.client.close()

    def health_check(self) -> bool:
        try:
            resp = self.client.get("/admin/ping", params={"wt": "json"})
            return resp.status_code == 200 and resp.json().get("status") == "OK"
        except Exception as e:
            logger.error("solr_health_check_failed", error=str(e))
            return False

    def add(self, document: Dict[str, Any]) -> None:
        self._update([document])
        logger.debug("solr_document_added", doc_id=document.get("id"))

    def delete_by_id(self, doc_id: str) -> None:
        self._update({"delete": {"id": doc_id}})
        logger.debug("solr_document_deleted", doc_id=doc_id)

    def commit(self) -> None:
        self._update({"commit": {}})
        logger.debug("solr_committed")

    def query(self, params: Dict[str, Any]) -> RawResultPage:
        data = {key: value for key, value in params.items() if value is not None}
        data["wt"] = "json"
        body = self._send("POST", "/select", data=data)
        response = body.get("response", {})
        return RawResultPage(
            num_found=int(response.get("numFound", 0)),
            docs=list(response.get("docs", [])),
        )

    def _update(self, payload: Any) -> Dict[str, Any]:
        return self._send("POST", "/update", json=payload, params={"wt": "json"})

    def _send(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("solr_request_failed", path=path, error=str(e))
            raise SearchEngineError(
                f"Error from server at {self._base_url}: {e}"
            ) from e

        if resp.is_error:
            message = _error_message(resp)
            logger.error("solr_request_rejected", path=path, status=resp.status_code, error=message)
            raise SearchEngineError(
                f"Error from server at {self._base_url}: {message}",
                status_code=resp.status_code,
            )

        body = _json_object(resp)
        if body is None:
            logger.error("solr_reply_unreadable", path=path, status=resp.status_code)
            raise SearchEngineError(
                f"Error from server at {self._base_url}: expected a JSON object, got {resp.text[:200]!r}",
                status_code=resp.status_code,
            )
        return body


def _json_object(resp: httpx.Response) -> Optional[Dict[str, Any]]:
    """Decode a reply body that must be a JSON object, or return None."""
    try:
        body = resp.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _error_message(resp: httpx.Response) -> str:
    """Extract Solr's error.msg from an error reply, or fall back to the body text."""
    error = (_json_object(resp) or {}).get("error")
    if isinstance(error, dict) and error.get("msg"):
        return str(error["msg"])
    return resp.text
