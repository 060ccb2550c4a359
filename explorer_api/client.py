"""Explorer API client.

This module defines a small client wrapper around the Explorer REST
API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`health` – liveness check.
* :meth:`list_highlights`, :meth:`list_sources`, :meth:`list_trending`
  – full collections.
* :meth:`list_news`, :meth:`list_images` – paginated, filterable lists.
* :meth:`get_article` – a single article with its like count.
* :meth:`search` – unified search over articles and images.
* :meth:`like`, :meth:`send_feedback`, :meth:`create_article` – writes.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for the
list helpers) and ``error`` is a dictionary with keys ``status_code``
and ``message``.  The message is the ``error`` field of the server's
JSON reply when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


class ExplorerAPI:
    """Client for interacting with the Explorer API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
            api_prefix: Path under which the API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/news``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                message = err_json.get("error") or err_json.get("detail") or str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    def _items(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data or {}).get("items", []), None

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def health(self) -> Result:
        return self._request("GET", "/health")

    def list_highlights(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._items("/highlights")

    def list_sources(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._items("/sources")

    def list_trending(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._items("/trending")

    def list_news(
        self,
        q: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        source: Optional[str] = None,
    ) -> Result:
        """Retrieve one page of articles.

        Returns:
            A tuple ``(page, error)`` where ``page`` is the pagination
            envelope (``page``, ``limit``, ``total``, ``pages``, ``data``).
        """
        return self._request("GET", "/news", params={"q": q, "page": page, "limit": limit, "source": source})

    def get_article(self, article_id: str) -> Result:
        """Retrieve a single article with its ``likes`` count."""
        return self._request("GET", f"/news/{article_id}")

    def list_images(self, q: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None) -> Result:
        return self._request("GET", "/images", params={"q": q, "page": page, "limit": limit})

    def search(self, q: str, page: Optional[int] = None, limit: Optional[int] = None) -> Result:
        """Search articles and images; each hit carries ``type``."""
        return self._request("GET", "/search", params={"q": q, "page": page, "limit": limit})

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def like(self, kind: str, entity_id: str) -> Result:
        """Like an ``article`` or an ``image``; returns the new count."""
        return self._request("POST", "/like", json_body={"type": kind, "id": entity_id})

    def send_feedback(self, message: str, context: Optional[Dict[str, Any]] = None) -> Result:
        return self._request("POST", "/feedback", json_body={"message": message, "context": context})

    def create_article(
        self,
        title: str,
        url: str,
        *,
        summary: Optional[str] = None,
        image: Optional[str] = None,
        source_id: Optional[str] = None,
    ) -> Result:
        """Publish an article through the admin endpoint.

        Returns:
            A tuple ``(article, error)`` with the created article.
        """
        payload = {"title": title, "url": url, "summary": summary, "image": image, "sourceId": source_id}
        data, error = self._request("POST", "/admin/news", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("created"), None
