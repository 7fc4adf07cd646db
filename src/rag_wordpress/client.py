"""WordPress REST API search client.

Searches published posts through ``/wp-json/wp/v2/posts``. When the direct
request fails at the network level, the same request is retried once through
a public CORS relay (allorigins-style ``{"contents": "<json>"}`` envelope).
API docs: https://developer.wordpress.org/rest-api/reference/posts/
"""

from __future__ import annotations

import json
import logging

import httpx

from rag_wordpress.types import Document

logger = logging.getLogger(__name__)

_POSTS_PATH = "/wp-json/wp/v2/posts"
_FIELDS = "id,title,content,link,excerpt,date"


class SearchAPIError(RuntimeError):
    """The posts endpoint answered with a non-200 status."""


class RelayUnavailableError(RuntimeError):
    """The relay produced no usable payload."""


async def _http_get(url: str, params: dict, timeout: float) -> httpx.Response:
    """HTTP GET request. Kept separate so tests can mock it."""
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await client.get(url, params=params)


class PostSearchClient:
    """Fetches candidate documents for a query from a WordPress site."""

    def __init__(
        self,
        site_url: str = "https://postvai.com",
        relay_url: str = "https://api.allorigins.win/get",
        per_page: int = 20,
        timeout: float = 10.0,
    ) -> None:
        self._posts_url = site_url.rstrip("/") + _POSTS_PATH
        self._relay_url = relay_url
        self._per_page = per_page
        self._timeout = timeout

    @property
    def posts_url(self) -> str:
        return self._posts_url

    def search_params(self, query: str) -> dict[str, str | int]:
        return {
            "search": query,
            "per_page": self._per_page,
            "_fields": _FIELDS,
            "status": "publish",
        }

    async def fetch_candidates(self, query: str) -> list[Document]:
        """Search published posts matching ``query``.

        Args:
            query: Free-text search string, passed to WordPress as-is.

        Returns:
            Up to ``per_page`` documents. An empty list when nothing matched
            or when the relay fallback could not deliver a payload.

        Raises:
            ValueError: If query is empty.
            SearchAPIError: If the posts endpoint returns a non-200 status.
        """
        if not query.strip():
            raise ValueError("query must not be empty")

        params = self.search_params(query)
        try:
            logger.debug("GET %s search=%r", self._posts_url, query)
            response = await _http_get(self._posts_url, params, self._timeout)
        except httpx.TransportError as e:
            logger.warning("Direct search failed (%s), retrying through relay", e)
            try:
                posts = await self._fetch_via_relay(params)
            except RelayUnavailableError as relay_error:
                logger.warning("Relay search failed: %s", relay_error)
                return []
            return _parse_posts(posts)

        if response.status_code != 200:
            raise SearchAPIError(
                f"WordPress search API error: status {response.status_code}"
            )
        return _parse_posts(response.json())

    async def _fetch_via_relay(self, params: dict) -> list:
        """Run the search through the relay and unwrap its envelope."""
        target = str(httpx.URL(self._posts_url, params=params))
        logger.debug("GET %s url=%s", self._relay_url, target)
        try:
            response = await _http_get(self._relay_url, {"url": target}, self._timeout)
            envelope = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise RelayUnavailableError(f"relay request failed: {e}") from e

        contents = envelope.get("contents") if isinstance(envelope, dict) else None
        if not contents:
            raise RelayUnavailableError("empty response from relay")
        try:
            posts = json.loads(contents)
        except (TypeError, ValueError) as e:
            raise RelayUnavailableError(f"unparseable relay payload: {e}") from e
        if not isinstance(posts, list):
            raise RelayUnavailableError("relay payload is not a list of posts")
        return posts


def _parse_posts(posts: object) -> list[Document]:
    """Convert a JSON array of post objects into Documents."""
    if not isinstance(posts, list):
        raise SearchAPIError("WordPress search API returned a non-list payload")
    documents = []
    for post in posts:
        if not isinstance(post, dict):
            logger.warning("Skipping malformed post entry: %r", post)
            continue
        documents.append(Document.from_post(post))
    return documents
