"""Pipeline orchestration: cache -> validate -> search -> rank -> compose -> cache.

Pure logic layer: no CLI dependency. Front ends receive a ``QueryPipeline``
at construction time and call ``process_query``.
"""

from __future__ import annotations

import asyncio
import logging
import time

from rag_wordpress import messages
from rag_wordpress.cache import QueryCache
from rag_wordpress.client import PostSearchClient
from rag_wordpress.composer import compose
from rag_wordpress.config import Settings
from rag_wordpress.ranker import Ranker
from rag_wordpress.types import Response

logger = logging.getLogger(__name__)


class QueryPipeline:
    """Answers questions from the posts of one WordPress site."""

    def __init__(
        self,
        client: PostSearchClient,
        ranker: Ranker | None = None,
        cache: QueryCache | None = None,
        min_query_length: int = 3,
    ) -> None:
        self._client = client
        self._ranker = ranker or Ranker()
        self._cache = cache if cache is not None else QueryCache()
        self._min_query_length = min_query_length

    @property
    def cache(self) -> QueryCache:
        return self._cache

    async def process_query(self, question: str) -> Response:
        """Answer ``question``. Never raises.

        Args:
            question: Raw question text. Used verbatim as the cache key.

        Returns:
            Response with the answer text and its sources. Failure paths
            return a fixed message with no sources.
        """
        started = time.perf_counter()
        response = await self._process(question)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Query processed in %.0fms", elapsed_ms)
        return response

    async def _process(self, question: str) -> Response:
        cached = self._cache.get(question)
        if cached is not None:
            logger.info("Returning cached response for %r", question)
            return cached

        if not question or len(question.strip()) < self._min_query_length:
            return Response(answer=messages.QUERY_TOO_SHORT, sources=[])

        try:
            logger.info("Searching posts for %r", question)
            documents = await self._client.fetch_candidates(question)
            if not documents:
                return Response(answer=messages.NO_MATCHING_POSTS, sources=[])

            logger.info("Found %d candidate posts, ranking", len(documents))
            ranked = self._ranker.rank(question, documents)
            response = compose(question, ranked)
        except Exception:
            logger.exception("Failed to process query %r", question)
            return Response(answer=messages.TECHNICAL_ERROR, sources=[])

        self._cache.put(question, response)
        logger.info("Found %d relevant posts", len(ranked))
        return response


def create_default_pipeline(settings: Settings | None = None) -> QueryPipeline:
    """Wire a pipeline from ``settings`` (defaults when omitted)."""
    settings = settings or Settings()
    client = PostSearchClient(
        site_url=settings.site_url,
        relay_url=settings.relay_url,
        per_page=settings.per_page,
        timeout=settings.request_timeout,
    )
    ranker = Ranker(top_k=settings.top_k, min_similarity=settings.min_similarity)
    cache = QueryCache(ttl_seconds=settings.cache_ttl_seconds)
    return QueryPipeline(
        client=client,
        ranker=ranker,
        cache=cache,
        min_query_length=settings.min_query_length,
    )


def ask_question(question: str, pipeline: QueryPipeline | None = None) -> Response:
    """Synchronous entry point for a single question."""
    pipeline = pipeline or create_default_pipeline()
    return asyncio.run(pipeline.process_query(question))
