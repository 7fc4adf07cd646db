"""Relevance ranking of candidate documents against a query."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rag_wordpress.text import clean_markup
from rag_wordpress.types import Document, RankedDocument
from rag_wordpress.vectorizer import build_vectors, cosine_similarity

logger = logging.getLogger(__name__)


class Ranker:
    """Scores documents by TF-IDF cosine similarity to the query."""

    def __init__(self, top_k: int = 5, min_similarity: float = 0.01) -> None:
        self._top_k = top_k
        self._min_similarity = min_similarity

    def rank(
        self,
        query: str,
        documents: Sequence[Document],
        top_k: int | None = None,
    ) -> list[RankedDocument]:
        """Return the ``top_k`` documents most similar to ``query``.

        The query is vectorized together with the documents so its terms
        count towards document frequency. Documents scoring at or below
        ``min_similarity`` are dropped; equal scores keep their input order.
        Any failure while scoring yields an empty list.
        """
        if not documents:
            return []
        k = top_k if top_k is not None else self._top_k

        try:
            texts = [
                f"{clean_markup(doc.title)} {clean_markup(doc.content)}"
                for doc in documents
            ]
            vectors = build_vectors([*texts, query]).vectors
            query_vector = vectors.pop()

            ranked = [
                RankedDocument(
                    document=doc,
                    score=cosine_similarity(query_vector, vector),
                    index=i,
                )
                for i, (doc, vector) in enumerate(zip(documents, vectors))
            ]
        except Exception:
            logger.exception("Ranking failed for query %r", query)
            return []

        ranked.sort(key=lambda r: r.score, reverse=True)
        return [r for r in ranked if r.score > self._min_similarity][:k]
