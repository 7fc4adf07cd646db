"""Answer composition: ranked documents -> answer text with citations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from rag_wordpress import messages
from rag_wordpress.text import clean_markup
from rag_wordpress.types import RankedDocument, Response, Source

logger = logging.getLogger(__name__)


def format_date(value: str | None) -> str:
    """Render an ISO-8601 timestamp in Bulgarian short form, e.g. ``5.03.2024 г.``.

    Missing or unparseable values render as "".
    """
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        logger.debug("Unparseable post date: %r", value)
        return ""
    return f"{parsed.day}.{parsed.month:02d}.{parsed.year} г."


def build_sources(ranked: Sequence[RankedDocument]) -> list[Source]:
    return [
        Source(
            title=clean_markup(r.document.title),
            link=r.document.link or "",
            similarity=r.score,
            date=format_date(r.document.date),
        )
        for r in ranked
    ]


def build_answer(ranked: Sequence[RankedDocument]) -> str:
    """Enumerate each document's title and excerpt under a results banner.

    Titles are wrapped in ``**`` so front ends can render them bold.
    """
    parts = [messages.RESULTS_BANNER.format(count=len(ranked))]
    for i, r in enumerate(ranked, start=1):
        title = clean_markup(r.document.title)
        excerpt = clean_markup(r.document.excerpt)
        parts.append(f"\n**{i}. {title}**")
        parts.append(excerpt or messages.NO_SUMMARY)
    parts.append(messages.SOURCES_FOOTER)
    return "\n".join(parts)


def compose(query: str, ranked: Sequence[RankedDocument]) -> Response:
    """Build the response for ``query`` from its ranked documents."""
    if not ranked:
        return Response(answer=messages.NO_RELEVANT_INFO, sources=[])
    return Response(answer=build_answer(ranked), sources=build_sources(ranked))
