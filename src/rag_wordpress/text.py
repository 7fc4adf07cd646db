"""Markup cleanup and tokenization."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

# Applied in order after text extraction, for entities left double-encoded
# in WordPress rendered fields.
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&hellip;", "..."),
)

_WHITESPACE_RE = re.compile(r"\s+")
# Word characters are ASCII letters, digits and underscore plus the Cyrillic block.
_NON_WORD_RE = re.compile(r"[^\u0400-\u04FF\w\s]", re.ASCII)

MIN_TOKEN_LENGTH = 3


def clean_markup(raw: str | None) -> str:
    """Strip HTML from ``raw`` and return its visible text on one line.

    ``<script>`` and ``<style>`` elements are removed before extraction;
    nothing is executed.
    """
    if not raw:
        return ""
    soup = BeautifulSoup(raw, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text()
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Lowercase ``text`` and split it into terms of 3+ characters."""
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]
