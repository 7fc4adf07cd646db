"""TF-IDF vectors and cosine similarity."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from rag_wordpress.text import tokenize


@dataclass
class TfIdfResult:
    """Vectors for one corpus, aligned to ``vocabulary``."""

    vectors: list[np.ndarray]
    vocabulary: list[str]
    idf: np.ndarray


def build_vectors(corpus: Sequence[str]) -> TfIdfResult:
    """Vectorize every text of ``corpus`` against a shared vocabulary.

    idf(term) = ln(N / (1 + df(term))), where N is the corpus size and df the
    number of texts containing the term. A term present in every text gets a
    negative weight.

    tf(term, text) = occurrences / number of tokens in the text.
    """
    tokenized = [tokenize(text) for text in corpus]
    counts = [Counter(tokens) for tokens in tokenized]

    # First-occurrence order keeps the layout stable for a given corpus.
    vocabulary = list(dict.fromkeys(t for tokens in tokenized for t in tokens))
    position = {term: i for i, term in enumerate(vocabulary)}

    doc_freq = np.zeros(len(vocabulary))
    for counter in counts:
        for term in counter:
            doc_freq[position[term]] += 1
    idf = np.log(len(corpus) / (1.0 + doc_freq))

    vectors = []
    for tokens, counter in zip(tokenized, counts):
        vector = np.zeros(len(vocabulary))
        for term, n in counter.items():
            i = position[term]
            vector[i] = n / len(tokens) * idf[i]
        vectors.append(vector)

    return TfIdfResult(vectors=vectors, vocabulary=vocabulary, idf=idf)


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine of the angle between ``a`` and ``b``; 0.0 if either is all zeros."""
    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))
