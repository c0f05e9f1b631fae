"""TF-only cosine similarity and evidence snippets.

Scoring is intentionally simple: raw term frequencies, no IDF and no corpus
statistics, so a score can be explained by looking at the two texts alone.
Everything here is a pure function of its arguments.
"""
from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SNIPPET_RADIUS = 80
MIN_TERM_LENGTH = 3

# ---------------------------
# Tokenizer / vectorizer
# ---------------------------
_non_term = re.compile(r"[^a-z0-9\s]+")
_digits = re.compile(r"\d+")
_ws = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Split ``text`` into normalized terms.

    - lowercases (Unicode-aware)
    - turns anything that is not ``[a-z0-9]`` or whitespace into a separator
    - drops tokens shorter than ``MIN_TERM_LENGTH``
    - drops pure numbers

    Order and duplicates are preserved.
    """
    normalized = _non_term.sub(" ", text.lower())
    tokens: List[str] = []
    for part in normalized.split():
        if len(part) < MIN_TERM_LENGTH:
            continue
        if _digits.fullmatch(part):
            continue
        tokens.append(part)
    return tokens


def vectorize(text: str) -> Dict[str, int]:
    """Term-frequency vector of ``text`` (term -> count, first-seen order)."""
    return dict(Counter(tokenize(text)))


# ---------------------------
# Similarity
# ---------------------------
def cosine_similarity(left_text: str, right_text: str) -> float:
    """Cosine similarity of the TF vectors of two texts, in [0.0, 1.0].

    Returns 0.0 when either side has no usable tokens.
    """
    left = vectorize(left_text)
    right = vectorize(right_text)

    if not left or not right:
        logger.debug("cosine_similarity: empty vector (left=%d, right=%d terms)", len(left), len(right))
        return 0.0

    dot = 0.0
    left_sq = 0.0
    for term, weight in left.items():
        left_sq += weight * weight
        dot += weight * right.get(term, 0)

    right_sq = 0.0
    for weight in right.values():
        right_sq += weight * weight

    # division guard
    if left_sq <= 0.0 or right_sq <= 0.0:
        return 0.0

    # float error can push identical texts past 1.0
    return min(1.0, dot / (math.sqrt(left_sq) * math.sqrt(right_sq)))


# ---------------------------
# Evidence snippets
# ---------------------------
def find_evidence_snippet(text: str, query: str, radius: int = DEFAULT_SNIPPET_RADIUS) -> Optional[str]:
    """Return a whitespace-collapsed window of ``text`` around ``query``.

    The match is case-insensitive and uses the first occurrence; ``radius``
    is a character distance measured before whitespace is collapsed.
    An empty query matches at position 0. Returns None when there is no match.
    """
    # search the original text so offsets stay valid when case mapping changes lengths
    m = re.search(re.escape(query), text, re.IGNORECASE)
    if m is None:
        logger.debug("find_evidence_snippet: no match for %r", query)
        return None

    start = max(0, m.start() - radius)
    length = len(query) + radius * 2
    snippet = text[start:start + max(0, length)]

    return _ws.sub(" ", snippet).strip()
