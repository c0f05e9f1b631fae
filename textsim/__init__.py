"""Term-frequency text similarity and evidence snippets."""
from .similarity import (
    DEFAULT_SNIPPET_RADIUS,
    cosine_similarity,
    find_evidence_snippet,
    tokenize,
    vectorize,
)

__all__ = [
    "DEFAULT_SNIPPET_RADIUS",
    "cosine_similarity",
    "find_evidence_snippet",
    "tokenize",
    "vectorize",
]
