# textsim/api.py
"""FastAPI wrapper around the text similarity functions."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .similarity import cosine_similarity, find_evidence_snippet

from .schemas import (
    SimilarityRequest, SimilarityResponse,
    SnippetRequest, SnippetResponse,
)

logger = logging.getLogger(__name__)


app = FastAPI(title="Text Similarity API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {"ok": True}

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.post("/similarity", response_model=SimilarityResponse)
def similarity(request: SimilarityRequest) -> SimilarityResponse:
    score = cosine_similarity(request.left_text, request.right_text)
    if request.round_digits is not None:
        score = round(score, request.round_digits)
    logger.info("similarity: score=%s", score)
    return SimilarityResponse(score=score)

@app.post("/snippet", response_model=SnippetResponse)
def snippet(request: SnippetRequest) -> SnippetResponse:
    found = find_evidence_snippet(request.text, request.query, request.radius)
    if found is None:
        logger.debug("snippet: %r not found", request.query)
        return SnippetResponse(found=False, snippet=None)
    return SnippetResponse(found=True, snippet=found)
