# textsim/schemas.py
from typing import Optional
from pydantic import BaseModel, Field

from .similarity import DEFAULT_SNIPPET_RADIUS

class SimilarityRequest(BaseModel):
    left_text: str = Field(..., description="First text, e.g. resume text")
    right_text: str = Field(..., description="Second text, e.g. job description text")
    # library never rounds; only round when asked
    round_digits: Optional[int] = Field(None, ge=0, le=15)

class SimilarityResponse(BaseModel):
    score: float                  # 0.0 .. 1.0

class SnippetRequest(BaseModel):
    text: str
    query: str
    radius: int = DEFAULT_SNIPPET_RADIUS   # characters, <= 0 allowed

class SnippetResponse(BaseModel):
    found: bool
    snippet: Optional[str] = None
