"""API request/response models."""
from typing import List, Tuple
from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    """Text statistics as returned by the analyze endpoint."""
    wordCount: int = Field(..., ge=0)
    charCount: int = Field(..., ge=0)
    charCountWithoutSpaces: int = Field(..., ge=0)
    sentenceCount: int = Field(..., ge=0)
    avgWordLength: float = Field(..., ge=0)


class AnalyzeResponse(BaseModel):
    """Successful response of POST /api/analyze."""
    stats: StatsResponse
    wordFrequency: List[Tuple[str, int]]


class ErrorResponse(BaseModel):
    """Error body returned for rejected uploads and processing failures."""
    error: str
