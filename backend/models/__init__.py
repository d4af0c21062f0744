"""Data models for PDF Text Analyzer."""
from .analysis import TextStats, AnalysisResult, WordFrequency
from .api import StatsResponse, AnalyzeResponse, ErrorResponse

__all__ = [
    "TextStats",
    "AnalysisResult",
    "WordFrequency",
    "StatsResponse",
    "AnalyzeResponse",
    "ErrorResponse",
]
