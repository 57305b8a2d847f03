"""Pydantic contracts for AI provider payloads."""

from models.schemas.ai_analysis import AIAnalysis, AtsBreakdown, AtsScore, KeywordAnalysis

__all__ = [
    "AIAnalysis",
    "AtsBreakdown",
    "AtsScore",
    "KeywordAnalysis",
]
