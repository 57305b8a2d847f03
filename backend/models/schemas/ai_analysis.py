"""Structured output of the Claude resume analysis call.

Field aliases follow the camelCase JSON schema the prompt asks for, so a
parsed response can be validated directly with ``AIAnalysis.model_validate``.
"""

from pydantic import BaseModel, ConfigDict, Field

from models.responses import AISuggestion, Recommendation


class KeywordAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    matched: list[str] = []
    missing: list[str] = []
    relevance_score: float | None = Field(None, alias="relevanceScore")


class AtsBreakdown(BaseModel):
    formatting: float | None = None
    keywords: float | None = None
    structure: float | None = None
    contact: float | None = None


class AtsScore(BaseModel):
    overall: float | None = None
    breakdown: AtsBreakdown | None = None


class AIAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    keyword_analysis: KeywordAnalysis = Field(
        default_factory=KeywordAnalysis, alias="keywordAnalysis"
    )
    ats_score: AtsScore = Field(default_factory=AtsScore, alias="atsScore")
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[Recommendation] = []
    ai_enhanced_suggestions: list[AISuggestion] = Field(
        default_factory=list, alias="aiEnhancedSuggestions"
    )
