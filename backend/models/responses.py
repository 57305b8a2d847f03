from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Priority = Literal["high", "medium", "low"]
InsightStatus = Literal["excellent", "good", "needs-work"]


class ScoreBreakdown(BaseModel):
    keyword_match: int = 0
    format: int = 0
    structure: int = 0
    contact: int = 0
    measurable_results: int = 0


class Scores(BaseModel):
    overall: int = 0
    keyword_match: int = 0
    breakdown: ScoreBreakdown = ScoreBreakdown()


class KeywordSummary(BaseModel):
    matched: list[str] = []
    missing: list[str] = []  # display list, capped
    total: int = 0


class Recommendation(BaseModel):
    priority: Priority
    category: str
    title: str
    description: str
    impact: str = ""
    example: str | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _lower_priority(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Insight(BaseModel):
    label: str
    value: str
    description: str
    status: InsightStatus


class SectionFlags(BaseModel):
    experience: bool = False
    education: bool = False
    skills: bool = False
    summary: bool = False


class ResumeMetadata(BaseModel):
    has_email: bool = False
    has_phone: bool = False
    has_linkedin: bool = False
    has_github: bool = False
    has_sections: SectionFlags = SectionFlags()
    word_count: int = 0
    has_years: bool = False
    has_bullet_points: bool = False
    estimated_sections: int = 0


class AISuggestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggestion_type: str = Field("", alias="type")
    original: str = ""
    improved: str = ""
    explanation: str = ""


class AnalysisResult(BaseModel):
    scores: Scores = Scores()
    keywords: KeywordSummary = KeywordSummary()
    recommendations: list[Recommendation] = []
    insights: list[Insight] = []
    metadata: ResumeMetadata = ResumeMetadata()
    analysis_type: Literal["traditional", "hybrid"] = "traditional"
    ai_enhanced: bool = False
    strengths: list[str] = []
    weaknesses: list[str] = []
    ai_suggestions: list[AISuggestion] = []
    # Why AI enhancement was skipped or failed, when it was requested
    ai_error: str | None = None


class EnhancedBullet(BaseModel):
    original: str = ""
    enhanced: str = ""
    keywords_added: list[str] = []


class SummaryResponse(BaseModel):
    summary: str


class CareerAdviceResponse(BaseModel):
    advice: str
