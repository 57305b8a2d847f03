"""Combine heuristic and Claude analyses into one result.

AI values win field by field where present; everything the AI does not
provide falls back to the heuristic value. Insights and metadata always
come from the heuristic analysis.
"""

from models.responses import AnalysisResult, ScoreBreakdown, Scores
from models.schemas import AIAnalysis, AtsBreakdown
from services.ats_scorer import round_half_up


def _score(value: float | None, fallback: int) -> int:
    """AI score rounded and clamped to 0-100, or the fallback when missing.

    Only a missing (None) value falls back; an AI score of 0 is kept.
    """
    if value is None:
        return fallback
    return min(100, max(0, round_half_up(value)))


def _union(primary: list[str], extra: list[str]) -> list[str]:
    """Deduplicated union keeping primary order, then new items from extra."""
    seen: set[str] = set()
    merged = []
    for term in [*primary, *extra]:
        if term not in seen:
            seen.add(term)
            merged.append(term)
    return merged


def _merge_breakdown(local: ScoreBreakdown, ai: AtsBreakdown | None) -> ScoreBreakdown:
    if ai is None:
        return local
    return ScoreBreakdown(
        keyword_match=_score(ai.keywords, local.keyword_match),
        format=_score(ai.formatting, local.format),
        structure=_score(ai.structure, local.structure),
        contact=_score(ai.contact, local.contact),
        measurable_results=local.measurable_results,
    )


def merge_analyses(
    traditional: AnalysisResult, ai: AIAnalysis | None
) -> AnalysisResult:
    if ai is None:
        return traditional.model_copy(
            update={"analysis_type": "traditional", "ai_enhanced": False}
        )

    local_scores = traditional.scores
    # keyword_match takes the AI's holistic relevance, not the literal keyword union
    scores = Scores(
        overall=_score(ai.ats_score.overall, local_scores.overall),
        keyword_match=_score(
            ai.keyword_analysis.relevance_score, local_scores.keyword_match
        ),
        breakdown=_merge_breakdown(local_scores.breakdown, ai.ats_score.breakdown),
    )

    keywords = traditional.keywords.model_copy(update={
        "matched": _union(traditional.keywords.matched, ai.keyword_analysis.matched),
        "missing": _union(traditional.keywords.missing, ai.keyword_analysis.missing),
    })

    return traditional.model_copy(update={
        "scores": scores,
        "keywords": keywords,
        "recommendations": [*traditional.recommendations, *ai.recommendations],
        "strengths": list(ai.strengths),
        "weaknesses": list(ai.weaknesses),
        "ai_suggestions": list(ai.ai_enhanced_suggestions),
        "analysis_type": "hybrid",
        "ai_enhanced": True,
    })
