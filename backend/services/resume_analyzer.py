"""Orchestrator: heuristic analysis with optional Claude enhancement.

Pipeline:
1. Keyword extraction and matching (resume vs JD)
2. Heuristic ATS sub-scores and weighted composite
3. Rule-based recommendations and insights
4. Resume metadata
5. Claude analysis (optional, single attempt)
6. Merge heuristic + AI results

Any AI failure degrades to the heuristic result; the reason is logged and
reported in ``AnalysisResult.ai_error``.
"""

import logging

from config import settings
from models.responses import AnalysisResult, KeywordSummary, Scores
from services import ats_scorer, claude_client
from services.errors import AIServiceError, NotConfiguredError, ValidationError
from services.merge import merge_analyses
from services.recommendations import generate_insights, generate_recommendations
from services.section_parser import extract_metadata

logger = logging.getLogger(__name__)


def validate_inputs(resume_text: str, job_description: str) -> None:
    """Reject texts too short to analyze. Callers run this before analysis."""
    if not resume_text or len(resume_text.strip()) < settings.min_resume_length:
        raise ValidationError("Resume text is too short or empty")
    if not job_description or len(job_description.strip()) < settings.min_job_description_length:
        raise ValidationError("Job description is too short or empty")


def perform_traditional_analysis(
    resume_text: str, job_description: str, max_keywords: int | None = None
) -> AnalysisResult:
    """Deterministic analysis; performs no I/O and never calls the AI."""
    result = ats_scorer.score(resume_text, job_description, max_keywords)

    # Scoring and recommendations see the full missing list; only the display list is capped
    recommendations = generate_recommendations(resume_text, result.missing, result.overall)
    insights = generate_insights(resume_text, result.matched, result.missing)

    return AnalysisResult(
        scores=Scores(
            overall=result.overall,
            keyword_match=result.breakdown.keyword_match,
            breakdown=result.breakdown,
        ),
        keywords=KeywordSummary(
            matched=result.matched,
            missing=result.missing[: settings.missing_keywords_display_limit],
            total=len(result.job_keywords),
        ),
        recommendations=recommendations,
        insights=insights,
        metadata=extract_metadata(resume_text),
        analysis_type="traditional",
        ai_enhanced=False,
    )


async def analyze_resume(
    resume_text: str,
    job_description: str,
    use_ai: bool = True,
    client: claude_client.ClaudeClient | None = None,
    timeout: float | None = None,
) -> AnalysisResult:
    """Run the full analysis; the only suspension point is the Claude call."""
    traditional = perform_traditional_analysis(resume_text, job_description)

    if not use_ai:
        return merge_analyses(traditional, None)

    client = client or claude_client.get_client()
    ai_analysis = None
    ai_error = None

    if not client.is_configured():
        ai_error = NotConfiguredError().message
        logger.info("AI enhancement requested but Claude is not configured")
    else:
        try:
            ai_analysis = await client.analyze_resume(
                resume_text, job_description, timeout=timeout
            )
        except AIServiceError as e:
            logger.warning(
                "AI analysis failed (%s), using traditional analysis only: %s",
                type(e).__name__,
                e,
            )
            ai_error = e.message

    merged = merge_analyses(traditional, ai_analysis)
    if ai_error:
        merged = merged.model_copy(update={"ai_error": ai_error})
    return merged
