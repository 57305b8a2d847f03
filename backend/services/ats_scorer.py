"""Heuristic ATS scoring.

Five independent sub-scores, each capped at 100, combined into a weighted
composite:

    keyword match  40
    format         25
    structure      20
    contact info   10
    measurable      5
"""

import logging
import math
from dataclasses import dataclass, field

from models.responses import ScoreBreakdown
from services import keyword_extractor
from services.section_parser import (
    BULLET_RE,
    EMAIL_RE,
    LINKEDIN_RE,
    NON_STANDARD_CHAR_RE,
    PHONE_RE,
    PROFESSIONAL_LINK_RE,
    SECTION_PATTERNS,
    YEAR_RE,
    count_header_lines,
    count_metrics,
    word_count,
)

logger = logging.getLogger(__name__)

SCORING_WEIGHTS: dict[str, int] = {
    "keyword_match": 40,
    "format": 25,
    "structure": 20,
    "contact": 10,
    "measurable_results": 5,
}

ACTION_VERBS: tuple[str, ...] = (
    "achieved", "improved", "increased", "decreased", "reduced", "managed",
    "led", "developed", "implemented", "created", "designed", "optimized",
)

# Structure points per detected section indicator
SECTION_POINTS: dict[str, int] = {
    "experience": 25,
    "education": 25,
    "skills": 25,
    "summary": 15,
}

MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round halves up; built-in round() sends 12.5 to 12."""
    return int(math.floor(value + 0.5))


def _cap(score: int) -> int:
    return min(max(score, 0), MAX_SCORE)


@dataclass(frozen=True)
class ScoreResult:
    """Heuristic scoring output for one resume/JD pair."""

    breakdown: ScoreBreakdown
    overall: int
    job_keywords: list[str] = field(default_factory=list)
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)  # full list, never truncated


def keyword_match_score(matched_count: int, total_keywords: int) -> int:
    if total_keywords == 0:
        return 0
    return _cap(round_half_up(100 * matched_count / total_keywords))


def assess_format(text: str) -> int:
    score = 0

    words = word_count(text)
    if 300 <= words <= 1000:
        score += 30
    elif 200 <= words <= 1500:
        score += 20
    else:
        score += 10

    if YEAR_RE.search(text):
        score += 20
    if BULLET_RE.search(text):
        score += 20
    if "\n" in text:
        score += 15

    # No excessive special characters or encoding debris
    if text and len(NON_STANDARD_CHAR_RE.findall(text)) / len(text) < 0.05:
        score += 15

    return _cap(score)


def assess_structure(text: str) -> int:
    score = 0
    for section, points in SECTION_POINTS.items():
        if SECTION_PATTERNS[section].search(text):
            score += points

    if count_header_lines(text) >= 3:
        score += 10

    return _cap(score)


def assess_contact_info(text: str) -> int:
    score = 0
    if EMAIL_RE.search(text):
        score += 35
    if PHONE_RE.search(text):
        score += 35
    if LINKEDIN_RE.search(text):
        score += 15
    if PROFESSIONAL_LINK_RE.search(text):
        score += 15
    return _cap(score)


def count_action_verbs(text: str) -> int:
    """Number of distinct recognized action verbs used in the text."""
    lowered = text.lower()
    return sum(1 for verb in ACTION_VERBS if verb in lowered)


def assess_measurable_results(text: str) -> int:
    score = 0

    metrics = count_metrics(text)
    if metrics >= 5:
        score += 40
    elif metrics >= 3:
        score += 25
    elif metrics >= 1:
        score += 15

    score += min(count_action_verbs(text) * 10, 60)
    return _cap(score)


def compute_overall_score(breakdown: ScoreBreakdown) -> int:
    """Weighted composite of the capped sub-scores, clamped to 0-100."""
    weighted = sum(
        weight * _cap(getattr(breakdown, name))
        for name, weight in SCORING_WEIGHTS.items()
    )
    return _cap(round_half_up(weighted / 100))


def compute_score_breakdown(
    resume_text: str, matched_count: int, total_keywords: int
) -> ScoreBreakdown:
    return ScoreBreakdown(
        keyword_match=keyword_match_score(matched_count, total_keywords),
        format=assess_format(resume_text),
        structure=assess_structure(resume_text),
        contact=assess_contact_info(resume_text),
        measurable_results=assess_measurable_results(resume_text),
    )


def score(
    resume_text: str, job_description: str, max_keywords: int | None = None
) -> ScoreResult:
    """Score a resume against a job description with the heuristic engine."""
    resume_keywords = keyword_extractor.extract_keywords(resume_text, max_keywords)
    job_keywords = keyword_extractor.extract_keywords(job_description, max_keywords)
    matched, missing = keyword_extractor.match_keywords(resume_keywords, job_keywords)

    breakdown = compute_score_breakdown(resume_text, len(matched), len(job_keywords))
    overall = compute_overall_score(breakdown)
    logger.debug("Heuristic score %d (%s)", overall, breakdown.model_dump())

    return ScoreResult(
        breakdown=breakdown,
        overall=overall,
        job_keywords=job_keywords,
        matched=matched,
        missing=missing,
    )
