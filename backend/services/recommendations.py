"""Rule-based recommendations and descriptive insights.

Recommendations are emitted in a fixed rule order (roughly most to least
severe), never sorted at runtime. Each rule is independent.
"""

from models.responses import Insight, Recommendation
from services.section_parser import (
    READABLE_BULLET_RE,
    count_metrics,
    has_email,
    has_linkedin,
    word_count,
)

MAX_KEYWORDS_IN_RECOMMENDATION = 5
STRUCTURE_SCORE_THRESHOLD = 70
MIN_METRICS = 3


def generate_recommendations(
    resume_text: str, missing_keywords: list[str], overall_score: int
) -> list[Recommendation]:
    recommendations: list[Recommendation] = []

    if missing_keywords:
        top_missing = ", ".join(missing_keywords[:MAX_KEYWORDS_IN_RECOMMENDATION])
        recommendations.append(Recommendation(
            priority="high",
            category="keywords",
            title="Add Missing Keywords",
            description=f"Incorporate these important keywords: {top_missing}",
            impact="High - Significantly improves ATS compatibility",
        ))

    if overall_score < STRUCTURE_SCORE_THRESHOLD:
        recommendations.append(Recommendation(
            priority="high",
            category="structure",
            title="Improve Resume Structure",
            description="Use clear section headers: Professional Summary, Experience, Education, Skills",
            impact="High - Makes resume easier for ATS to parse",
        ))

    if not has_email(resume_text):
        recommendations.append(Recommendation(
            priority="high",
            category="formatting",
            title="Add Contact Information",
            description="Include your email address and phone number at the top of your resume",
            impact="Critical - Required for employer contact",
        ))

    if count_metrics(resume_text) < MIN_METRICS:
        recommendations.append(Recommendation(
            priority="medium",
            category="content",
            title="Add Quantifiable Achievements",
            description=(
                "Include numbers, percentages, and metrics to demonstrate impact "
                '(e.g., "Increased sales by 25%")'
            ),
            impact="Medium - Makes accomplishments more concrete",
        ))

    recommendations.append(Recommendation(
        priority="medium",
        category="content",
        title="Use Strong Action Verbs",
        description=(
            'Start bullet points with powerful verbs like "Managed", "Developed", '
            '"Achieved", "Optimized"'
        ),
        impact="Medium - Creates stronger impression",
    ))

    if not has_linkedin(resume_text):
        recommendations.append(Recommendation(
            priority="low",
            category="formatting",
            title="Add LinkedIn Profile",
            description="Include your LinkedIn profile URL to show professional online presence",
            impact="Low - Provides additional context for recruiters",
        ))

    return recommendations


def _match_rate_status(rate: float) -> str:
    if rate >= 70:
        return "excellent"
    if rate >= 50:
        return "good"
    return "needs-work"


def _length_status(words: int) -> str:
    if 400 <= words <= 800:
        return "excellent"
    if 300 <= words <= 1000:
        return "good"
    return "needs-work"


def _alignment(matched_count: int) -> tuple[str, str]:
    if matched_count > 10:
        return "Strong", "excellent"
    if matched_count > 5:
        return "Moderate", "good"
    return "Weak", "needs-work"


def generate_insights(
    resume_text: str, matched: list[str], missing: list[str]
) -> list[Insight]:
    """Four fixed insights: match rate, length, skills alignment, readability."""
    total = len(matched) + len(missing)
    match_rate = len(matched) / total * 100 if total else 0.0
    words = word_count(resume_text)
    alignment_value, alignment_status = _alignment(len(matched))
    readable = bool(READABLE_BULLET_RE.search(resume_text))

    return [
        Insight(
            label="Keyword Match Rate",
            value=f"{match_rate:.1f}%",
            description="Percentage of job keywords found in your resume",
            status=_match_rate_status(match_rate),
        ),
        Insight(
            label="Resume Length",
            value=f"{words} words",
            description="Ideal length is 400-800 words for most positions",
            status=_length_status(words),
        ),
        Insight(
            label="Skills Alignment",
            value=alignment_value,
            description="How well your skills align with job requirements",
            status=alignment_status,
        ),
        Insight(
            label="ATS Readability",
            value="Good" if readable else "Needs Work",
            description="Use bullet points and clear formatting for better ATS parsing",
            status="good" if readable else "needs-work",
        ),
    ]
