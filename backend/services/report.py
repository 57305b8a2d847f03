"""Plain-text report rendering for an analysis result."""

from datetime import datetime

from models.responses import AnalysisResult

RULE_WIDTH = 70
MISSING_KEYWORDS_SHOWN = 15


def _check(flag: bool) -> str:
    return "✓" if flag else "✗"


def _section(title: str) -> list[str]:
    return [title, "-" * RULE_WIDTH]


def generate_report(
    result: AnalysisResult,
    resume_file_name: str = "resume",
    timestamp: datetime | None = None,
) -> str:
    timestamp = timestamp or datetime.now()
    banner = "=" * RULE_WIDTH
    analysis_type = "AI-Enhanced" if result.ai_enhanced else "Traditional"

    lines = [
        "RESUME ANALYSIS REPORT",
        banner,
        "",
        f"Resume File: {resume_file_name}",
        f"Generated: {timestamp.strftime('%B %d, %Y %I:%M %p')}",
        f"Analysis Type: {analysis_type}",
        banner,
        "",
    ]

    scores = result.scores
    lines += _section("OVERALL SCORES")
    lines += [
        f"Overall ATS Score: {scores.overall}/100",
        f"Keyword Match Score: {scores.keyword_match}%",
        "",
        "Score Breakdown:",
    ]
    for name, value in scores.breakdown.model_dump().items():
        label = name.replace("_", " ").capitalize()
        lines.append(f"  {label}: {value}/100")
    lines.append("")

    keywords = result.keywords
    lines += _section("KEYWORD ANALYSIS")
    lines += [
        f"Keywords Matched: {len(keywords.matched)}/{keywords.total}",
        "",
        "Matched Keywords:",
        ", ".join(keywords.matched),
        "",
        f"Missing Keywords (Top {MISSING_KEYWORDS_SHOWN}):",
        ", ".join(keywords.missing[:MISSING_KEYWORDS_SHOWN]),
        "",
    ]

    lines += _section("RECOMMENDATIONS")
    for i, rec in enumerate(result.recommendations, start=1):
        lines.append(f"{i}. [{rec.priority.upper()}] {rec.title}")
        lines.append(f"   {rec.description}")
        if rec.impact:
            lines.append(f"   Impact: {rec.impact}")
        lines.append("")

    if result.ai_enhanced:
        lines += _section("AI-POWERED INSIGHTS")
        if result.strengths:
            lines += ["", "Strengths:"]
            lines += [f"{i}. {s}" for i, s in enumerate(result.strengths, start=1)]
        if result.weaknesses:
            lines += ["", "Areas for Improvement:"]
            lines += [f"{i}. {w}" for i, w in enumerate(result.weaknesses, start=1)]
        lines.append("")
    elif result.ai_error:
        lines += [f"AI enhancement unavailable: {result.ai_error}", ""]

    meta = result.metadata
    lines += _section("RESUME STATISTICS")
    lines += [
        f"Word Count: {meta.word_count}",
        f"Sections Detected: {meta.estimated_sections}",
        f"Contact Information: {_check(meta.has_email)} Email, {_check(meta.has_phone)} Phone",
        f"Professional Links: {_check(meta.has_linkedin)} LinkedIn, {_check(meta.has_github)} GitHub",
        "",
        "-" * RULE_WIDTH,
    ]

    return "\n".join(lines) + "\n"
