"""Compiled pattern matchers for resume sections, contact details and metrics.

Shared by the ATS scorer, the recommendation generator and metadata
extraction so every component agrees on what counts as an email, a phone
number, a bullet point or a section header.
"""

import re

from models.responses import ResumeMetadata, SectionFlags

# Section indicators used for structure scoring (case-insensitive, anywhere in text)
SECTION_PATTERNS: dict[str, re.Pattern] = {
    "experience": re.compile(r"experience|employment|work history", re.IGNORECASE),
    "education": re.compile(r"education|academic", re.IGNORECASE),
    "skills": re.compile(r"skills|competencies|expertise", re.IGNORECASE),
    "summary": re.compile(r"summary|objective|profile", re.IGNORECASE),
}

# Header families counted for the "estimated sections" statistic
HEADER_FAMILIES: tuple[re.Pattern, ...] = (
    re.compile(r"experience|employment|work history", re.IGNORECASE),
    re.compile(r"education|academic", re.IGNORECASE),
    re.compile(r"skills|competencies", re.IGNORECASE),
    re.compile(r"summary|objective|profile", re.IGNORECASE),
    re.compile(r"certifications|licenses", re.IGNORECASE),
    re.compile(r"projects", re.IGNORECASE),
    re.compile(r"awards|achievements", re.IGNORECASE),
)

# Short standalone line of letters and spaces, e.g. "work history"
HEADER_LINE_RE = re.compile(r"^(?=[^\n]*[a-z])[a-z \t]{3,30}$", re.MULTILINE)

# Contact info patterns
EMAIL_RE = re.compile(r"@[\w.-]+\.\w{2,}")
PHONE_RE = re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com", re.IGNORECASE)
PROFESSIONAL_LINK_RE = re.compile(r"github\.com|portfolio|website|blog", re.IGNORECASE)

# Formatting signals
YEAR_RE = re.compile(r"\d{4}")
BULLET_RE = re.compile(r"[•\-*]")
READABLE_BULLET_RE = re.compile(r"[•\-]")
NON_STANDARD_CHAR_RE = re.compile(r"[^\w\s.,;:()\-]")

# Numbers, percentages and currency amounts ("30%", "250$", "2021")
METRIC_RE = re.compile(r"\d+[%$]?")


def word_count(text: str) -> int:
    return len(text.split())


def count_metrics(text: str) -> int:
    """Count number, percentage and currency tokens."""
    return len(METRIC_RE.findall(text))


def count_header_lines(text: str) -> int:
    """Count short standalone lines that look like section headers."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return len(HEADER_LINE_RE.findall(text.lower()))


def has_email(text: str) -> bool:
    return bool(EMAIL_RE.search(text))


def has_linkedin(text: str) -> bool:
    return bool(LINKEDIN_RE.search(text))


def count_sections(text: str) -> int:
    """Number of common header families mentioned in the resume."""
    return sum(1 for pattern in HEADER_FAMILIES if pattern.search(text))


def extract_metadata(text: str) -> ResumeMetadata:
    """Collect descriptive flags and counts about the resume text."""
    return ResumeMetadata(
        has_email=has_email(text),
        has_phone=bool(PHONE_RE.search(text)),
        has_linkedin=has_linkedin(text),
        has_github=bool(GITHUB_RE.search(text)),
        has_sections=SectionFlags(
            experience=bool(re.search(r"experience", text, re.IGNORECASE)),
            education=bool(re.search(r"education", text, re.IGNORECASE)),
            skills=bool(re.search(r"skills", text, re.IGNORECASE)),
            summary=bool(re.search(r"summary|objective", text, re.IGNORECASE)),
        ),
        word_count=word_count(text),
        has_years=bool(YEAR_RE.search(text)),
        has_bullet_points=bool(BULLET_RE.search(text)),
        estimated_sections=count_sections(text),
    )
