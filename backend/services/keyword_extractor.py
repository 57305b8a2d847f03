"""Keyword extraction and matching for resume-JD analysis.

Keywords are ranked by frequency: single tokens that survive stop-word
filtering plus a catalog of known multi-word technical phrases. Punctuated
tech terms (``node.js``, ``c++``) are rewritten to plain tokens first so
they survive tokenization.
"""

import logging
import re
from collections import Counter

from config import settings

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 10
MIN_TOKEN_LENGTH = 3

# ---------------------------------------------------------------------------
# Stop words: grammatical function words plus generic JD/resume vocabulary
# that never identifies a skill on its own
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "up", "about", "into", "through", "during",
    "is", "are", "was", "were", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "should", "could", "may", "might",
    "must", "can", "this", "that", "these", "those", "i", "you", "he", "she",
    "it", "we", "they", "what", "which", "who", "when", "where", "why", "how",
    # Domain filler
    "work", "working", "experience", "years", "year", "ability", "skills",
    "skill", "required", "requirements", "looking", "candidate", "position",
    "job", "role", "us", "our", "team", "company", "business",
})

# ---------------------------------------------------------------------------
# Punctuated tech terms rewritten before tokenizing. Applied in order, so
# "asp.net" becomes "aspdotnet" and "node.js" is handled before ".net".
# ---------------------------------------------------------------------------
TECHNICAL_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("react.js", "reactjs"),
    ("node.js", "nodejs"),
    ("vue.js", "vuejs"),
    ("c++", "cplusplus"),
    ("c#", "csharp"),
    (".net", "dotnet"),
)

# Known multi-word skills, detected by containment in the normalized text
TECHNICAL_PHRASES: tuple[str, ...] = (
    "machine learning",
    "data analysis",
    "project management",
    "full stack",
    "front end",
    "back end",
    "software development",
    "agile methodology",
    "version control",
    "database management",
    "api development",
    "cloud computing",
    "data visualization",
    "business intelligence",
    "quality assurance",
    "user experience",
    "customer service",
    "team leadership",
)

_NON_TOKEN_RE = re.compile(r"[^\w\s+#.-]")
# Sentence-ending periods; dots inside terms like "asp.net" are kept
_SENTENCE_PERIOD_RE = re.compile(r"\.(\s|$)")
# Drops separator runs such as "---"
_WORD_CHAR_RE = re.compile(r"[^\W_]")


def normalize_text(text: str) -> str:
    """Lowercase text and rewrite punctuated tech terms to single tokens."""
    normalized = text.lower()
    for original, replacement in TECHNICAL_MAPPINGS:
        normalized = normalized.replace(original, replacement)
    return normalized


def _tokenize(normalized: str) -> list[str]:
    text = _NON_TOKEN_RE.sub(" ", normalized)
    text = _SENTENCE_PERIOD_RE.sub(r" \1", text)
    return [
        token
        for token in text.split()
        if len(token) >= MIN_TOKEN_LENGTH
        and token not in STOP_WORDS
        and _WORD_CHAR_RE.search(token)
    ]


def extract_phrases(normalized: str) -> list[str]:
    """Return catalog phrases contained in already-normalized text."""
    return [phrase for phrase in TECHNICAL_PHRASES if phrase in normalized]


def extract_keywords(text: str, max_keywords: int | None = None) -> list[str]:
    """Extract up to ``max_keywords`` distinct terms ranked by frequency.

    Ties keep first-seen order: tokens in text order, then detected phrases
    in catalog order. Texts shorter than 10 characters yield no keywords.
    """
    if not text or len(text) < MIN_TEXT_LENGTH:
        return []
    limit = settings.max_keywords if max_keywords is None else max_keywords

    normalized = normalize_text(text)
    frequencies = Counter(_tokenize(normalized))
    for phrase in extract_phrases(normalized):
        frequencies[phrase] += 1

    # Counter preserves insertion order and sorted() is stable
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return [term for term, _ in ranked[:limit]]


def match_keywords(
    resume_keywords: list[str], job_keywords: list[str]
) -> tuple[list[str], list[str]]:
    """Split job keywords into (matched, missing) against resume keywords.

    Matching is case-insensitive equality; both lists keep job keyword order.
    """
    resume_terms = {kw.lower() for kw in resume_keywords}
    matched = []
    missing = []
    for kw in job_keywords:
        if kw.lower() in resume_terms:
            matched.append(kw)
        else:
            missing.append(kw)
    logger.debug("Matched %d of %d job keywords", len(matched), len(job_keywords))
    return matched, missing
