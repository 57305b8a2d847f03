from unittest.mock import AsyncMock, MagicMock

import pytest

from models.responses import AnalysisResult
from models.schemas import AIAnalysis
from services.claude_client import ClaudeClient
from services.errors import (
    ApiError,
    AuthError,
    MalformedResponseError,
    NetworkError,
    NotConfiguredError,
    RateLimitedError,
    ServiceUnavailableError,
    ValidationError,
)
from services.resume_analyzer import (
    analyze_resume,
    perform_traditional_analysis,
    validate_inputs,
)


def _fake_client(configured=True, result=None, error=None) -> MagicMock:
    client = MagicMock(spec=ClaudeClient)
    client.is_configured.return_value = configured
    client.analyze_resume = AsyncMock(return_value=result, side_effect=error)
    return client


# --- Traditional analysis ---

def test_traditional_analysis_shape(sample_resume, sample_jd):
    result = perform_traditional_analysis(sample_resume, sample_jd)
    assert isinstance(result, AnalysisResult)
    assert result.analysis_type == "traditional"
    assert result.ai_enhanced is False
    assert 0 <= result.scores.overall <= 100
    assert result.scores.keyword_match == result.scores.breakdown.keyword_match
    assert len(result.insights) == 4
    assert "Use Strong Action Verbs" in [r.title for r in result.recommendations]
    assert result.metadata.has_email is True
    assert result.ai_error is None


def test_missing_display_cap_does_not_affect_scores(sample_resume):
    jd = "python docker " + " ".join(f"tool{i:02d}" for i in range(18))
    result = perform_traditional_analysis(sample_resume, jd)

    assert result.keywords.total == 20
    assert result.keywords.matched == ["python", "docker"]
    assert len(result.keywords.missing) == 15
    # 2 of 20 matched; the display cap would give 2 of 17
    assert result.scores.keyword_match == 10
    assert result.insights[0].value == "10.0%"


def test_traditional_analysis_tolerates_short_inputs():
    result = perform_traditional_analysis("hi", "yo")
    assert result.keywords.total == 0
    assert result.scores.keyword_match == 0
    assert 0 <= result.scores.overall <= 100


# --- Input validation ---

def test_validate_inputs_accepts_long_texts(sample_resume, sample_jd):
    validate_inputs(sample_resume, sample_jd)


@pytest.mark.parametrize("resume,jd,message", [
    ("short", "x" * 60, "Resume text is too short or empty"),
    ("x" * 60, "short", "Job description is too short or empty"),
    ("   " + "x" * 10 + " " * 60, "x" * 60, "Resume text is too short or empty"),
    ("", "", "Resume text is too short or empty"),
])
def test_validate_inputs_rejects_short_texts(resume, jd, message):
    with pytest.raises(ValidationError) as excinfo:
        validate_inputs(resume, jd)
    assert excinfo.value.message == message


# --- Orchestration ---

@pytest.mark.asyncio
async def test_analyze_without_ai_skips_client(sample_resume, sample_jd):
    client = _fake_client()
    result = await analyze_resume(sample_resume, sample_jd, use_ai=False, client=client)

    assert result.analysis_type == "traditional"
    assert result.ai_enhanced is False
    assert result.ai_error is None
    client.analyze_resume.assert_not_called()


@pytest.mark.asyncio
async def test_analyze_with_ai(sample_resume, sample_jd, ai_payload):
    client = _fake_client(result=AIAnalysis.model_validate(ai_payload))
    result = await analyze_resume(sample_resume, sample_jd, client=client, timeout=5.0)

    assert result.analysis_type == "hybrid"
    assert result.ai_enhanced is True
    assert result.scores.overall == 82
    assert result.ai_error is None
    client.analyze_resume.assert_awaited_once_with(sample_resume, sample_jd, timeout=5.0)


@pytest.mark.asyncio
async def test_analyze_ai_not_configured(sample_resume, sample_jd):
    client = _fake_client(configured=False)
    result = await analyze_resume(sample_resume, sample_jd, client=client)

    assert result.analysis_type == "traditional"
    assert result.ai_enhanced is False
    assert result.ai_error == NotConfiguredError().message
    client.analyze_resume.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    AuthError(),
    RateLimitedError(),
    ServiceUnavailableError(),
    NetworkError(),
    ApiError("bad request", upstream_status=400),
    MalformedResponseError(),
])
async def test_analyze_degrades_on_ai_failure(sample_resume, sample_jd, error):
    client = _fake_client(error=error)
    result = await analyze_resume(sample_resume, sample_jd, client=client)
    expected = perform_traditional_analysis(sample_resume, sample_jd)

    assert result.ai_enhanced is False
    assert result.analysis_type == "traditional"
    assert result.ai_error == str(error)
    assert result.model_copy(update={"ai_error": None}) == expected


@pytest.mark.asyncio
async def test_analyze_propagates_unexpected_errors(sample_resume, sample_jd):
    client = _fake_client(error=RuntimeError("bug"))
    with pytest.raises(RuntimeError):
        await analyze_resume(sample_resume, sample_jd, client=client)
