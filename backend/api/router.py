from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_claude_client
from config import settings
from models.requests import (
    AnalyzeRequest,
    CareerAdviceRequest,
    EnhanceBulletsRequest,
    ReportRequest,
    SummaryRequest,
)
from models.responses import (
    AnalysisResult,
    CareerAdviceResponse,
    EnhancedBullet,
    SummaryResponse,
)
from services import report, resume_analyzer
from services.claude_client import ClaudeClient

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(client: ClaudeClient = Depends(get_claude_client)):
    return {
        "status": "ok",
        "ai_configured": client.is_configured(),
    }


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    body: AnalyzeRequest,
    client: ClaudeClient = Depends(get_claude_client),
):
    resume_analyzer.validate_inputs(body.resume_text, body.job_description)
    return await resume_analyzer.analyze_resume(
        body.resume_text, body.job_description, use_ai=body.use_ai, client=client
    )


@router.post("/analyze/report", response_class=PlainTextResponse)
@limiter.limit(settings.rate_limit)
async def analyze_report(
    request: Request,
    body: ReportRequest,
    client: ClaudeClient = Depends(get_claude_client),
):
    resume_analyzer.validate_inputs(body.resume_text, body.job_description)
    result = await resume_analyzer.analyze_resume(
        body.resume_text, body.job_description, use_ai=body.use_ai, client=client
    )
    return report.generate_report(result, body.resume_file_name)


@router.post("/enhance/bullets", response_model=list[EnhancedBullet])
@limiter.limit(settings.rate_limit)
async def enhance_bullets(
    request: Request,
    body: EnhanceBulletsRequest,
    client: ClaudeClient = Depends(get_claude_client),
):
    return await client.enhance_bullet_points(body.bullets, body.keywords)


@router.post("/enhance/summary", response_model=SummaryResponse)
@limiter.limit(settings.rate_limit)
async def enhance_summary(
    request: Request,
    body: SummaryRequest,
    client: ClaudeClient = Depends(get_claude_client),
):
    summary = await client.generate_summary(body.resume_text, body.job_description)
    return SummaryResponse(summary=summary)


@router.post("/career-advice", response_model=CareerAdviceResponse)
@limiter.limit(settings.rate_limit)
async def career_advice(
    request: Request,
    body: CareerAdviceRequest,
    client: ClaudeClient = Depends(get_claude_client),
):
    advice = await client.get_career_advice(body.resume_text, body.target_role)
    return CareerAdviceResponse(advice=advice)
