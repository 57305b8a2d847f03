from pydantic import BaseModel, Field

from config import settings


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_length, description="Plain text resume content"
    )
    job_description: str = Field(
        ..., max_length=settings.max_job_description_length, description="Job description text"
    )
    use_ai: bool = Field(True, description="Enhance the heuristic analysis with Claude")


class ReportRequest(AnalyzeRequest):
    resume_file_name: str = Field("resume", max_length=255)


class EnhanceBulletsRequest(BaseModel):
    bullets: list[str] = Field(..., min_length=1, max_length=20)
    keywords: list[str] = Field(default_factory=list, max_length=30)


class SummaryRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=settings.max_resume_length)
    job_description: str = Field(
        ..., min_length=1, max_length=settings.max_job_description_length
    )


class CareerAdviceRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=settings.max_resume_length)
    target_role: str = Field(..., min_length=1, max_length=500)
