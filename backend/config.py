import os
from pydantic_settings import BaseSettings

PLACEHOLDER_API_KEY = "your_api_key_here"


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Claude (Anthropic messages API)
    claude_api_key: str = ""
    claude_base_url: str = "https://api.anthropic.com"
    claude_model: str = "claude-sonnet-4-20250514"
    claude_api_version: str = "2023-06-01"
    claude_max_tokens: int = 4096
    claude_temperature: float = 0.7
    claude_timeout_seconds: float = 60.0

    # Analysis engine
    max_keywords: int = 30
    missing_keywords_display_limit: int = 15
    min_resume_length: int = 50
    min_job_description_length: int = 50
    max_resume_length: int = 50000
    max_job_description_length: int = 10000

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "10/minute"
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
