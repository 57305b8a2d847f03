"""Error taxonomy for the analysis engine and the Claude client.

Every AI-path failure derives from ``AIServiceError`` so the orchestrator can
degrade to the heuristic-only result with a single ``except`` clause.
"""


class AnalysisError(Exception):
    """Base class for all errors raised by the analysis service."""

    status_code = 500
    default_message = "An error occurred during analysis. Please try again"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(AnalysisError):
    """Resume or job description text is too short to analyze."""

    status_code = 400
    default_message = "Resume text is too short or empty"


class AIServiceError(AnalysisError):
    """Any failure while talking to the AI provider."""

    status_code = 502
    default_message = "Failed to connect to AI service. Please check your API key"


class NotConfiguredError(AIServiceError):
    status_code = 503
    default_message = "AI service is not configured. Set CLAUDE_API_KEY to enable it"


class AuthError(AIServiceError):
    status_code = 502
    default_message = "Invalid API key. Please check your configuration."


class RateLimitedError(AIServiceError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class ServiceUnavailableError(AIServiceError):
    status_code = 503
    default_message = "Claude API service unavailable. Please try again later."


class NetworkError(AIServiceError):
    status_code = 504
    default_message = "Network error. Please check your internet connection"


class ApiError(AIServiceError):
    status_code = 502

    def __init__(self, message: str | None = None, upstream_status: int | None = None):
        super().__init__(f"API Error: {message or 'Unknown error'}")
        self.upstream_status = upstream_status


class MalformedResponseError(AIServiceError):
    status_code = 502
    default_message = "Failed to parse AI analysis. Please try again."
