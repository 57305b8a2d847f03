"""Anthropic Claude messages API wrapper with error handling."""

import json
import logging
import re

import httpx
from pydantic import ValidationError as SchemaValidationError

from config import PLACEHOLDER_API_KEY, settings
from models.responses import EnhancedBullet
from models.schemas import AIAnalysis
from services import prompt_builder
from services.errors import (
    ApiError,
    AuthError,
    MalformedResponseError,
    NetworkError,
    NotConfiguredError,
    RateLimitedError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

MESSAGES_PATH = "/v1/messages"

# Per-call generation parameters
ANALYSIS_MAX_TOKENS = 4096
ANALYSIS_TEMPERATURE = 0.3
BULLET_TEMPERATURE = 0.7
SUMMARY_MAX_TOKENS = 500
SUMMARY_TEMPERATURE = 0.7
ADVICE_MAX_TOKENS = 1000
ADVICE_TEMPERATURE = 0.8

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """Return the body of a markdown code fence, or the stripped text if unfenced."""
    text = text.strip()
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text


def parse_json(text: str):
    """Parse a model response as JSON, tolerating ```json fences."""
    try:
        return json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Claude response as JSON: %s", e)
        logger.debug("Raw response: %s", text)
        raise MalformedResponseError() from e


def _error_for_response(response: httpx.Response) -> Exception:
    status = response.status_code
    if status == 401:
        return AuthError()
    if status == 429:
        return RateLimitedError()
    if status >= 500:
        return ServiceUnavailableError()

    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        message = None
    return ApiError(message, upstream_status=status)


class ClaudeClient:
    """Stateless client; holds only connection settings."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        api_version: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = settings.claude_api_key if api_key is None else api_key
        self.base_url = base_url or settings.claude_base_url
        self.model = model or settings.claude_model
        self.api_version = api_version or settings.claude_api_version
        self.max_tokens = settings.claude_max_tokens if max_tokens is None else max_tokens
        self.temperature = settings.claude_temperature if temperature is None else temperature
        self.timeout = settings.claude_timeout_seconds if timeout is None else timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != PLACEHOLDER_API_KEY

    def _headers(self) -> dict[str, str]:
        return {
            "content-type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
        }

    async def send_message(
        self,
        prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> str:
        """Send a single user message and return the first text block."""
        if not self.is_configured():
            raise NotConfiguredError()

        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens if max_tokens is None else max_tokens,
            "temperature": self.temperature if temperature is None else temperature,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout if timeout is None else timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(MESSAGES_PATH, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Claude API error: HTTP %d", e.response.status_code)
            raise _error_for_response(e.response) from e
        except httpx.RequestError as e:
            logger.error("Claude API request failed: %s", e)
            raise NetworkError() from e

        try:
            return response.json()["content"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected Claude response envelope: %s", e)
            raise MalformedResponseError() from e

    async def analyze_resume(
        self, resume_text: str, job_description: str, timeout: float | None = None
    ) -> AIAnalysis:
        """Run the structured resume analysis. Not retried on failure."""
        prompt = prompt_builder.build_analysis_prompt(resume_text, job_description)
        text = await self.send_message(
            prompt,
            max_tokens=ANALYSIS_MAX_TOKENS,
            temperature=ANALYSIS_TEMPERATURE,
            timeout=timeout,
        )

        data = parse_json(text)
        try:
            return AIAnalysis.model_validate(data)
        except SchemaValidationError as e:
            logger.error("Claude analysis does not match the expected schema: %s", e)
            raise MalformedResponseError() from e

    async def enhance_bullet_points(
        self, bullets: list[str], keywords: list[str]
    ) -> list[EnhancedBullet]:
        """Rewrite bullets around target keywords.

        An unparsable reply yields an empty list rather than an error.
        """
        prompt = prompt_builder.build_bullet_prompt(bullets, keywords)
        text = await self.send_message(prompt, temperature=BULLET_TEMPERATURE)

        try:
            data = parse_json(text)
            return [EnhancedBullet.model_validate(item) for item in data]
        except (MalformedResponseError, SchemaValidationError, TypeError) as e:
            logger.warning("Discarding unparsable bullet enhancement: %s", e)
            return []

    async def generate_summary(self, resume_text: str, job_description: str) -> str:
        prompt = prompt_builder.build_summary_prompt(resume_text, job_description)
        text = await self.send_message(
            prompt, max_tokens=SUMMARY_MAX_TOKENS, temperature=SUMMARY_TEMPERATURE
        )
        return text.strip()

    async def get_career_advice(self, resume_text: str, target_role: str) -> str:
        prompt = prompt_builder.build_career_advice_prompt(resume_text, target_role)
        text = await self.send_message(
            prompt, max_tokens=ADVICE_MAX_TOKENS, temperature=ADVICE_TEMPERATURE
        )
        return text.strip()


def get_client() -> ClaudeClient:
    client = ClaudeClient()
    if not client.is_configured():
        logger.info("No CLAUDE_API_KEY set - AI enhancement disabled")
    return client
