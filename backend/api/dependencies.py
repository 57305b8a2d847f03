"""Shared dependencies for API routes."""

from services.claude_client import ClaudeClient, get_client


def get_claude_client() -> ClaudeClient:
    return get_client()
