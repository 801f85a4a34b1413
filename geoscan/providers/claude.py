"""
Claude Provider
===============

Answers questions through the Anthropic messages API.

Required environment variables:
- ANTHROPIC_API_KEY
- CLAUDE_MODEL (optional)
"""

from .base import BaseProvider, DUTCH_ASSISTANT_PROMPT
from ..config import AnthropicConfig


class ClaudeProvider(BaseProvider):
    """Provider for Anthropic Claude"""

    temperature: float = 0.7

    def __init__(self, config: AnthropicConfig, request_timeout: float = 30.0):
        super().__init__(config, request_timeout)

    @property
    def provider_id(self) -> str:
        return "claude"

    def _get_headers(self) -> dict:
        return {
            "x-api-key": self.config.api_key,
            "Content-Type": "application/json",
            "anthropic-version": self.config.api_version,
        }

    def build_payload(self, question: str) -> dict:
        return {
            "model": self.config.model,
            "system": DUTCH_ASSISTANT_PROMPT,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [
                {"role": "user", "content": question},
            ],
        }

    def extract_answer(self, data: dict) -> str:
        # Only text blocks carry the answer
        blocks = data.get("content") or []
        return "".join(
            block.get("text", "")
            for block in blocks
            if block.get("type", "text") == "text"
        )
