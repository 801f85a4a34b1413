"""
Perplexity Provider
===================

Perplexity searches the web before answering, which makes it the closest
stand-in for what a consumer sees in an AI answer engine.

Required environment variables:
- PERPLEXITY_API_KEY
"""

from .base import BaseProvider, first_choice_content
from ..config import PerplexityConfig


class PerplexityProvider(BaseProvider):
    """Provider for Perplexity online models"""

    def __init__(self, config: PerplexityConfig, request_timeout: float = 30.0):
        super().__init__(config, request_timeout)

    @property
    def provider_id(self) -> str:
        return "perplexity"

    def build_payload(self, question: str) -> dict:
        # Single user turn, no system preamble
        return {
            "model": self.config.model,
            "messages": [{"role": "user", "content": question}],
            "max_tokens": self.max_tokens,
        }

    def extract_answer(self, data: dict) -> str:
        return first_choice_content(data)
