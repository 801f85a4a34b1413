"""
ChatGPT Provider
================

Answers questions through the OpenAI chat completions API. The model
responds from its training data; it does not search the web.

Required environment variables:
- OPENAI_API_KEY
- OPENAI_MODEL (optional, defaults to gpt-4o-mini)
"""

from .base import BaseProvider, DUTCH_ASSISTANT_PROMPT, first_choice_content
from ..config import OpenAIConfig


class ChatGPTProvider(BaseProvider):
    """Provider for OpenAI chat completions"""

    temperature: float = 0.7

    def __init__(self, config: OpenAIConfig, request_timeout: float = 30.0):
        super().__init__(config, request_timeout)

    @property
    def provider_id(self) -> str:
        return "chatgpt"

    def build_payload(self, question: str) -> dict:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": DUTCH_ASSISTANT_PROMPT},
                {"role": "user", "content": question},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def extract_answer(self, data: dict) -> str:
        return first_choice_content(data)
