"""
AI Answer Providers
===================

Adapters that put one question to an AI answer engine:
- ChatGPT (OpenAI)
- Claude (Anthropic)
- Perplexity (online search)
"""

from typing import Optional

from .base import BaseProvider, ProviderResponseError
from .chatgpt import ChatGPTProvider
from .claude import ClaudeProvider
from .perplexity import PerplexityProvider
from ..config import GeoScanConfig, get_config
from ..models import ProviderId


def build_providers(config: Optional[GeoScanConfig] = None) -> dict[str, BaseProvider]:
    """Create one adapter per known provider id"""
    config = config or get_config()
    timeout = config.scan.request_timeout
    return {
        ProviderId.CHATGPT.value: ChatGPTProvider(config.openai, timeout),
        ProviderId.CLAUDE.value: ClaudeProvider(config.anthropic, timeout),
        ProviderId.PERPLEXITY.value: PerplexityProvider(config.perplexity, timeout),
    }


__all__ = [
    "BaseProvider",
    "ProviderResponseError",
    "ChatGPTProvider",
    "ClaudeProvider",
    "PerplexityProvider",
    "build_providers",
]
