"""
GEO Scan Configuration
======================

Provider credentials and scan pacing settings.
Set credentials via environment variables or .env file.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv
import structlog

logger = structlog.get_logger(__name__)

load_dotenv()


@dataclass
class OpenAIConfig:
    """OpenAI API Configuration (ChatGPT provider and suggestions)"""
    api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    endpoint: str = field(default_factory=lambda: os.getenv(
        "OPENAI_ENDPOINT", "https://api.openai.com/v1/chat/completions"
    ))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class AnthropicConfig:
    """Anthropic API Configuration (Claude provider)"""
    api_key: str = field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""))
    model: str = field(default_factory=lambda: os.getenv("CLAUDE_MODEL", "claude-3-haiku-20240307"))
    endpoint: str = field(default_factory=lambda: os.getenv(
        "ANTHROPIC_ENDPOINT", "https://api.anthropic.com/v1/messages"
    ))
    api_version: str = "2023-06-01"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class PerplexityConfig:
    """Perplexity API Configuration (online search provider)"""
    api_key: str = field(default_factory=lambda: os.getenv("PERPLEXITY_API_KEY", ""))
    model: str = field(default_factory=lambda: os.getenv(
        "PERPLEXITY_MODEL", "llama-3.1-sonar-small-128k-online"
    ))
    endpoint: str = field(default_factory=lambda: os.getenv(
        "PERPLEXITY_ENDPOINT", "https://api.perplexity.ai/chat/completions"
    ))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class ScanSettings:
    """Pacing and size limits for a single scan"""
    # Questions asked concurrently per round
    batch_size: int = field(default_factory=lambda: int(os.getenv("GEOSCAN_BATCH_SIZE", "3")))

    # Pause between rounds, in seconds
    batch_delay: float = field(default_factory=lambda: float(os.getenv("GEOSCAN_BATCH_DELAY", "0.5")))

    # Upper bound for one provider request, in seconds
    request_timeout: float = field(default_factory=lambda: float(os.getenv("GEOSCAN_REQUEST_TIMEOUT", "30")))

    # Stored answer text is cut to this length
    answer_max_chars: int = field(default_factory=lambda: int(os.getenv("GEOSCAN_ANSWER_MAX_CHARS", "500")))

    def __post_init__(self):
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if self.batch_delay < 0:
            raise ValueError("batch_delay cannot be negative")


@dataclass
class GeoScanConfig:
    """Master configuration for the scan engine"""
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)
    perplexity: PerplexityConfig = field(default_factory=PerplexityConfig)
    scan: ScanSettings = field(default_factory=ScanSettings)

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def get_status(self) -> dict:
        """Get configuration status for all providers"""
        return {
            "chatgpt": self.openai.is_configured,
            "claude": self.anthropic.is_configured,
            "perplexity": self.perplexity.is_configured,
        }

    def log_configuration(self):
        """Log configuration (with secrets masked)."""
        logger.info(
            "geoscan_configuration",
            openai_api_key=_mask_secret(self.openai.api_key),
            anthropic_api_key=_mask_secret(self.anthropic.api_key),
            perplexity_api_key=_mask_secret(self.perplexity.api_key),
            batch_size=self.scan.batch_size,
            batch_delay=self.scan.batch_delay,
            request_timeout=self.scan.request_timeout,
        )


def _mask_secret(secret: str) -> str:
    if not secret:
        return "<not set>"
    if len(secret) <= 8:
        return "***"
    return f"{secret[:4]}...{secret[-4:]}"


# Global configuration instance
_config: Optional[GeoScanConfig] = None


def get_config() -> GeoScanConfig:
    """Get the scan engine configuration singleton"""
    global _config
    if _config is None:
        _config = GeoScanConfig()
    return _config


def reset_config() -> None:
    """Reset configuration (useful for testing)"""
    global _config
    _config = None
