"""
GEO Scan Engine
===============

Measures how often AI assistants mention a business, and how favorably,
when asked Dutch questions about its category and city:
- Question generation
- Provider adapters (ChatGPT, Claude, Perplexity)
- Mention and sentiment classification
- Scan orchestration and GEO scoring
- Improvement suggestions

Configuration is managed via environment variables or .env file.
"""

from .classifier import classify
from .models import (
    Effort,
    PlatformResult,
    ProviderId,
    RawResult,
    ScanOutcome,
    Sentiment,
    Suggestion,
    SuggestionCategory,
)
from .questions import generate_questions
from .scanner import GeoScanner, run_scan
from .suggestions import SuggestionGenerator, generate_suggestions

__version__ = "1.0.0"

__all__ = [
    "classify",
    "generate_questions",
    "GeoScanner",
    "run_scan",
    "SuggestionGenerator",
    "generate_suggestions",
    "Effort",
    "PlatformResult",
    "ProviderId",
    "RawResult",
    "ScanOutcome",
    "Sentiment",
    "Suggestion",
    "SuggestionCategory",
]
