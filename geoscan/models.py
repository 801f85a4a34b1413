"""
Scan Result Models
==================

Result types produced by a scan and handed to the persistence layer.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator


class Sentiment(str, Enum):
    """Tone of an answer towards the business"""
    POSITIVE = "positief"
    NEUTRAL = "neutraal"
    NEGATIVE = "negatief"


class Effort(str, Enum):
    LOW = "laag"
    MEDIUM = "medium"
    HIGH = "hoog"


class SuggestionCategory(str, Enum):
    CONTENT = "content"
    TECHNICAL = "technisch"
    LINKS = "links"
    STRUCTURE = "structuur"


class ProviderId(str, Enum):
    """AI answer providers the scanner can query"""
    CHATGPT = "chatgpt"
    CLAUDE = "claude"
    PERPLEXITY = "perplexity"


# English spellings the generative provider sometimes returns
_EFFORT_ALIASES = {"low": Effort.LOW, "high": Effort.HIGH}
_CATEGORY_ALIASES = {
    "technical": SuggestionCategory.TECHNICAL,
    "structure": SuggestionCategory.STRUCTURE,
}


@dataclass(frozen=True)
class ProviderAnswer:
    """Classified answer returned by a provider adapter"""
    answer_text: str
    mentioned: bool
    sentiment: Sentiment

    @classmethod
    def empty(cls) -> "ProviderAnswer":
        return cls(answer_text="", mentioned=False, sentiment=Sentiment.NEUTRAL)


@dataclass(frozen=True)
class RawResult:
    """One answer for one (question, provider) pair"""
    platform: str
    question: str
    response: str
    mentioned: bool
    sentiment: Sentiment

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "question": self.question,
            "response": self.response,
            "mentioned": self.mentioned,
            "sentiment": self.sentiment.value,
        }


@dataclass
class PlatformResult:
    """Per-provider summary of a finished scan"""
    score: int
    mention_rate: float
    sentiment: Sentiment
    questions_asked: int
    questions_mentioned: int

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "mention_rate": self.mention_rate,
            "sentiment": self.sentiment.value,
            "questions_asked": self.questions_asked,
            "questions_mentioned": self.questions_mentioned,
        }


@dataclass
class PlatformStat:
    """Running counts for one provider while a scan is in progress"""
    total: int = 0
    mentioned: int = 0
    positive: int = 0
    negative: int = 0

    def record(self, answer: ProviderAnswer) -> None:
        self.total += 1
        if not answer.mentioned:
            return
        self.mentioned += 1
        if answer.sentiment == Sentiment.POSITIVE:
            self.positive += 1
        elif answer.sentiment == Sentiment.NEGATIVE:
            self.negative += 1

    @property
    def mention_rate(self) -> float:
        return self.mentioned / self.total if self.total > 0 else 0.0

    @property
    def sentiment_score(self) -> float:
        """(positive - negative) / mentioned, 0 when nothing was mentioned"""
        if self.mentioned == 0:
            return 0.0
        return (self.positive - self.negative) / self.mentioned


@dataclass
class ScanOutcome:
    """Aggregate result of one scan"""
    geo_score: int
    mention_rate: float
    sentiment_score: float
    questions_asked: int
    questions_mentioned: int
    platforms: dict[str, PlatformResult] = field(default_factory=dict)
    raw_results: list[RawResult] = field(default_factory=list)

    @property
    def unmentioned_questions(self) -> list[str]:
        return [r.question for r in self.raw_results if not r.mentioned]

    def to_dict(self) -> dict:
        return {
            "geo_score": self.geo_score,
            "mention_rate": self.mention_rate,
            "sentiment_score": self.sentiment_score,
            "questions_asked": self.questions_asked,
            "questions_mentioned": self.questions_mentioned,
            "platforms": {name: result.to_dict() for name, result in self.platforms.items()},
            "raw_results": [r.to_dict() for r in self.raw_results],
        }


class Suggestion(BaseModel):
    """A prioritized GEO improvement tip"""

    title: str = Field(..., min_length=1)
    description: str
    impact: int = Field(..., description="Estimated score improvement in points (1-20)")
    effort: Effort
    category: SuggestionCategory

    @field_validator("impact", mode="before")
    @classmethod
    def _clamp_impact(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError("impact must be a number")
        number = float(value)
        if not math.isfinite(number):
            raise ValueError("impact must be finite")
        return max(1, min(20, int(round(number))))

    @field_validator("effort", mode="before")
    @classmethod
    def _normalize_effort(cls, value: Any) -> Union[Effort, Any]:
        if isinstance(value, str):
            value = value.strip().lower()
            return _EFFORT_ALIASES.get(value, value)
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Union[SuggestionCategory, Any]:
        if isinstance(value, str):
            value = value.strip().lower()
            return _CATEGORY_ALIASES.get(value, value)
        return value

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
