"""GEO score formulas.

The aggregate score weighs mention rate 40, sentiment 30 and cross-provider
consistency 30. A single provider has no consistency signal, so its score
weighs mention rate 40 and sentiment 60.
"""

import math

from .models import PlatformResult, PlatformStat, Sentiment

MENTION_WEIGHT = 40
SENTIMENT_WEIGHT = 30
CONSISTENCY_WEIGHT = 30

PLATFORM_MENTION_WEIGHT = 40
PLATFORM_SENTIMENT_WEIGHT = 60

# Sentiment scores beyond these bounds get a non-neutral label
SENTIMENT_LABEL_THRESHOLD = 0.2


def normalize_sentiment(sentiment_score: float, mentioned: int) -> float:
    """
    Rescale a -1..1 sentiment score to 0..1.

    Without any mention there is no tone to measure, so the result is 0
    rather than the neutral midpoint.
    """
    if mentioned <= 0:
        return 0.0
    clamped = max(-1.0, min(1.0, sentiment_score))
    return (clamped + 1) / 2


def compute_geo_score(
    mention_rate: float,
    sentiment_score: float,
    consistency: float,
    mentioned: int,
) -> int:
    """Composite 0-100 score across all providers"""
    score = (
        mention_rate * MENTION_WEIGHT
        + normalize_sentiment(sentiment_score, mentioned) * SENTIMENT_WEIGHT
        + consistency * CONSISTENCY_WEIGHT
    )
    return max(0, min(100, round_half_up(score)))


def compute_platform_score(stat: PlatformStat) -> int:
    """0-100 score for a single provider"""
    score = (
        stat.mention_rate * PLATFORM_MENTION_WEIGHT
        + normalize_sentiment(stat.sentiment_score, stat.mentioned) * PLATFORM_SENTIMENT_WEIGHT
    )
    return max(0, min(100, round_half_up(score)))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def sentiment_label(sentiment_score: float) -> Sentiment:
    if sentiment_score > SENTIMENT_LABEL_THRESHOLD:
        return Sentiment.POSITIVE
    if sentiment_score < -SENTIMENT_LABEL_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def provider_consistency(stats: dict[str, PlatformStat]) -> float:
    """Fraction of requested providers that mentioned the business at least once"""
    if not stats:
        return 0.0
    with_mentions = sum(1 for stat in stats.values() if stat.mentioned > 0)
    return with_mentions / len(stats)


def platform_result(stat: PlatformStat) -> PlatformResult:
    return PlatformResult(
        score=compute_platform_score(stat),
        mention_rate=stat.mention_rate,
        sentiment=sentiment_label(stat.sentiment_score),
        questions_asked=stat.total,
        questions_mentioned=stat.mentioned,
    )
