"""Mention detection and keyword sentiment for AI answers."""

from typing import Iterable, Optional

from .models import Sentiment

POSITIVE_KEYWORDS = (
    "uitstekend",
    "excellent",
    "geweldig",
    "top",
    "beste",
    "aangeraden",
    "aanbevolen",
    "betrouwbaar",
    "professioneel",
    "goed",
)

NEGATIVE_KEYWORDS = (
    "slecht",
    "niet goed",
    "matig",
    "problemen",
    "klachten",
    "oplichting",
    "teleurstelling",
)


def is_mentioned(answer_text: str, business_name: str) -> bool:
    """Case-insensitive substring check; an empty name never matches"""
    name = business_name.strip().lower()
    if not name:
        return False
    return name in answer_text.lower()


def score_sentiment(
    answer_text: str,
    positive_keywords: Iterable[str] = POSITIVE_KEYWORDS,
    negative_keywords: Iterable[str] = NEGATIVE_KEYWORDS,
) -> Sentiment:
    """Compare how many positive and negative keywords occur in the text"""
    text = answer_text.lower()

    positive_count = sum(1 for word in positive_keywords if word in text)
    negative_count = sum(1 for word in negative_keywords if word in text)

    if positive_count > negative_count:
        return Sentiment.POSITIVE
    elif negative_count > positive_count:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def classify(
    answer_text: str,
    business_name: str,
    positive_keywords: Optional[Iterable[str]] = None,
    negative_keywords: Optional[Iterable[str]] = None,
) -> tuple[bool, Sentiment]:
    """
    Classify an answer for brand mention and tone.

    Sentiment is only scored when the business is mentioned; otherwise
    it is always neutral.

    Note that substring matching flags generic names that are common words
    and misses paraphrased or misspelled names.
    """
    mentioned = is_mentioned(answer_text, business_name)
    if not mentioned:
        return False, Sentiment.NEUTRAL

    sentiment = score_sentiment(
        answer_text,
        positive_keywords if positive_keywords is not None else POSITIVE_KEYWORDS,
        negative_keywords if negative_keywords is not None else NEGATIVE_KEYWORDS,
    )
    return True, sentiment
