"""
GEO Suggestion Generator
========================

Turns scan results into at most five improvement tips. A generative model
writes tips tailored to the questions where the business was missing; when
that call fails, a fixed set of generic tips is returned instead.
"""

import json
from typing import Iterable, Optional
import aiohttp
import structlog
from pydantic import ValidationError

from .config import GeoScanConfig, OpenAIConfig, get_config
from .models import Effort, RawResult, Suggestion, SuggestionCategory
from .providers.base import bearer_headers, first_choice_content
from .scoring import round_half_up

logger = structlog.get_logger(__name__)

MAX_SUGGESTIONS = 5
MAX_UNMENTIONED_QUESTIONS = 10

SYSTEM_PROMPT = (
    "Je bent een GEO (Generative Engine Optimization) expert. Geef concrete, "
    "actionable adviezen in het Nederlands.\n"
    "Je antwoord moet een JSON object zijn met een veld \"suggestions\": een array met "
    "maximaal 5 suggesties, elk met: title, description, impact (1-20 punten score "
    "verbetering), effort (laag/medium/hoog), category (content/technisch/links/structuur)."
)

FALLBACK_SUGGESTIONS = (
    Suggestion(
        title="Publiceer een autoritatief bedrijfsartikel",
        description=(
            "Schrijf een uitgebreid artikel over uw vakgebied op uw website. "
            "AI-modellen citeren autoritatieve bronnen."
        ),
        impact=12,
        effort=Effort.MEDIUM,
        category=SuggestionCategory.CONTENT,
    ),
    Suggestion(
        title="Optimaliseer Google Business Profile",
        description=(
            "Zorg voor een volledig ingevuld en geverifieerd Google Business profiel "
            "met recente reviews en foto's."
        ),
        impact=8,
        effort=Effort.LOW,
        category=SuggestionCategory.TECHNICAL,
    ),
    Suggestion(
        title="Structured data markup toevoegen",
        description=(
            "Voeg Schema.org markup toe (LocalBusiness, Reviews, FAQ) zodat AI-modellen "
            "uw bedrijfsinfo beter begrijpen."
        ),
        impact=10,
        effort=Effort.MEDIUM,
        category=SuggestionCategory.TECHNICAL,
    ),
)


class SuggestionShapeError(ValueError):
    """Raised when the model's JSON does not have the expected shape"""


def fallback_suggestions() -> list[Suggestion]:
    return [s.model_copy() for s in FALLBACK_SUGGESTIONS]


def build_user_prompt(
    business_name: str,
    category: str,
    geo_score: int,
    mention_rate: float,
    unmentioned_questions: Iterable[str],
) -> str:
    questions = "\n".join(unmentioned_questions)
    return (
        f"Bedrijf: {business_name} | Categorie: {category} | GEO Score: {geo_score}/100 "
        f"| Vermelding: {round_half_up(mention_rate * 100)}%\n\n"
        f"Vragen waarbij het bedrijf NIET werd vermeld:\n{questions}\n\n"
        "Geef 5 concrete GEO-verbeteringstips in JSON format."
    )


def parse_suggestions(content: str) -> list[Suggestion]:
    """
    Parse the model's JSON answer into suggestions.

    A missing ``suggestions`` field counts as no suggestions. Items that do
    not validate are skipped.

    Raises:
        ValueError: If the content is not JSON or not shaped as expected
    """
    data = json.loads(content or '{"suggestions": []}')
    if not isinstance(data, dict):
        raise SuggestionShapeError("expected a JSON object")

    items = data.get("suggestions") or []
    if not isinstance(items, list):
        raise SuggestionShapeError("'suggestions' is not a list")

    suggestions = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            suggestions.append(Suggestion.model_validate(item))
        except ValidationError as e:
            logger.warning("suggestion_item_invalid", errors=e.error_count())
        if len(suggestions) == MAX_SUGGESTIONS:
            break

    return suggestions


class SuggestionGenerator:
    """Generate GEO improvement tips with OpenAI, falling back to fixed tips"""

    def __init__(self, config: OpenAIConfig, request_timeout: float = 30.0):
        self.config = config
        self.request_timeout = request_timeout
        self.logger = logger.bind(component="SuggestionGenerator")

    def build_payload(self, user_prompt: str) -> dict:
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            "response_format": {"type": "json_object"},
            "max_tokens": 800,
        }

    async def _request_completion(self, user_prompt: str) -> str:
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                self.config.endpoint,
                headers=bearer_headers(self.config.api_key),
                json=self.build_payload(user_prompt),
            ) as response:
                if response.status != 200:
                    error = await response.text()
                    raise RuntimeError(f"OpenAI returned HTTP {response.status}: {error[:200]}")

                data = await response.json()
                return first_choice_content(data)

    async def generate(
        self,
        business_name: str,
        category: str,
        geo_score: int,
        mention_rate: float,
        raw_results: Iterable[RawResult],
    ) -> list[Suggestion]:
        """
        Produce up to five suggestions for a scanned business.

        Never raises; any failure returns the fixed fallback list.
        """
        if not self.config.is_configured:
            self.logger.warning("suggestions_provider_not_configured")
            return fallback_suggestions()

        unmentioned = [r.question for r in raw_results if not r.mentioned]
        user_prompt = build_user_prompt(
            business_name,
            category,
            geo_score,
            mention_rate,
            unmentioned[:MAX_UNMENTIONED_QUESTIONS],
        )

        try:
            content = await self._request_completion(user_prompt)
            suggestions = parse_suggestions(content)
        except Exception as e:
            self.logger.error("suggestion_generation_failed", error=str(e))
            return fallback_suggestions()

        self.logger.info("suggestions_generated", count=len(suggestions))
        return suggestions


async def generate_suggestions(
    business_name: str,
    category: str,
    geo_score: int,
    mention_rate: float,
    raw_results: Iterable[RawResult],
    *,
    config: Optional[GeoScanConfig] = None,
) -> list[Suggestion]:
    """Generate suggestions using the configured OpenAI credentials"""
    config = config or get_config()
    generator = SuggestionGenerator(config.openai, config.scan.request_timeout)
    return await generator.generate(business_name, category, geo_score, mention_rate, raw_results)
