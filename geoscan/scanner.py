"""
GEO Scan Orchestrator
=====================

Asks every generated question to every requested provider, in small
concurrent batches, and turns the classified answers into a GEO score.
"""

import asyncio
from typing import Iterable, Mapping, Optional, Protocol, Union
import structlog

from .config import GeoScanConfig, ScanSettings, get_config
from .exceptions import UnknownProviderError
from .models import PlatformStat, ProviderAnswer, ProviderId, RawResult, ScanOutcome
from .providers import build_providers
from .questions import generate_questions
from .scoring import compute_geo_score, platform_result, provider_consistency

logger = structlog.get_logger(__name__)


class AnswerProvider(Protocol):
    async def ask(self, question: str, business_name: str) -> ProviderAnswer:
        ...


def _provider_key(provider: Union[str, ProviderId]) -> str:
    return provider.value if isinstance(provider, ProviderId) else provider


class GeoScanner:
    """
    Run GEO scans against a set of answer providers.

    The provider registry is passed in explicitly, so tests and callers can
    swap in their own adapters.
    """

    def __init__(
        self,
        providers: Mapping[str, AnswerProvider],
        settings: Optional[ScanSettings] = None,
    ):
        self.providers = dict(providers)
        self.settings = settings or ScanSettings()
        self.logger = logger.bind(component="GeoScanner")

    @classmethod
    def from_config(cls, config: Optional[GeoScanConfig] = None) -> "GeoScanner":
        config = config or get_config()
        return cls(build_providers(config), config.scan)

    async def _ask(self, provider_id: str, question: str, business_name: str) -> ProviderAnswer:
        provider = self.providers[provider_id]
        try:
            return await asyncio.wait_for(
                provider.ask(question, business_name),
                timeout=self.settings.request_timeout,
            )
        except Exception as e:
            self.logger.error(
                "provider_ask_failed",
                provider=provider_id,
                question=question,
                error=repr(e),
            )
            return ProviderAnswer.empty()

    async def run_scan(
        self,
        business_name: str,
        category: str,
        city: str,
        questions_limit: int = 10,
        providers: Iterable[Union[str, ProviderId]] = (ProviderId.CHATGPT,),
    ) -> ScanOutcome:
        """
        Run a full scan for one business.

        Args:
            business_name: Name to look for in answers
            category: Business category used in the questions
            city: City used in the questions
            questions_limit: Number of questions to ask (max 50)
            providers: Provider ids to query

        Returns:
            ScanOutcome with aggregate and per-provider results

        Raises:
            UnknownProviderError: If a provider id is not in the registry
        """
        provider_ids = list(dict.fromkeys(_provider_key(p) for p in providers))
        for provider_id in provider_ids:
            if provider_id not in self.providers:
                raise UnknownProviderError(provider_id)

        questions = generate_questions(business_name, category, city, questions_limit)
        stats = {provider_id: PlatformStat() for provider_id in provider_ids}
        raw_results: list[RawResult] = []

        self.logger.info(
            "scan_started",
            business=business_name,
            questions=len(questions),
            providers=provider_ids,
        )

        batch_size = self.settings.batch_size
        if provider_ids:
            for start in range(0, len(questions), batch_size):
                batch = questions[start:start + batch_size]
                pairs = [(q, p) for q in batch for p in provider_ids]

                answers = await asyncio.gather(*(
                    self._ask(provider_id, question, business_name)
                    for question, provider_id in pairs
                ))

                for (question, provider_id), answer in zip(pairs, answers):
                    raw_results.append(RawResult(
                        platform=provider_id,
                        question=question,
                        response=answer.answer_text[:self.settings.answer_max_chars],
                        mentioned=answer.mentioned,
                        sentiment=answer.sentiment,
                    ))
                    stats[provider_id].record(answer)

                self.logger.debug("scan_batch_completed", start=start, size=len(batch))

                # Rate limiting
                if start + batch_size < len(questions):
                    await asyncio.sleep(self.settings.batch_delay)

        outcome = self._build_outcome(stats, raw_results)

        self.logger.info(
            "scan_completed",
            business=business_name,
            geo_score=outcome.geo_score,
            mention_rate=outcome.mention_rate,
            questions_asked=outcome.questions_asked,
        )
        return outcome

    def _build_outcome(
        self,
        stats: dict[str, PlatformStat],
        raw_results: list[RawResult],
    ) -> ScanOutcome:
        total_questions = sum(s.total for s in stats.values())
        total_mentioned = sum(s.mentioned for s in stats.values())
        total_positive = sum(s.positive for s in stats.values())
        total_negative = sum(s.negative for s in stats.values())

        mention_rate = total_mentioned / total_questions if total_questions > 0 else 0.0
        sentiment_score = (
            (total_positive - total_negative) / total_mentioned if total_mentioned > 0 else 0.0
        )

        geo_score = compute_geo_score(
            mention_rate,
            sentiment_score,
            provider_consistency(stats),
            total_mentioned,
        )

        return ScanOutcome(
            geo_score=geo_score,
            mention_rate=mention_rate,
            sentiment_score=sentiment_score,
            questions_asked=total_questions,
            questions_mentioned=total_mentioned,
            platforms={provider_id: platform_result(stat) for provider_id, stat in stats.items()},
            raw_results=raw_results,
        )


async def run_scan(
    business_name: str,
    category: str,
    city: str,
    questions_limit: int = 10,
    providers: Iterable[Union[str, ProviderId]] = (ProviderId.CHATGPT,),
    *,
    config: Optional[GeoScanConfig] = None,
    registry: Optional[Mapping[str, AnswerProvider]] = None,
) -> ScanOutcome:
    """Run a scan with providers built from configuration (or the given registry)"""
    config = config or get_config()
    scanner = GeoScanner(
        registry if registry is not None else build_providers(config),
        config.scan,
    )
    return await scanner.run_scan(business_name, category, city, questions_limit, providers)
