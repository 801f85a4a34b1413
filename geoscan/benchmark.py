"""
Competitor Benchmark
====================

Scans a business's competitors with a small question budget so their GEO
scores can be shown next to the business's own score.
"""

import asyncio
from dataclasses import dataclass
from typing import Iterable, Optional, Union
import structlog

from .exceptions import BenchmarkNotAvailable
from .models import ProviderId, ScanOutcome
from .plans import PlanTier, resolve_plan
from .scanner import GeoScanner

logger = structlog.get_logger(__name__)

MAX_BENCHMARK_COMPETITORS = 3
BENCHMARK_QUESTIONS = 5


@dataclass(frozen=True)
class Business:
    name: str
    category: str
    city: str


@dataclass(frozen=True)
class Competitor:
    name: str
    category: Optional[str] = None
    city: Optional[str] = None
    website: Optional[str] = None


@dataclass
class CompetitorScan:
    """Scan outcome for one competitor"""
    competitor: Competitor
    outcome: ScanOutcome

    def to_dict(self) -> dict:
        return {
            "competitor": self.competitor.name,
            "geo_score": self.outcome.geo_score,
            "mention_rate": self.outcome.mention_rate,
            "sentiment_score": self.outcome.sentiment_score,
            "platforms": {
                name: result.to_dict() for name, result in self.outcome.platforms.items()
            },
        }


async def run_benchmark(
    scanner: GeoScanner,
    business: Business,
    competitors: Iterable[Competitor],
    plan: Union[str, PlanTier] = PlanTier.SMB,
    providers: Iterable[Union[str, ProviderId]] = (ProviderId.CLAUDE,),
    questions_limit: int = BENCHMARK_QUESTIONS,
) -> list[CompetitorScan]:
    """
    Scan up to three competitors concurrently.

    A competitor without its own category or city is asked about with the
    business's category and city.

    Raises:
        BenchmarkNotAvailable: On the free plan
    """
    if resolve_plan(plan) == PlanTier.FREE:
        raise BenchmarkNotAvailable("Competitor benchmark requires a paid plan")

    selected = list(competitors)[:MAX_BENCHMARK_COMPETITORS]
    providers = list(providers)
    log = logger.bind(component="Benchmark", business=business.name)

    if not selected:
        log.info("benchmark_skipped_no_competitors")
        return []

    log.info("benchmark_started", competitors=[c.name for c in selected])

    outcomes = await asyncio.gather(*(
        scanner.run_scan(
            competitor.name,
            competitor.category or business.category,
            competitor.city or business.city,
            questions_limit,
            providers,
        )
        for competitor in selected
    ))

    results = [
        CompetitorScan(competitor=competitor, outcome=outcome)
        for competitor, outcome in zip(selected, outcomes)
    ]

    log.info(
        "benchmark_completed",
        scores={r.competitor.name: r.outcome.geo_score for r in results},
    )
    return results
