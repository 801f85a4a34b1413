"""Subscription tiers and the scan parameters they grant.

Counting scans per day and charging for plans happen outside the scan
engine; this module only maps a plan to what a scan may use.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .config import GeoScanConfig, get_config
from .exceptions import UnknownPlanError
from .models import ProviderId


class PlanTier(str, Enum):
    FREE = "gratis"
    SMB = "mkb"
    AGENCY = "bureau"


@dataclass(frozen=True)
class PlanLimits:
    scans_per_day: int
    queries_per_scan: int
    competitors: int
    email_reports: bool
    monthly_price: int


PLAN_LIMITS = {
    PlanTier.FREE: PlanLimits(scans_per_day=1, queries_per_scan=5, competitors=0,
                              email_reports=False, monthly_price=0),
    PlanTier.SMB: PlanLimits(scans_per_day=3, queries_per_scan=50, competitors=3,
                             email_reports=True, monthly_price=39),
    PlanTier.AGENCY: PlanLimits(scans_per_day=20, queries_per_scan=50, competitors=10,
                                email_reports=True, monthly_price=99),
}


@dataclass(frozen=True)
class ScanParameters:
    questions_limit: int
    providers: tuple[str, ...]


def resolve_plan(plan: Union[str, PlanTier]) -> PlanTier:
    try:
        return PlanTier(plan)
    except ValueError:
        raise UnknownPlanError(f"Unknown plan: {plan!r}") from None


def get_limits(plan: Union[str, PlanTier]) -> PlanLimits:
    return PLAN_LIMITS[resolve_plan(plan)]


def scan_parameters(
    plan: Union[str, PlanTier],
    config: Optional[GeoScanConfig] = None,
) -> ScanParameters:
    """
    Work out how many questions and which providers a plan's scan uses.

    Claude is always queried. Paid plans add Perplexity when its API key
    is configured.
    """
    tier = resolve_plan(plan)
    config = config or get_config()

    providers = [ProviderId.CLAUDE.value]
    if tier != PlanTier.FREE and config.perplexity.is_configured:
        providers.append(ProviderId.PERPLEXITY.value)

    return ScanParameters(
        questions_limit=PLAN_LIMITS[tier].queries_per_scan,
        providers=tuple(providers),
    )
