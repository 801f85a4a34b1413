#!/usr/bin/env python3
"""GEO Scan command line

Runs a scan for one business and prints the outcome as JSON.

    geoscan "Bakkerij de Korrel" Bakkerij Amsterdam --questions 5 --providers claude
"""

import argparse
import asyncio
import json
import logging
import sys
import structlog

from geoscan.config import get_config
from geoscan.exceptions import GeoScanError
from geoscan.models import ProviderId
from geoscan.plans import PlanTier, scan_parameters
from geoscan.questions import MAX_QUESTIONS
from geoscan.scanner import GeoScanner
from geoscan.suggestions import generate_suggestions

logger = structlog.get_logger(__name__)


def setup_logging(log_level: str = "INFO"):
    """Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Measure how AI assistants talk about a business")
    parser.add_argument("name", help="Business name")
    parser.add_argument("category", help="Business category, e.g. Bakkerij")
    parser.add_argument("city", help="City the business operates in")
    parser.add_argument(
        "--questions",
        type=int,
        default=10,
        help=f"Number of questions to ask (max {MAX_QUESTIONS}, default: 10)",
    )
    parser.add_argument(
        "--providers",
        nargs="+",
        choices=[p.value for p in ProviderId],
        help="Providers to query (default: chatgpt)",
    )
    parser.add_argument(
        "--plan",
        choices=[p.value for p in PlanTier],
        help="Take question count and providers from a plan instead",
    )
    parser.add_argument(
        "--suggestions",
        action="store_true",
        help="Also generate improvement suggestions",
    )
    return parser


async def run(args: argparse.Namespace) -> dict:
    config = get_config()
    config.log_configuration()

    questions_limit = args.questions
    providers = args.providers or [ProviderId.CHATGPT.value]
    if args.plan:
        params = scan_parameters(args.plan, config)
        questions_limit = params.questions_limit
        providers = list(params.providers)

    scanner = GeoScanner.from_config(config)
    outcome = await scanner.run_scan(args.name, args.category, args.city, questions_limit, providers)
    result = outcome.to_dict()

    if args.suggestions:
        suggestions = await generate_suggestions(
            args.name,
            args.category,
            outcome.geo_score,
            outcome.mention_rate,
            outcome.raw_results,
            config=config,
        )
        result["suggestions"] = [s.to_dict() for s in suggestions]

    return result


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(get_config().log_level)

    try:
        result = asyncio.run(run(args))
    except GeoScanError as e:
        logger.error("scan_rejected", error=str(e))
        return 2
    except KeyboardInterrupt:
        logger.info("scan_interrupted")
        return 130

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
