from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from channel_listings.config import ScraperSettings
from channel_listings.errors import ScraperError
from channel_listings.service import ChannelListingService, channels_payload

logger = logging.getLogger("channel_listings")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape TV channel listings from supported providers")
    parser.add_argument("--write-files", action="store_true", help="Write one JSON file per provider instead of printing JSON")
    parser.add_argument("--output-dir", default=None, help="Directory for --write-files output (default: data)")
    parser.add_argument("--max-concurrent", type=int, default=None, help="Providers scraped in parallel per wave")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--retries", type=int, default=None, help="Attempts per provider")
    parser.add_argument("--retry-delay-ms", type=int, default=None, help="Base retry delay in milliseconds")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Page navigation timeout in milliseconds")
    parser.add_argument("--log-level", default="INFO", help="Logging level (stderr)")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run-all", help="Scrape every provider (default)")
    one = sub.add_parser("run-one", help="Scrape a single provider")
    one.add_argument("provider", help="Provider name, e.g. DIRECTV, DISH, SKY, Virgin")
    return parser


def _settings_from_args(args: argparse.Namespace) -> ScraperSettings:
    return ScraperSettings().with_overrides(
        headless=False if args.headed else None,
        max_concurrent=args.max_concurrent,
        retry_attempts=args.retries,
        retry_base_delay_ms=args.retry_delay_ms,
        navigation_timeout_ms=args.timeout_ms,
        output_dir=args.output_dir,
    )


async def _run_all(service: ChannelListingService, write_files: bool) -> int:
    summary = await service.scrape_all(write_files=write_files)
    if write_files:
        return 1 if summary.failed else 0
    # Failed providers are left out of stdout but already logged on stderr.
    print(json.dumps(channels_payload(summary.results), indent=2, ensure_ascii=False))
    return 0


async def _run_one(service: ChannelListingService, provider: str, write_files: bool) -> int:
    result = await service.scrape_provider(provider, write_files=write_files)
    if write_files:
        return 0 if result.success else 1
    print(json.dumps(channels_payload([result]), indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = _settings_from_args(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    service = ChannelListingService(settings)
    try:
        if args.command == "run-one":
            return asyncio.run(_run_one(service, args.provider, args.write_files))
        return asyncio.run(_run_all(service, args.write_files))
    except ScraperError as exc:
        logger.error("Error: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
