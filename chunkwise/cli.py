"""Command-line entry point: run a crawl from an input document, write JSON Lines."""

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from chunkwise.logging_config import configure_logging
from chunkwise.models.crawl_request import CrawlInput
from chunkwise.services.crawler import run_crawl
from chunkwise.services.sink import JsonLinesSink

logger = logging.getLogger("chunkwise.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl pages, extract their main article, and write chunked page records.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="JSON file with the crawl options (startUrls, maxPages, chunkSize, ...)",
    )
    parser.add_argument(
        "--output",
        default="dataset.jsonl",
        type=Path,
        help="JSON Lines file that page records are appended to",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def load_input(path: Path) -> CrawlInput:
    """Read and validate the crawl options stored at *path*."""
    return CrawlInput.model_validate_json(path.read_text(encoding="utf-8"))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "INFO")

    try:
        options = load_input(args.input)
    except (OSError, ValidationError) as exc:
        logger.error("Could not read crawl input %s: %s", args.input, exc)
        return 2

    if not options.start_urls:
        logger.warning("No start URLs given in %s; nothing to crawl", args.input)

    stats = asyncio.run(run_crawl(options, JsonLinesSink(args.output)))
    logger.info(
        "Wrote %d record(s) to %s (%d skipped, %d failed)",
        stats.succeeded,
        args.output,
        stats.skipped,
        stats.failed,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
