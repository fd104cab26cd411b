#!/usr/bin/env python
"""CLI for browsing a feedview article feed in the terminal."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field, field_validator

from feedview.config import FeedviewConfig, create_session, get_default_config_path, load_config
from feedview.data import RevealedArticle
from feedview.formatting import (
    format_last_updated,
    format_published_at,
    short_source,
    stagger_delay_ms,
)
from feedview.reveal import ManualProximityTrigger

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str = ""
    config: Path
    pages: int = Field(default=1, ge=1)

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def print_batch(batch: list[RevealedArticle], config: FeedviewConfig) -> None:
    tz = ZoneInfo(config.display.timezone)
    for item in batch:
        article = item.article
        delay = stagger_delay_ms(item.position, config.reveal.batch_size, config.reveal.stagger_ms)
        logger.debug(f"Article {item.position} animation delay: {delay}ms")
        print(f"{item.position + 1}. {article.title}")
        print(f"   [{short_source(article.source, config.display.source_label_max)}] "
              f"{format_published_at(article.published_at, tz)}")
        print(f"   {article.url}")


async def run(args: CLIArgs) -> int:
    """Load the feed, apply the query and print the requested pages.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level)

    trigger = ManualProximityTrigger()
    session = create_session(config, trigger=trigger)
    session.controller.replaced.connect(lambda batch: print_batch(batch, config))
    session.controller.appended.connect(lambda batch: print_batch(batch, config))
    session.controller.exhausted.connect(lambda: print("\n-- end of results --"))
    session.load_failed.connect(lambda message: logger.error(f"データの読み込みに失敗しました: {message}"))

    session.set_query(args.query)
    if not await session.start():
        return 1

    tz = ZoneInfo(config.display.timezone)
    logger.info(f"{session.filtered_count} articles")
    if session.last_updated:
        logger.info(f"Last updated: {format_last_updated(session.last_updated, tz)}")
    if session.filtered_count == 0:
        print("No matching articles.")

    for _ in range(args.pages - 1):
        if not trigger.fire():
            break
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse a news feed with title search.")
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Title search text (default: show all articles)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--pages",
        "-p",
        type=int,
        default=1,
        help="Number of batches to reveal (default: 1)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(query=ns.query, config=config_path, pages=ns.pages)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
