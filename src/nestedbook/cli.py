"""Command line entry point: merge configured nested books into a host book."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from nestedbook.context import BookContext, load_plugin_config
from nestedbook.exceptions import NestedBookError
from nestedbook.output_formatter import count_chapters, render_navigation_json, render_summary_markdown
from nestedbook.pipeline import apply_nested_books
from nestedbook.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nestedbook",
        description="Graft the summaries of nested books into a host book's SUMMARY.",
    )
    parser.add_argument("root", nargs="?", type=Path, default=Path("."), help="Host book directory")
    parser.add_argument("--summary-out", type=Path, help="Write the merged SUMMARY.md here instead of stdout")
    parser.add_argument("--navigation-out", type=Path, help="Write the navigation index as JSON here")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: NESTEDBOOK_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        context = BookContext.load(args.root)
        settings = load_plugin_config(context.config)
        asyncio.run(apply_nested_books(context, settings))
    except NestedBookError as exc:
        logger.error("%s", exc)
        return 1

    summary = render_summary_markdown(context.summary)
    if args.summary_out:
        args.summary_out.write_text(summary, encoding="utf-8")
        logger.info(
            "Wrote %s (%d entries)", args.summary_out, count_chapters(context.summary.chapters)
        )
    else:
        print(summary, end="")

    if args.navigation_out:
        args.navigation_out.write_text(render_navigation_json(context.navigation), encoding="utf-8")
        logger.info("Wrote %s (%d pages)", args.navigation_out, len(context.navigation))

    return 0
