from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from log_tree_triage.core.config import resolve_pipeline_config
from log_tree_triage.core.log_service import analyze_file
from log_tree_triage.core.models import format_message


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("LOG_TREE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Report the important errors of a tagged log file.")
    p.add_argument("log_path")
    p.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Minimum error code to report (default: LOG_TREE_THRESHOLD or 50)",
    )
    p.add_argument("--all", dest="show_all", action="store_true", help="Print every indexed message instead")
    p.add_argument("--stats", action="store_true", help="Print a parse/index summary at the end")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        cfg = resolve_pipeline_config()
        important, ordered, stats = asyncio.run(
            analyze_file(args.log_path, threshold=args.threshold, config=cfg)
        )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.show_all:
        for m in ordered:
            print(format_message(m))
    else:
        for text in important:
            print(text)

    if args.stats:
        print(
            f"\n{stats.lines} lines, {stats.unrecognized} unrecognized, "
            f"{stats.indexed} indexed ({stats.dropped_duplicates} duplicate timestamps dropped)."
        )


if __name__ == "__main__":
    main()
