#!/usr/bin/env python3
"""
Hotel Search Automation - Main Entry Point

Reads search runs (city, check-in, check-out) from the input workbook and
drives one full browser search per row, writing each city's hotels to
its own sheet of the output workbook.

Usage:
    python main.py
    python main.py --input test-data/RunSet.xlsx --pages 3 --browser firefox --headless
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from config.settings import load_settings
from reporting.run_set import RunSetError
from services.search_runner import run_all

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level="INFO", log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT, handlers=handlers)


def build_parser():
    parser = argparse.ArgumentParser(description="Hotel Search Automation")
    parser.add_argument("--input", type=Path, help="Input workbook with search runs")
    parser.add_argument("--sheet", help="Sheet holding the search runs")
    parser.add_argument("--output", type=Path, help="Output workbook for results")
    parser.add_argument("--pages", type=int, help="Number of result pages to write per city")
    parser.add_argument("--browser", choices=["chrome", "edge", "firefox"], help="Browser to drive")
    parser.add_argument("--headless", action="store_true", default=None, help="Run the browser headless")
    parser.add_argument("--base-url", help="Hotel search site URL")
    parser.add_argument("--screenshots", type=Path, help="Screenshot root folder")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser


def apply_overrides(settings, args):
    overrides = {
        "input_path": args.input,
        "input_sheet": args.sheet,
        "output_path": args.output,
        "pages": max(1, args.pages) if args.pages is not None else None,
        "browser": args.browser,
        "headless": args.headless,
        "base_url": args.base_url,
        "screenshot_dir": args.screenshots,
        "log_file": args.log_file,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = apply_overrides(load_settings(), args)
    configure_logging(args.log_level, settings.log_file)
    logger = logging.getLogger("main")

    try:
        results = run_all(settings)
    except RunSetError as e:
        logger.error(str(e))
        return 2

    if not results:
        logger.error(f"No valid rows found in {settings.input_path} / {settings.input_sheet}")
        return 2

    print("\n" + "=" * 60)
    print("RUN SUMMARY")
    print("=" * 60)
    for result in results:
        status = "OK  " if result.succeeded else "FAIL"
        detail = f"{result.rows_written} hotels" if result.succeeded else result.error
        print(f"  [{status}] {result.request}: {detail}")
    print(f"\nResults workbook: {settings.output_path}")

    return 0 if all(r.succeeded for r in results) else 1


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
