#!/usr/bin/env python3
"""
Run Set Initialization Script

Creates the input workbook (test-data/RunSet.xlsx, sheet "SearchRuns")
with a few sample searches, so the automation can be started right away.

Usage:
    python scripts/create_run_set.py [output_path] [--force]
"""

import argparse
import sys
from datetime import date, timedelta
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import load_settings

COLUMNS = ("City", "CheckIn", "CheckOut")


def sample_rows(today=None):
    """Sample searches a few weeks ahead; the last one is deliberately inverted."""
    today = today or date.today()
    start = today + timedelta(days=30)
    return [
        ("Mumbai", start, start + timedelta(days=2)),
        ("Pune", start + timedelta(days=7), start + timedelta(days=9)),
        ("Delhi", start + timedelta(days=2), start),
    ]


def create_run_set(path, sheet_name, rows):
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_name

    sheet.append(COLUMNS)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    for city, check_in, check_out in rows:
        sheet.append([city, check_in.isoformat(), check_out.isoformat()])

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)


def main():
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Create a sample run set workbook")
    parser.add_argument("output", nargs="?", type=Path, default=settings.input_path)
    parser.add_argument("--force", action="store_true", help="Overwrite an existing workbook")
    args = parser.parse_args()

    if args.output.exists() and not args.force:
        print(f"⚠️  {args.output} already exists (use --force to overwrite)")
        sys.exit(1)

    rows = sample_rows()
    create_run_set(args.output, settings.input_sheet, rows)

    print(f"✅ Run set written to {args.output}")
    for city, check_in, check_out in rows:
        print(f"   - {city}: {check_in} -> {check_out}")
    print("\nℹ️  Rows whose check-out is not after check-in are skipped at run time.")


if __name__ == "__main__":
    main()
