#!/usr/bin/env python3
"""
Lottery Sales CLI — export files from the submission snapshot, or run the API server.

USAGE:
  lottery-sales export                                      # CSV of all finalized submissions
  lottery-sales export --format excel                       # 3-sheet workbook
  lottery-sales export --format excel --district Colombo --start-date 2025-01-01 --end-date 2025-01-31
  lottery-sales export --output ./out/report.xlsx --format excel

  lottery-sales serve                                       # Start API server
  lottery-sales serve --port 8000
"""
from __future__ import annotations

import argparse
import datetime as dt
import os
import sys
from pathlib import Path

from lottery_sales.config import REPORTS_FOLDER, SUBMISSIONS_FILE, ROLE_ZONE_MANAGER
from lottery_sales.data.schemas import CurrentUser, SubmissionFilter
from lottery_sales.data.store import SubmissionStore
from lottery_sales.errors import ExportError
from lottery_sales.reports import sales_report
from lottery_sales.logging_config import configure_logging


def _build_filter(args) -> SubmissionFilter:
    """Build a SubmissionFilter from CLI args."""
    return SubmissionFilter(
        start_date=dt.date.fromisoformat(args.start_date) if args.start_date else None,
        end_date=dt.date.fromisoformat(args.end_date) if args.end_date else None,
        district=args.district,
        city=args.city,
    )


def cmd_export(args):
    """Write the CSV or Excel export for all finalized submissions."""
    print("\n" + "=" * 70)
    print("  LOTTERY SALES — EXPORT")
    print("=" * 70)

    store = SubmissionStore(Path(args.data)).load()
    # The CLI runs with a manager-level view of the whole store
    operator = CurrentUser(id="cli", role=ROLE_ZONE_MANAGER, username="cli")

    try:
        result = sales_report.generate_export(store, operator, _build_filter(args), args.format)
    except ExportError as e:
        print(f"  ERROR: {e.message}")
        sys.exit(1)

    out = Path(args.output) if args.output else REPORTS_FOLDER / result.filename
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(result.content)

    print(f"  {store.count():,} submissions in snapshot")
    print(f"  Output: {out.resolve()} ({len(result.content):,} bytes)")
    print("=" * 70 + "\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Lottery Sales API on port {args.port}...")
    uvicorn.run("lottery_sales.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Lottery Sales — weekly ticket-sales reporting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export submissions to CSV or Excel")
    export_parser.add_argument("--format", choices=["csv", "excel"], default="csv", help="File format (default csv)")
    export_parser.add_argument("--start-date", help="YYYY-MM-DD (needs --end-date)")
    export_parser.add_argument("--end-date", help="YYYY-MM-DD (needs --start-date)")
    export_parser.add_argument("--district", help="District substring filter")
    export_parser.add_argument("--city", help="City substring filter")
    export_parser.add_argument("--data", default=str(SUBMISSIONS_FILE), help="Submission snapshot JSON")
    export_parser.add_argument("--output", help="Output file (default: reports folder)")
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    configure_logging()
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
