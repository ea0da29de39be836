#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SAPL indications scraper, command line.

What it does:
- scrape   fetch the listing pages, consolidate, write JSON (or CSV)
- view     filter/search/sort a JSON export (or a live scrape) and print it
- summary  category counts as CSV, optionally a PNG bar chart
- serve    local JSON API for the display client

Usage:
  sapl-scrape scrape --year 2025 --pages 2 -o indicacoes.json
  sapl-scrape view --input indicacoes.json --category "Serviços Públicos" --sort date
  sapl-scrape summary --input indicacoes.json --png category_counts.png
  sapl-scrape serve --port 8080
"""

import argparse
import csv
import json
import logging
import sys
from functools import partial
from pathlib import Path
from typing import List, Optional

from . import settings
from .errors import DataUnavailableError
from .fetch import scrape_pages
from .models import ALL, CATEGORIES, CSV_COLUMNS, LegislativeMatter
from .pipeline import collect_indications
from .query import SORT_BY_ID, SORT_OPTIONS, view

logger = logging.getLogger("sapl_scrape")

EXIT_NO_DATA = 2
EMPTY_DATASET_MESSAGE = "Nenhuma indicação foi encontrada. Verifique se há dados disponíveis na fonte."


# ---- IO helpers ----
def write_json(matters: List[LegislativeMatter], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([m.to_json_dict() for m in matters], f, ensure_ascii=False, indent=2)


def write_csv(matters: List[LegislativeMatter], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        w.writeheader()
        w.writerows(m.to_csv_row() for m in matters)


def read_json(path: str) -> List[LegislativeMatter]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [LegislativeMatter.from_json_dict(d) for d in data]


def urls_from_args(args) -> List[str]:
    if args.url:
        return list(args.url)
    return settings.listing_urls(year=args.year, author=args.author, pages=args.pages)


def scrape_from_args(args) -> List[LegislativeMatter]:
    scraper = partial(scrape_pages, max_workers=args.workers, timeout=args.timeout,
                      progress=not args.quiet)
    return collect_indications(urls_from_args(args), scraper=scraper)


def load_matters(args) -> List[LegislativeMatter]:
    if getattr(args, "input", None):
        return read_json(args.input)
    return scrape_from_args(args)


def format_row(m: LegislativeMatter) -> str:
    summary = m.summary if len(m.summary) <= 90 else m.summary[:87] + "..."
    return f"{m.id:<15} {m.presentation_date:<12} {m.category:<28} {m.protocol:<8} {summary}"


# ---- Commands ----
def cmd_scrape(args) -> int:
    matters = scrape_from_args(args)
    if args.csv:
        out = args.output or settings.OUT_CSV
        write_csv(matters, out)
    else:
        out = args.output or settings.OUT_JSON
        write_json(matters, out)
    print(f"Wrote {len(matters)} matters to {out}")
    return 0


def cmd_view(args) -> int:
    matters = load_matters(args)
    if not matters:
        print(EMPTY_DATASET_MESSAGE, file=sys.stderr)
        return EXIT_NO_DATA

    rows = view(matters, category=args.category, search_query=args.search, sort_by=args.sort)
    if args.output:
        write_csv(rows, args.output)
        print(f"Wrote {len(rows)} of {len(matters)} matters to {args.output}")
        return 0

    if not rows:
        print("Nenhuma indicação corresponde aos filtros.")
        return 0
    for m in rows:
        print(format_row(m))
    print(f"\n{len(rows)} of {len(matters)} matters")
    return 0


def cmd_summary(args) -> int:
    from .report import counts_frame, plot_counts, write_counts_csv

    matters = load_matters(args)
    if not matters:
        print(EMPTY_DATASET_MESSAGE, file=sys.stderr)
        return EXIT_NO_DATA

    frame = counts_frame(matters)
    print(frame.to_string(index=False))
    write_counts_csv(frame, args.output)
    print(f"Category counts saved as {args.output}")
    if args.png:
        plot_counts(frame, args.png)
        print(f"Chart saved as {args.png}")
    return 0


def cmd_serve(args) -> int:
    from .server import serve

    serve(host=args.host, port=args.port, urls=urls_from_args(args))
    return 0


# ---- Parser ----
def add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, default=settings.YEAR, help="Matter year (default: %(default)s)")
    p.add_argument("--author", type=int, default=settings.AUTHOR_ID, help="SAPL author id (default: %(default)s)")
    p.add_argument("--pages", type=int, default=settings.PAGES, help="Listing pages to fetch (default: %(default)s)")
    p.add_argument("--url", action="append", help="Explicit listing URL (repeatable; overrides year/author/pages)")
    p.add_argument("--workers", type=int, default=settings.MAX_WORKERS, help="Parallel page fetches")
    p.add_argument("--timeout", type=float, default=settings.REQUEST_TIMEOUT, help="Per-request timeout (s)")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sapl-scrape", description="Scrape indications from the SAPL portal.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors, no progress bar")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("scrape", help="Fetch and consolidate the listing pages")
    add_source_args(p)
    p.add_argument("-o", "--output", help="Output file (default: indicacoes.json / indicacoes.csv)")
    p.add_argument("--csv", action="store_true", help="Write CSV instead of JSON")
    p.set_defaults(func=cmd_scrape)

    p = sub.add_parser("view", help="Filter, search and sort matters")
    add_source_args(p)
    p.add_argument("-i", "--input", help="JSON export to read instead of scraping")
    p.add_argument("--category", default=ALL, choices=(ALL,) + CATEGORIES, help="Category filter")
    p.add_argument("--search", default="", help="Text searched in id, summary, address, neighborhood, protocol")
    p.add_argument("--sort", default=SORT_BY_ID, choices=SORT_OPTIONS, help="Sort order (newest first)")
    p.add_argument("-o", "--output", help="Write the view to CSV instead of printing it")
    p.set_defaults(func=cmd_view)

    p = sub.add_parser("summary", help="Category counts report")
    add_source_args(p)
    p.add_argument("-i", "--input", help="JSON export to read instead of scraping")
    p.add_argument("-o", "--output", default=settings.OUT_COUNTS_CSV, help="Counts CSV (default: %(default)s)")
    p.add_argument("--png", nargs="?", const=settings.OUT_COUNTS_PNG, help="Also save a bar chart")
    p.set_defaults(func=cmd_summary)

    p = sub.add_parser("serve", help="Run the local JSON API")
    add_source_args(p)
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8080)
    p.set_defaults(func=cmd_serve)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    logging.basicConfig(level=level, format=settings.LOG_FORMAT)

    try:
        return args.func(args)
    except DataUnavailableError as e:
        logger.error(e.message)
        print(e.message, file=sys.stderr)
        return EXIT_NO_DATA


if __name__ == "__main__":
    sys.exit(main())
