"""CLI entry point.

This script aggregates jobs from every source, applies the filter selection
given on the command line, prints the matching listings, and optionally writes
them as a JSON list to disk.

Examples:
    python run_fetch.py
    python run_fetch.py --search "data" --recent --out jobs.json
    python run_fetch.py --category "Software Development" --facets
    python run_fetch.py --profile ~/.jobhop/profile.json --limit 5
    python run_fetch.py --detail remotive-1234567

The output file is a list of dicts (serialized Pydantic models).
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from job_feed.aggregator import aggregate_sync
from job_feed.config import get_settings
from job_feed.filters import filter_listings
from job_feed.models import FilterSelection
from job_feed.render import format_card, format_detail, greeting, load_profile, match_summary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Aggregate, filter and show jobs from multiple sources.")
    p.add_argument("--out", type=str, default=None, help="Optional output JSON file path.")
    p.add_argument("--category", type=str, default=None, help="Keep listings carrying this exact tag.")
    p.add_argument("--location", type=str, default=None, help="Keep listings with this exact location.")
    p.add_argument("--type", type=str, default=None, help="Keep listings with this employment type.")
    p.add_argument("--recent", action="store_true", help="Only listings published in the last 24h.")
    p.add_argument("--search", type=str, default="", help="Case-insensitive title/company search.")
    p.add_argument("--facets", action="store_true", help="Print the available filter values.")
    p.add_argument("--profile", type=str, default=None, help="Saved profile JSON for the greeting.")
    p.add_argument("--limit", type=int, default=20, help="Max cards printed (the JSON file is not capped).")
    p.add_argument("--detail", type=str, default=None, metavar="ID", help="Show one listing in full and exit.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings()

    selection = FilterSelection(
        category=args.category,
        location=args.location,
        type=args.type,
        recent_only=args.recent,
        search_text=args.search,
    )
    profile = load_profile(args.profile) if args.profile else None

    catalog, facets = aggregate_sync(settings=settings)

    if args.detail:
        match = next((j for j in catalog if j.id == args.detail), None)
        print(format_detail(match) if match else f"No job with id {args.detail}.")
        return

    jobs = filter_listings(catalog, selection)

    print(greeting(profile))
    if args.facets:
        print(f"Categories: {', '.join(facets.categories) or '-'}")
        print(f"Locations: {', '.join(facets.locations) or '-'}")
        print(f"Types: {', '.join(facets.types) or '-'}")
    print(match_summary(len(jobs)))

    if not jobs:
        print("No jobs found.")
    for job in jobs[: max(args.limit, 0)]:
        print()
        print(format_card(job, settings.preview_length))

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        data = [j.model_dump(mode="json") for j in jobs]
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"\nWrote {len(data)} jobs to: {out_path}")


if __name__ == "__main__":
    main()
