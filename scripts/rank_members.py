"""
Print the net worth ranking from the command line.

Usage:
    python scripts/rank_members.py                          # Top 20 legislators
    python scripts/rank_members.py --population government  # Officials
    python scripts/rank_members.py --query 종로구 --limit 5
    python scripts/rank_members.py --sort debt --category debt
    python scripts/rank_members.py --person 홍길동           # One person's breakdown
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from disclosure_watchdog.analysis.formatting import format_change, format_money
from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.models.disclosure import BUCKET_DISPLAY_ORDER, Bucket, Population
from disclosure_watchdog.services.summaries import DisclosureService, SortKey

logger = logging.getLogger(__name__)


def print_ranking(results, limit: int):
    print(f"\n📊 {len(results)} people")
    print("=" * 70)
    for rank, summary in enumerate(results[:limit], start=1):
        print(
            f"{rank:>4}. {summary.name:<8} {summary.affiliation_label:<14} "
            f"{format_money(summary.net_worth):>16}  "
            f"{format_change(summary.change_amount, summary.change_rate_percent)}"
        )


def print_person(summary):
    print(f"\n👤 {summary.name} ({summary.affiliation_label} · {summary.secondary_label})")
    print(f"   Net worth: {format_money(summary.net_worth)}")
    print(f"   Change:    {format_change(summary.change_amount, summary.change_rate_percent)}")
    for bucket in BUCKET_DISPLAY_ORDER:
        items = summary.groups[bucket]
        if not items:
            continue
        print(f"\n   {bucket.emoji} {bucket.label}: {format_money(summary.bucket_totals[bucket])}")
        for item in items:
            line = f"      - [{item.relationship}] {item.type} {format_money(item.current_value)}"
            if item.show_reason:
                line += f" ({item.reason})"
            print(line)


async def run(args) -> int:
    service = DisclosureService()

    if args.person:
        population = Population(args.population) if args.population_given else None
        summary = await service.find_person(args.person, population)
        if summary is None:
            print(f"❌ No disclosure data for {args.person}")
            return 1
        print_person(summary)
        return 0

    results = await service.search(
        Population(args.population),
        query=args.query,
        sort_by=SortKey(args.sort),
        descending=not args.ascending,
        category=Bucket(args.category) if args.category else None,
    )
    print_ranking(results, args.limit)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description=f"{settings.APP_NAME} - asset disclosure ranking"
    )
    parser.add_argument(
        "--population",
        choices=[p.value for p in Population],
        default=None,
        help="Which population to rank (default: assembly)"
    )
    parser.add_argument("--query", default="", help="Filter by name, party, or district")
    parser.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.NET_WORTH.value,
        help="Sort key"
    )
    parser.add_argument("--ascending", action="store_true", help="Smallest first")
    parser.add_argument(
        "--category",
        choices=[b.value for b in Bucket],
        help="Only people holding this kind of asset"
    )
    parser.add_argument("--limit", type=int, default=20, help="Rows to print")
    parser.add_argument("--person", help="Show one person's breakdown instead")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args()
    args.population_given = args.population is not None
    if args.population is None:
        args.population = Population.ASSEMBLY.value

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format=settings.LOG_FORMAT
    )

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
