"""
Per-person aggregation of classified disclosure line items.

Pure functions over in-memory records: the same input always yields
the same PersonSummary, and inputs are never mutated.
"""
from typing import Iterable, List, Dict, Tuple

from disclosure_watchdog.analysis.classifier import classify, reconcile_current_value
from disclosure_watchdog.models.disclosure import (
    Bucket,
    Population,
    RawLineItem,
    PersonSummary,
)


def signed_value(bucket: Bucket, value: int) -> int:
    """Contribution of one item to net worth (debts subtract)"""
    return -value if bucket == Bucket.DEBT else value


def compute_net_worth(classified: Iterable[Tuple[Bucket, int]]) -> int:
    """Sum assets minus debts over (bucket, value) pairs"""
    return sum(signed_value(bucket, value) for bucket, value in classified)


def change_rate(change_amount: int, previous_net_worth: int) -> float:
    """
    Period-over-period change in percent.

    A zero prior net worth yields 0.0 regardless of the change.
    """
    if previous_net_worth == 0:
        return 0.0
    return (change_amount / previous_net_worth) * 100


def aggregate(
    items: Iterable[RawLineItem],
    *,
    name: str = "",
    population: Population = Population.ASSEMBLY,
    affiliation_label: str = "",
    secondary_label: str = "",
    image_url: str = ""
) -> PersonSummary:
    """
    Classify a person's line items and compute their totals.

    Each item is reconciled, classified, and added to its bucket.
    Net worth is assets minus debts; the previous-period net worth uses
    the same buckets with previous_value. Within each bucket items are
    ordered by current_value descending (stable).

    Args:
        items: Raw line items for one person
        name, population, affiliation_label, secondary_label, image_url:
            Labels copied onto the summary

    Returns:
        PersonSummary (all zeros for an empty list)
    """
    groups: Dict[Bucket, List[RawLineItem]] = {bucket: [] for bucket in Bucket}
    totals: Dict[Bucket, int] = {bucket: 0 for bucket in Bucket}
    current: List[Tuple[Bucket, int]] = []
    previous: List[Tuple[Bucket, int]] = []

    for raw_item in items:
        item = reconcile_current_value(raw_item)
        bucket = classify(item)

        groups[bucket].append(item)
        totals[bucket] += item.current_value
        current.append((bucket, item.current_value))
        previous.append((bucket, item.previous_value))

    for bucket_items in groups.values():
        bucket_items.sort(key=lambda i: i.current_value, reverse=True)

    net_worth = compute_net_worth(current)
    previous_net_worth = compute_net_worth(previous)
    change_amount = net_worth - previous_net_worth

    return PersonSummary(
        name=name,
        population=population,
        affiliation_label=affiliation_label,
        secondary_label=secondary_label,
        image_url=image_url,
        net_worth=net_worth,
        previous_net_worth=previous_net_worth,
        bucket_totals=totals,
        groups=groups,
        change_amount=change_amount,
        change_rate_percent=change_rate(change_amount, previous_net_worth),
    )
