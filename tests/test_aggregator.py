"""
Tests for disclosure_watchdog.analysis.aggregator
"""
import pytest

from disclosure_watchdog.analysis.aggregator import aggregate, change_rate, compute_net_worth
from disclosure_watchdog.models.disclosure import Bucket, Population, RawLineItem


def test_liability_subtracts_from_net_worth():
    summary = aggregate([RawLineItem(type="liability", previous_value=1000, current_value=1000)])
    assert summary.net_worth == -1000
    assert summary.bucket_totals[Bucket.DEBT] == 1000


def test_financial_minus_debt():
    summary = aggregate([
        RawLineItem(type="예금", current_value=300),
        RawLineItem(type="채무", current_value=100),
    ])
    assert summary.net_worth == 200


def test_reconciled_value_is_counted():
    summary = aggregate([
        RawLineItem(type="", description="The apartment is 84.98㎡", increase=500000)
    ])
    assert summary.bucket_totals[Bucket.REAL_ESTATE] == 500000
    assert summary.groups[Bucket.REAL_ESTATE][0].current_value == 500000
    assert summary.net_worth == 500000


def test_zero_previous_net_worth_gives_zero_rate():
    summary = aggregate([RawLineItem(type="예금", previous_value=0, current_value=5000)])
    assert summary.previous_net_worth == 0
    assert summary.change_amount == 5000
    assert summary.change_rate_percent == 0.0


def test_change_rate():
    summary = aggregate([
        RawLineItem(type="예금", previous_value=1000, current_value=1500),
        RawLineItem(type="채무", previous_value=200, current_value=100),
    ])
    assert summary.previous_net_worth == 800
    assert summary.net_worth == 1400
    assert summary.change_amount == 600
    assert summary.change_rate_percent == pytest.approx(75.0)


def test_groups_sorted_descending_and_stable():
    items = [
        RawLineItem(type="예금", description="a", current_value=100),
        RawLineItem(type="예금", description="b", current_value=300),
        RawLineItem(type="예금", description="c", current_value=100),
    ]
    summary = aggregate(items)
    assert [i.description for i in summary.groups[Bucket.FINANCIAL]] == ["b", "a", "c"]


def test_every_bucket_present():
    summary = aggregate([])
    assert set(summary.bucket_totals) == set(Bucket)
    assert set(summary.groups) == set(Bucket)
    assert summary.net_worth == 0
    assert summary.item_count == 0


def test_labels_copied():
    summary = aggregate(
        [],
        name="박공무",
        population=Population.GOVERNMENT,
        affiliation_label="국토교통부",
        secondary_label="공직자",
    )
    assert summary.name == "박공무"
    assert summary.population is Population.GOVERNMENT
    assert str(summary) == "박공무 (국토교통부, 공직자): 0"


def test_same_input_same_output():
    items = [RawLineItem(type="토지", previous_value=10, current_value=0, increase=5)]
    assert aggregate(items) == aggregate(items)
    assert items[0].current_value == 0


def test_compute_net_worth():
    assert compute_net_worth([(Bucket.REAL_ESTATE, 10), (Bucket.DEBT, 4), (Bucket.OTHER, 1)]) == 7


def test_change_rate_guard():
    assert change_rate(100, 0) == 0.0
    assert change_rate(-50, 200) == -25.0
