"""Analysis module - classification, aggregation, and money formatting."""

from disclosure_watchdog.analysis.classifier import (
    ClassificationRule,
    CLASSIFICATION_RULES,
    classify,
    reconcile_current_value,
)
from disclosure_watchdog.analysis.aggregator import (
    aggregate,
    change_rate,
    compute_net_worth,
)
from disclosure_watchdog.analysis.formatting import (
    format_money,
    format_simple,
    format_change,
)

__all__ = [
    "ClassificationRule",
    "CLASSIFICATION_RULES",
    "classify",
    "reconcile_current_value",
    "aggregate",
    "change_rate",
    "compute_net_worth",
    "format_money",
    "format_simple",
    "format_change",
]
