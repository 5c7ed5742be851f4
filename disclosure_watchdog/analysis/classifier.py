"""
Disclosure line item classification.

Every line item lands in exactly one bucket. Rules are an ordered list
evaluated first-match-wins; their order is part of the contract:
an empty type only means "deposit" after the real estate rule has had a
chance to claim the item (e.g. an empty type with "84.98㎡" in the
description is real estate).

Usage:
    from disclosure_watchdog.analysis.classifier import classify, reconcile_current_value

    item = reconcile_current_value(item)
    bucket = classify(item)
"""
from dataclasses import dataclass
from typing import Sequence, Tuple

from disclosure_watchdog.models.disclosure import Bucket, RawLineItem


@dataclass(frozen=True)
class ClassificationRule:
    """
    One entry in the ordered decision list.

    Matches when the item's type contains any of type_phrases, when its
    description contains any of description_phrases, or (if
    match_empty_type) when its type is empty. Matching is case-sensitive
    substring containment.
    """
    bucket: Bucket
    type_phrases: Tuple[str, ...] = ()
    description_phrases: Tuple[str, ...] = ()
    match_empty_type: bool = False

    def matches(self, item: RawLineItem) -> bool:
        item_type = item.type or ""
        description = item.description or ""

        if self.match_empty_type and item_type == "":
            return True
        if any(phrase in item_type for phrase in self.type_phrases):
            return True
        return any(phrase in description for phrase in self.description_phrases)


# ============================================================================
# Rule list (order matters)
# ============================================================================

DEBT_RULE = ClassificationRule(
    bucket=Bucket.DEBT,
    type_phrases=("채무", "liability", "obligation"),
    description_phrases=("채무", "liability", "obligation"),
)

VEHICLE_RULE = ClassificationRule(
    bucket=Bucket.VEHICLE,
    type_phrases=(
        "자동차", "승용차", "선박", "항공기",
        "automobile", "motor vehicle", "vessel", "aircraft",
    ),
)

VIRTUAL_ASSET_RULE = ClassificationRule(
    bucket=Bucket.VIRTUAL_ASSET,
    type_phrases=("가상자산", "암호화폐", "virtual asset", "crypto"),
    description_phrases=("가상자산", "virtual asset", "crypto"),
)

REAL_ESTATE_RULE = ClassificationRule(
    bucket=Bucket.REAL_ESTATE,
    type_phrases=(
        "토지", "건물", "주택", "아파트", "대지", "임야",
        "전", "답", "도로", "과수원", "잡종지", "목장",
        "오피스텔", "상가", "빌라", "전세", "임차", "권리",
        "창고",
        "real estate", "building", "apartment", "leasehold",
    ),
    # Area unit marker: almost always land or a building
    description_phrases=(
        "건물", "대지", "임야", "아파트", "창고", "주택", "㎡",
        "real estate", "building", "apartment", "m²",
    ),
)

FINANCIAL_RULE = ClassificationRule(
    bucket=Bucket.FINANCIAL,
    type_phrases=(
        "예금", "증권", "채권", "회사채", "국채", "공채",
        "현금", "신탁", "펀드", "주식", "보험", "예탁",
        "사인간", "대여금",
        "deposit", "securities", "savings", "fund", "insurance",
    ),
    description_phrases=(
        "은행", "농협", "수협", "신협", "금융", "증권",
        "보험", "생명", "화재", "사인간", "채권", "대여금",
        "현금",
        "bank", "deposit", "securities", "insurance",
    ),
    match_empty_type=True,
)

CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    DEBT_RULE,
    VEHICLE_RULE,
    VIRTUAL_ASSET_RULE,
    REAL_ESTATE_RULE,
    FINANCIAL_RULE,
)

FALLBACK_BUCKET = Bucket.OTHER


def classify(
    item: RawLineItem,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES
) -> Bucket:
    """
    Assign a line item to exactly one bucket.

    Args:
        item: Line item to classify
        rules: Ordered rule list (defaults to CLASSIFICATION_RULES)

    Returns:
        Bucket of the first matching rule, or Bucket.OTHER

    Examples:
        >>> classify(RawLineItem(type="", description="아파트 84.98㎡")) is Bucket.REAL_ESTATE
        True
        >>> classify(RawLineItem(type="", description="국민은행")) is Bucket.FINANCIAL
        True
    """
    for rule in rules:
        if rule.matches(item):
            return rule.bucket
    return FALLBACK_BUCKET


def reconcile_current_value(item: RawLineItem) -> RawLineItem:
    """
    Rebuild a missing current value from the prior value and deltas.

    Some sources leave current_value at 0 and only report the change.
    A genuine zero (no prior value and no increase) is left alone.

    Args:
        item: Line item as filed

    Returns:
        A copy with current_value filled in, or the item itself if
        nothing needed reconstruction. The input is never mutated.
    """
    increase = item.increase or 0
    decrease = item.decrease or 0

    if item.current_value == 0 and (item.previous_value != 0 or increase > 0):
        rebuilt = item.previous_value + increase - decrease
        return item.model_copy(update={"current_value": rebuilt})

    return item
