"""
Asset disclosure data models.

Defines raw line items as filed, the buckets they are classified into,
and the per-person summary computed from them.
"""

from enum import Enum
from typing import Optional, List, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from disclosure_watchdog.config.constants import REASON_NO_CHANGE


class Bucket(str, Enum):
    """Mutually exclusive category for one disclosure line item."""
    REAL_ESTATE = "real_estate"
    FINANCIAL = "financial"
    VEHICLE = "vehicle"
    VIRTUAL_ASSET = "virtual_asset"
    DEBT = "debt"
    OTHER = "other"

    @property
    def label(self) -> str:
        return BUCKET_LABELS[self]

    @property
    def emoji(self) -> str:
        return BUCKET_EMOJI[self]


BUCKET_LABELS = {
    Bucket.REAL_ESTATE: "부동산",
    Bucket.FINANCIAL: "예금/증권/현금",
    Bucket.VEHICLE: "자동차",
    Bucket.VIRTUAL_ASSET: "가상자산",
    Bucket.DEBT: "채무",
    Bucket.OTHER: "기타자산",
}

BUCKET_EMOJI = {
    Bucket.REAL_ESTATE: "🏢",
    Bucket.FINANCIAL: "💰",
    Bucket.VEHICLE: "🚗",
    Bucket.VIRTUAL_ASSET: "🪙",
    Bucket.DEBT: "📉",
    Bucket.OTHER: "💎",
}

# Display order for detail sections; debt always last
BUCKET_DISPLAY_ORDER = [
    Bucket.REAL_ESTATE,
    Bucket.FINANCIAL,
    Bucket.VIRTUAL_ASSET,
    Bucket.VEHICLE,
    Bucket.OTHER,
    Bucket.DEBT,
]


class Population(str, Enum):
    """Which disclosure document a person comes from."""
    ASSEMBLY = "assembly"
    GOVERNMENT = "government"


class RawLineItem(BaseModel):
    """
    One reported asset or liability entry, as filed.

    Values are in thousands of won. Unknown keys in the source are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    relationship: str = Field("", description="Whose asset this is (본인, 배우자, ...)")
    type: str = Field("", description="Category label assigned by the filer")
    description: str = Field("", description="Free-text detail")
    previous_value: int = Field(0, description="Prior-period value, thousands of won")
    current_value: int = Field(0, description="Current-period value, thousands of won")
    increase: Optional[int] = Field(None, description="Period increase, some sources only")
    decrease: Optional[int] = Field(None, description="Period decrease, some sources only")
    reason: str = Field("", description="Explanation of the change")

    @field_validator("relationship", "type", "description", "reason", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("previous_value", "current_value", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0 if value is None else value

    @property
    def show_reason(self) -> bool:
        """Whether the change reason is worth displaying"""
        return bool(self.reason) and self.reason != REASON_NO_CHANGE


class PersonRecord(BaseModel):
    """
    Canonical in-memory shape for one person from either disclosure document.

    Legislators carry no affiliation here; it comes from the profile document.
    """
    model_config = ConfigDict(extra="ignore")

    name: str
    affiliation: Optional[str] = None
    assets: List[RawLineItem] = Field(default_factory=list)


def _empty_totals() -> Dict[Bucket, int]:
    return {bucket: 0 for bucket in Bucket}


def _empty_groups() -> Dict[Bucket, List[RawLineItem]]:
    return {bucket: [] for bucket in Bucket}


class PersonSummary(BaseModel):
    """
    Net worth and per-bucket breakdown for one person.

    Debt totals are kept as positive magnitudes; they are subtracted
    from net worth.
    """
    name: str = ""
    population: Population = Population.ASSEMBLY
    affiliation_label: str = ""
    secondary_label: str = ""
    image_url: str = ""

    net_worth: int = 0
    previous_net_worth: int = 0
    bucket_totals: Dict[Bucket, int] = Field(default_factory=_empty_totals)
    groups: Dict[Bucket, List[RawLineItem]] = Field(default_factory=_empty_groups)

    change_amount: int = 0
    change_rate_percent: float = 0.0

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self.groups.values())

    def has_bucket(self, bucket: Bucket) -> bool:
        """True if any item landed in this bucket"""
        return bool(self.groups.get(bucket))

    def __str__(self) -> str:
        return f"{self.name} ({self.affiliation_label}, {self.secondary_label}): {self.net_worth}"
