"""
Legislator profile model.

Rows come from the assembly member information document, which uses
the upstream column names (NAAS_NM, PLPT_NM, ...).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from disclosure_watchdog.config.constants import STATUS_CURRENT_MEMBER


class LegislatorProfile(BaseModel):
    """
    Party, district, and photo for one legislator.

    PLPT_NM and ELECD_NM hold the full history as slash-delimited strings;
    the last segment is the current value.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., alias="NAAS_NM")
    party: str = Field("", alias="PLPT_NM")
    district: str = Field("", alias="ELECD_NM")
    photo_url: str = Field("", alias="NAAS_PIC")
    status: str = Field("", alias="STATUS_NM")

    @field_validator("party", "district", "photo_url", "status", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @property
    def is_current(self) -> bool:
        return self.status == STATUS_CURRENT_MEMBER
