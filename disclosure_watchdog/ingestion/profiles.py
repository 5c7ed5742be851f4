"""
Legislator profile source (members_info.json).

Only rows for currently serving members are kept.
"""
from typing import Any, Optional

from disclosure_watchdog.ingestion.base import BaseSource
from disclosure_watchdog.models.profile import LegislatorProfile
from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.database.normalization import normalize_profile


class LegislatorProfileSource(BaseSource[LegislatorProfile]):
    """Party, district, and photo for each legislator."""

    filename = settings.MEMBERS_INFO_FILE

    def transform_item(self, raw_item: Any) -> Optional[LegislatorProfile]:
        profile = normalize_profile(raw_item)
        if profile is None or not profile.is_current:
            return None
        return profile
