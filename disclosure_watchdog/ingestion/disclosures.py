"""
Disclosure document sources.

- assembly_assets.json: array of {name, assets}
- officials_property.json: array of {name, affiliation, assets}, or the same
  array wrapped as {"officials": [...]}

Both are normalized to PersonRecord here, before the classifier runs.

Usage:
    source = AssemblyDisclosureSource()
    records = await source.load()
"""
from typing import Any, List, Optional

from disclosure_watchdog.ingestion.base import BaseSource
from disclosure_watchdog.models.disclosure import PersonRecord
from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.database.normalization import (
    normalize_person,
    unwrap_officials_document,
)


class AssemblyDisclosureSource(BaseSource[PersonRecord]):
    """Asset disclosures for national assembly members."""

    filename = settings.ASSEMBLY_ASSETS_FILE

    def transform_item(self, raw_item: Any) -> Optional[PersonRecord]:
        record = normalize_person(raw_item)
        if record is None:
            self.logger.debug(f"Skipping unusable assembly record: {str(raw_item)[:80]}")
        return record


class OfficialsDisclosureSource(BaseSource[PersonRecord]):
    """Asset disclosures for government officials (either document shape)."""

    filename = settings.OFFICIALS_PROPERTY_FILE

    def unwrap(self, document: Any) -> List[Any]:
        return unwrap_officials_document(document)

    def transform_item(self, raw_item: Any) -> Optional[PersonRecord]:
        record = normalize_person(raw_item)
        if record is None:
            self.logger.debug(f"Skipping unusable officials record: {str(raw_item)[:80]}")
        return record
