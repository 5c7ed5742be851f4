"""
Data Normalization Module

Centralized functions to turn raw disclosure and profile documents into our
canonical in-memory shapes. All sources should use these functions so the
classifier only ever sees one shape.

Usage:
    from disclosure_watchdog.database.normalization import (
        normalize_officials_document, last_segment
    )

    records = normalize_officials_document(json.loads(raw_text))
    party = last_segment(profile.party, default="무소속")
"""
from typing import Any, Dict, List, Optional
from urllib.parse import unquote
import logging

from pydantic import ValidationError

from disclosure_watchdog.config.constants import (
    PROFILE_FIELD_SEPARATOR,
    OFFICIALS_WRAPPER_KEY,
)
from disclosure_watchdog.models.disclosure import PersonRecord, RawLineItem
from disclosure_watchdog.models.profile import LegislatorProfile

logger = logging.getLogger(__name__)


# ============================================================================
# Label Normalization
# ============================================================================

def last_segment(value: Optional[str], default: str = "") -> str:
    """
    Keep the last slash-delimited segment of a profile field.

    Args:
        value: Raw field (e.g., "더불어민주당/국민의힘")
        default: Returned when the field is missing or blank

    Returns:
        Trimmed last segment, or default

    Examples:
        >>> last_segment("더불어민주당/국민의힘")
        "국민의힘"
        >>> last_segment(" 서울 종로구 ")
        "서울 종로구"
        >>> last_segment("", default="무소속")
        "무소속"
    """
    if not value:
        return default

    segment = value.split(PROFILE_FIELD_SEPARATOR)[-1].strip()
    return segment or default


def normalize_person_name(name: Optional[str]) -> str:
    """
    Normalize a person name taken from a URL or query string.

    Percent-encoded names are decoded and surrounding whitespace removed.

    Examples:
        >>> normalize_person_name("%ED%99%8D%EA%B8%B8%EB%8F%99")
        "홍길동"
    """
    if not name:
        return ""
    return unquote(name).strip()


# ============================================================================
# Document Normalization
# ============================================================================

def unwrap_officials_document(document: Any) -> List[Any]:
    """
    Accept both officials document shapes.

    The officials document is either a bare array or an object
    wrapping the array under "officials". Anything else is treated as empty.
    """
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        officials = document.get(OFFICIALS_WRAPPER_KEY) or []
        if isinstance(officials, list):
            return officials
    logger.warning(f"Unexpected officials document shape: {type(document).__name__}")
    return []


def normalize_line_item(raw: Any) -> Optional[RawLineItem]:
    """
    Convert one raw line item, ignoring fields we don't read.

    Returns:
        RawLineItem, or None if a field we do read has the wrong type
    """
    if not isinstance(raw, dict):
        return None

    try:
        return RawLineItem.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping line item {raw.get('type')!r}: {e.error_count()} errors")
        return None


def normalize_person(raw: Any) -> Optional[PersonRecord]:
    """
    Convert one raw disclosure record to a PersonRecord.

    Unreadable line items are dropped; the rest of the record is kept.

    Returns:
        PersonRecord, or None if the record has no name or its assets
        are not a list
    """
    if not isinstance(raw, dict) or not raw.get("name"):
        return None

    assets = raw.get("assets")
    if assets is None:
        assets = []
    elif not isinstance(assets, list):
        return None

    items = []
    for raw_item in assets:
        item = normalize_line_item(raw_item)
        if item is not None:
            items.append(item)

    affiliation = raw.get("affiliation")
    return PersonRecord(
        name=str(raw["name"]).strip(),
        affiliation=str(affiliation).strip() if affiliation else None,
        assets=items,
    )


def normalize_officials_document(document: Any) -> List[PersonRecord]:
    """Normalize either officials document shape to PersonRecords"""
    records = []
    for raw in unwrap_officials_document(document):
        record = normalize_person(raw)
        if record is not None:
            records.append(record)
    return records


def normalize_profile(raw: Any) -> Optional[LegislatorProfile]:
    """
    Convert one profile row to a LegislatorProfile.

    Returns:
        LegislatorProfile, or None when the row has no name
    """
    if not isinstance(raw, dict) or not raw.get("NAAS_NM"):
        return None

    try:
        return LegislatorProfile.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping profile row {raw.get('NAAS_NM')}: {e.error_count()} errors")
        return None


def index_profiles(profiles: List[LegislatorProfile]) -> Dict[str, LegislatorProfile]:
    """
    Map legislator name to profile, current members only.

    Later rows win when a name repeats.
    """
    return {profile.name: profile for profile in profiles if profile.is_current}
