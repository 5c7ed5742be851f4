"""Data models module."""

from disclosure_watchdog.models.disclosure import (
    Bucket,
    Population,
    RawLineItem,
    PersonRecord,
    PersonSummary,
    BUCKET_DISPLAY_ORDER,
)

from disclosure_watchdog.models.profile import LegislatorProfile

from disclosure_watchdog.models.comment import (
    Comment,
    CommentCreate,
    CommentThread,
)

__all__ = [
    # Disclosure
    "Bucket",
    "Population",
    "RawLineItem",
    "PersonRecord",
    "PersonSummary",
    "BUCKET_DISPLAY_ORDER",
    # Profile
    "LegislatorProfile",
    # Comment
    "Comment",
    "CommentCreate",
    "CommentThread",
]
