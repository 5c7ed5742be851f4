"""Config module - settings and constants."""

from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.config.constants import (
    STATUS_CURRENT_MEMBER,
    REASON_NO_CHANGE,
    COLLECTION_COMMENTS,
)

__all__ = [
    "settings",
    "STATUS_CURRENT_MEMBER",
    "REASON_NO_CHANGE",
    "COLLECTION_COMMENTS",
]
