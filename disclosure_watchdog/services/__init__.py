"""Services module - summary ranking/search and the comment board."""

from disclosure_watchdog.services.summaries import (
    DisclosureService,
    SortKey,
    SummaryCache,
)
from disclosure_watchdog.services.comments import (
    CommentStore,
    CommentError,
    CommentPermissionError,
    build_threads,
)

__all__ = [
    "DisclosureService",
    "SortKey",
    "SummaryCache",
    "CommentStore",
    "CommentError",
    "CommentPermissionError",
    "build_threads",
]
