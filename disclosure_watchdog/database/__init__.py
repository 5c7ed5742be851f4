"""Database module - comment board connection, indexes, and document normalization."""

from disclosure_watchdog.database.connection import (
    get_client,
    get_database,
    get_comments_collection,
    close_client,
    ping,
)

__all__ = [
    "get_client",
    "get_database",
    "get_comments_collection",
    "close_client",
    "ping",
]
