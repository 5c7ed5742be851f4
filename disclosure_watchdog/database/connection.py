"""
MongoDB access for the comment board.

The disclosure documents never touch MongoDB; only comments are stored
there. One client is shared per process (Streamlit reruns included).
"""
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from disclosure_watchdog.config.settings import settings
from disclosure_watchdog.config.constants import COLLECTION_COMMENTS

logger = logging.getLogger(__name__)

_client: MongoClient | None = None


def get_client() -> MongoClient:
    """Shared client; created lazily, no connection until the first query"""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.MONGODB_URI,
            appname=settings.APP_NAME,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
            tz_aware=True,
        )
        logger.debug(f"MongoDB client created for {settings.MONGODB_DATABASE}")
    return _client


def get_database() -> Database:
    return get_client()[settings.MONGODB_DATABASE]


def get_comments_collection() -> Collection:
    """Collection holding every comment and reply"""
    return get_database()[COLLECTION_COMMENTS]


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def ping() -> bool:
    """
    Round-trip to the server.

    Raises:
        pymongo.errors.PyMongoError: server unreachable within MONGODB_TIMEOUT_MS
    """
    result = get_client().admin.command("ping")
    return result.get("ok") == 1.0
