"""
MongoDB index definitions for the comment board.

Comments are always read per person, oldest first, so one compound index
covers the read path.
"""
from typing import Dict, List, Tuple
import logging

from pymongo import ASCENDING
from pymongo.database import Database

from disclosure_watchdog.config.constants import COLLECTION_COMMENTS

logger = logging.getLogger(__name__)


# collection -> [(index name, keys)]
INDEXES: Dict[str, List[Tuple[str, List[Tuple[str, int]]]]] = {
    COLLECTION_COMMENTS: [
        ("member_created_idx", [("member_name", ASCENDING), ("created_at", ASCENDING)]),
        ("parent_idx", [("parent_id", ASCENDING)]),
    ],
}


def create_all_indexes(db: Database, drop_existing: bool = False) -> List[str]:
    """
    Create every index in INDEXES.

    Args:
        db: Database to index
        drop_existing: Drop non-_id indexes first

    Returns:
        Names of the indexes created
    """
    created = []
    for collection_name, indexes in INDEXES.items():
        collection = db[collection_name]
        if drop_existing:
            collection.drop_indexes()
            logger.info(f"Dropped indexes on {collection_name}")

        for name, keys in indexes:
            created.append(collection.create_index(keys, name=name))
            logger.info(f"Created index {name} on {collection_name}")

    return created


def list_existing_indexes(db: Database) -> Dict[str, List[str]]:
    """Index names per collection"""
    return {
        collection_name: sorted(db[collection_name].index_information().keys())
        for collection_name in INDEXES
    }
