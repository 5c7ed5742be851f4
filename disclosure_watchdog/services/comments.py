"""
Comment board - per-person comments with one level of replies.

Rows are stored flat in MongoDB:
    {_id, created_at, nickname, content, member_name, parent_id, password_hash}

parent_id is None for top-level comments and the string id of a top-level
comment for replies. Passwords are only kept as salted scrypt hashes and
are never returned to readers; they authorize deletion.

Usage:
    store = CommentStore(get_comments_collection())
    store.add_comment(CommentCreate(nickname="시민1", password="1234",
                                    content="...", member_name="홍길동"))
    threads = build_threads(store.list_comments("홍길동"))
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
import hashlib
import hmac
import logging
import secrets

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.collection import Collection

from disclosure_watchdog.models.comment import Comment, CommentCreate, CommentThread

logger = logging.getLogger(__name__)

# Never sent back to readers
_HIDDEN_FIELDS = {"password_hash": 0}

_SCRYPT_N = 2 ** 14
_SCRYPT_R = 8
_SCRYPT_P = 1
_SALT_BYTES = 16


class CommentError(ValueError):
    """Comment could not be stored (bad parent, nesting too deep, ...)."""


class CommentPermissionError(CommentError):
    """Password did not match the stored comment."""


# ============================================================================
# Password hashing
# ============================================================================

def hash_password(password: str) -> str:
    """Salted scrypt hash, encoded as 'scrypt$<salt hex>$<digest hex>'"""
    salt = secrets.token_bytes(_SALT_BYTES)
    digest = hashlib.scrypt(
        password.encode("utf-8"), salt=salt, n=_SCRYPT_N, r=_SCRYPT_R, p=_SCRYPT_P
    )
    return f"scrypt${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check a password against a hash from hash_password()"""
    if not stored:
        return False
    try:
        scheme, salt_hex, digest_hex = stored.split("$")
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    if scheme != "scrypt":
        return False

    digest = hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt,
        n=_SCRYPT_N,
        r=_SCRYPT_R,
        p=_SCRYPT_P,
    )
    return hmac.compare_digest(digest.hex(), digest_hex)


# ============================================================================
# Row conversion
# ============================================================================

def _parse_object_id(comment_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(comment_id)
    except (InvalidId, TypeError):
        return None


def comment_from_document(document: dict) -> Comment:
    """Convert a stored row to a Comment (password hash dropped)"""
    return Comment(
        id=str(document["_id"]),
        created_at=document["created_at"],
        nickname=document.get("nickname", ""),
        content=document.get("content", ""),
        member_name=document.get("member_name", ""),
        parent_id=document.get("parent_id"),
    )


def build_threads(comments: List[Comment]) -> List[CommentThread]:
    """
    Group a flat, oldest-first comment list into threads.

    Replies whose parent isn't in the list are dropped from the tree.
    """
    threads: Dict[str, CommentThread] = {}
    for comment in comments:
        if comment.parent_id is None:
            threads[comment.id] = CommentThread(comment=comment)

    for comment in comments:
        if comment.parent_id is None:
            continue
        thread = threads.get(comment.parent_id)
        if thread is None:
            logger.debug(f"Orphan reply {comment.id} (parent {comment.parent_id})")
            continue
        thread.replies.append(comment)

    return list(threads.values())


# ============================================================================
# Store
# ============================================================================

class CommentStore:
    """
    Comment rows for every person, in one MongoDB collection.

    Writes are visible to the next list_comments() call; callers refetch
    after a successful insert.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def list_comments(self, member_name: str) -> List[Comment]:
        """
        All comments for one person, oldest first.

        Args:
            member_name: Person the comments are attached to

        Returns:
            Comments (top-level and replies) ordered by created_at
        """
        cursor = self.collection.find(
            {"member_name": member_name},
            _HIDDEN_FIELDS
        ).sort("created_at", ASCENDING)
        return [comment_from_document(doc) for doc in cursor]

    def add_comment(self, data: CommentCreate) -> Comment:
        """
        Store a new comment or reply.

        Args:
            data: Validated comment input

        Returns:
            The stored comment

        Raises:
            CommentError: Parent missing, on another person, or itself a reply
        """
        parent_id = None
        if data.parent_id is not None:
            parent_id = str(self._check_parent(data.parent_id, data.member_name))

        document = {
            "created_at": datetime.now(timezone.utc),
            "nickname": data.nickname,
            "content": data.content,
            "member_name": data.member_name,
            "parent_id": parent_id,
            "password_hash": hash_password(data.password),
        }
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(
            f"Stored {'reply' if parent_id else 'comment'} {result.inserted_id} "
            f"for {data.member_name}"
        )
        return comment_from_document(document)

    def _check_parent(self, parent_id: str, member_name: str) -> ObjectId:
        """Check a reply target and return its ObjectId"""
        parent_oid = _parse_object_id(parent_id)
        if parent_oid is None:
            raise CommentError(f"Invalid parent comment id: {parent_id}")

        parent = self.collection.find_one({"_id": parent_oid})
        if parent is None:
            raise CommentError(f"Parent comment not found: {parent_id}")
        if parent.get("member_name") != member_name:
            raise CommentError("Reply must be on the same person as its parent")
        if parent.get("parent_id") is not None:
            raise CommentError("Replies can only be made to top-level comments")
        return parent_oid

    def delete_comment(self, comment_id: str, password: str) -> bool:
        """
        Delete a comment if the password matches.

        Deleting a top-level comment also deletes its replies.

        Returns:
            True if deleted, False if no such comment

        Raises:
            CommentPermissionError: Password does not match
        """
        oid = _parse_object_id(comment_id)
        if oid is None:
            return False

        document = self.collection.find_one({"_id": oid})
        if document is None:
            return False

        if not verify_password(password, document.get("password_hash")):
            logger.warning(f"Rejected delete of comment {comment_id}: wrong password")
            raise CommentPermissionError("Password does not match")

        self.collection.delete_one({"_id": oid})
        if document.get("parent_id") is None:
            removed = self.collection.delete_many({"parent_id": str(oid)}).deleted_count
            if removed:
                logger.info(f"Deleted {removed} replies under {oid}")

        logger.info(f"Deleted comment {comment_id}")
        return True
