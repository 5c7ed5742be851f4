"""
Comment board models.

Comments are flat rows with an optional parent id; replies nest one level deep.
"""
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field

from disclosure_watchdog.config.constants import (
    NICKNAME_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
)


class Comment(BaseModel):
    """
    A stored comment as shown to readers.

    The password hash is never part of this model.
    """
    id: str = Field(..., description="Stringified MongoDB ObjectId")
    created_at: datetime
    nickname: str
    content: str
    member_name: str = Field(..., description="Person the comment is attached to")
    parent_id: Optional[str] = Field(None, description="None for top-level comments")

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None


class CommentCreate(BaseModel):
    """
    Input for a new comment or reply.

    The password is write-only: it is hashed on insert and only used
    to authorize deletion.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "nickname": "시민1",
                "password": "1234",
                "content": "작년보다 많이 늘었네요",
                "member_name": "홍길동",
                "parent_id": None
            }
        }
    )

    nickname: str = Field(..., min_length=1, max_length=NICKNAME_MAX_LENGTH)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)
    member_name: str = Field(..., min_length=1)
    parent_id: Optional[str] = None


class CommentThread(BaseModel):
    """A top-level comment and its replies, oldest first."""
    comment: Comment
    replies: List[Comment] = Field(default_factory=list)
