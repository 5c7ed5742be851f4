"""
Tests for disclosure_watchdog.services.comments (against FakeCollection)
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from disclosure_watchdog.models.comment import Comment, CommentCreate
from disclosure_watchdog.services.comments import (
    CommentError,
    CommentPermissionError,
    CommentStore,
    build_threads,
    hash_password,
    verify_password,
)


def new_comment(member="홍길동", parent_id=None, password="1234", content="내용"):
    return CommentCreate(
        nickname="시민1",
        password=password,
        content=content,
        member_name=member,
        parent_id=parent_id,
    )


@pytest.fixture
def store(fake_collection):
    return CommentStore(fake_collection)


# ── Passwords ─────────────────────────────────────────────────────────────────

class TestPasswords:
    def test_round_trip(self):
        stored = hash_password("1234")
        assert stored.startswith("scrypt$")
        assert verify_password("1234", stored)
        assert not verify_password("12345", stored)

    def test_salted(self):
        assert hash_password("1234") != hash_password("1234")

    @pytest.mark.parametrize("stored", [None, "", "plain", "md5$00$00", "scrypt$zz$00"])
    def test_malformed_hash_rejected(self, stored):
        assert not verify_password("1234", stored)


# ── Input validation ──────────────────────────────────────────────────────────

class TestCommentCreate:
    def test_whitespace_stripped(self):
        data = CommentCreate(nickname="  시민 ", password="1234", content=" 글 ", member_name="홍길동")
        assert data.nickname == "시민"
        assert data.content == "글"

    def test_config_is_model_config(self):
        assert CommentCreate.model_config["str_strip_whitespace"] is True
        assert "example" in CommentCreate.model_json_schema()

    @pytest.mark.parametrize("field,value", [
        ("nickname", ""),
        ("password", "12"),
        ("content", "   "),
        ("content", "x" * 501),
    ])
    def test_rejected(self, field, value):
        kwargs = dict(nickname="시민", password="1234", content="글", member_name="홍길동")
        kwargs[field] = value
        with pytest.raises(ValidationError):
            CommentCreate(**kwargs)


# ── Store ─────────────────────────────────────────────────────────────────────

class TestAddAndList:
    def test_add_then_list(self, store):
        stored = store.add_comment(new_comment())
        listed = store.list_comments("홍길동")

        assert [c.id for c in listed] == [stored.id]
        assert listed[0].content == "내용"
        assert not listed[0].is_reply

    def test_password_hash_not_returned(self, store, fake_collection):
        store.add_comment(new_comment())
        assert fake_collection.documents[0]["password_hash"].startswith("scrypt$")
        rows = list(fake_collection.find({"member_name": "홍길동"}, {"password_hash": 0}))
        assert "password_hash" not in rows[0]

    def test_list_is_per_person(self, store):
        store.add_comment(new_comment(member="홍길동"))
        store.add_comment(new_comment(member="김철수"))
        assert len(store.list_comments("김철수")) == 1
        assert store.list_comments("없는사람") == []

    def test_reply(self, store):
        parent = store.add_comment(new_comment())
        reply = store.add_comment(new_comment(parent_id=parent.id))
        assert reply.is_reply
        assert reply.parent_id == parent.id


class TestParentIdSpelling:
    def test_uppercase_parent_id_threads(self, store):
        parent = store.add_comment(new_comment())
        reply = store.add_comment(new_comment(parent_id=parent.id.upper()))

        assert reply.parent_id == parent.id
        threads = build_threads(store.list_comments("홍길동"))
        assert len(threads[0].replies) == 1

    def test_uppercase_parent_id_cascades_on_delete(self, store):
        parent = store.add_comment(new_comment())
        store.add_comment(new_comment(parent_id=parent.id.upper()))

        assert store.delete_comment(parent.id.upper(), "1234")
        assert store.list_comments("홍길동") == []


class TestReplyRules:
    def test_unknown_parent(self, store):
        with pytest.raises(CommentError):
            store.add_comment(new_comment(parent_id="0123456789abcdef01234567"))

    def test_invalid_parent_id(self, store):
        with pytest.raises(CommentError):
            store.add_comment(new_comment(parent_id="nope"))

    def test_parent_on_other_person(self, store):
        parent = store.add_comment(new_comment(member="김철수"))
        with pytest.raises(CommentError):
            store.add_comment(new_comment(member="홍길동", parent_id=parent.id))

    def test_no_reply_to_reply(self, store):
        parent = store.add_comment(new_comment())
        reply = store.add_comment(new_comment(parent_id=parent.id))
        with pytest.raises(CommentError):
            store.add_comment(new_comment(parent_id=reply.id))


class TestDelete:
    def test_wrong_password(self, store):
        stored = store.add_comment(new_comment(password="1234"))
        with pytest.raises(CommentPermissionError):
            store.delete_comment(stored.id, "0000")
        assert len(store.list_comments("홍길동")) == 1

    def test_permission_error_is_a_comment_error(self):
        assert issubclass(CommentPermissionError, CommentError)

    def test_delete_reply_keeps_parent(self, store):
        parent = store.add_comment(new_comment())
        reply = store.add_comment(new_comment(parent_id=parent.id, password="5678"))
        assert store.delete_comment(reply.id, "5678")
        assert [c.id for c in store.list_comments("홍길동")] == [parent.id]

    def test_delete_parent_removes_replies(self, store):
        parent = store.add_comment(new_comment())
        store.add_comment(new_comment(parent_id=parent.id, password="5678"))
        assert store.delete_comment(parent.id, "1234")
        assert store.list_comments("홍길동") == []

    def test_unknown_id(self, store):
        assert store.delete_comment("0123456789abcdef01234567", "1234") is False
        assert store.delete_comment("nope", "1234") is False


# ── Threads ───────────────────────────────────────────────────────────────────

def _comment(id, parent_id=None):
    return Comment(
        id=id,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        nickname="n",
        content="c",
        member_name="홍길동",
        parent_id=parent_id,
    )


def test_build_threads():
    threads = build_threads([
        _comment("a"),
        _comment("b"),
        _comment("r1", parent_id="a"),
        _comment("r2", parent_id="a"),
        _comment("orphan", parent_id="gone"),
    ])
    assert [t.comment.id for t in threads] == ["a", "b"]
    assert [r.id for r in threads[0].replies] == ["r1", "r2"]
    assert threads[1].replies == []


def test_threads_from_store(store):
    parent = store.add_comment(new_comment())
    store.add_comment(new_comment(parent_id=parent.id))
    threads = build_threads(store.list_comments("홍길동"))
    assert len(threads) == 1
    assert len(threads[0].replies) == 1
