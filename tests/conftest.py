"""
Pytest fixtures for disclosure_watchdog tests.

Provides small disclosure/profile documents written to tmp_path, sources
pointing at them, and an in-memory stand-in for a pymongo collection so the
comment board can be tested without a MongoDB server.
"""
import json
from pathlib import Path
from types import SimpleNamespace

import pytest
from bson import ObjectId

from disclosure_watchdog.ingestion.disclosures import (
    AssemblyDisclosureSource,
    OfficialsDisclosureSource,
)
from disclosure_watchdog.ingestion.profiles import LegislatorProfileSource
from disclosure_watchdog.services.summaries import DisclosureService


# ── Sample documents ──────────────────────────────────────────────────────────

ASSEMBLY_DOC = [
    {
        "name": "홍길동",
        "assets": [
            {"relationship": "본인", "type": "건물", "description": "서울 종로구 아파트",
             "previous_value": 850000, "current_value": 920000, "reason": "가액변동"},
            {"relationship": "배우자", "type": "예금", "description": "국민은행",
             "previous_value": 120000, "current_value": 135000, "reason": "급여저축"},
            {"relationship": "본인", "type": "금융채무", "description": "주택담보대출",
             "previous_value": 300000, "current_value": 250000, "reason": "상환"},
        ],
    },
    {
        "name": "김철수",
        "assets": [
            {"relationship": "본인", "type": "토지", "description": "임야",
             "previous_value": 40000, "current_value": 0, "increase": 5000, "decrease": 0},
            {"relationship": "장녀", "type": "가상자산", "description": "비트코인",
             "previous_value": 0, "current_value": 30000},
        ],
    },
    {
        "name": "이영희",
        "assets": [
            {"relationship": "본인", "type": "현금", "description": "",
             "previous_value": 5000, "current_value": 7000},
        ],
    },
]

PROFILES_DOC = [
    {"NAAS_NM": "홍길동", "PLPT_NM": "더불어민주당/국민의힘", "ELECD_NM": "서울 종로구",
     "NAAS_PIC": "https://example.org/hong.jpg", "STATUS_NM": "현직의원"},
    {"NAAS_NM": "김철수", "PLPT_NM": "조국혁신당", "ELECD_NM": "", "NAAS_PIC": None,
     "STATUS_NM": "현직의원"},
    {"NAAS_NM": "이영희", "PLPT_NM": "더불어민주당", "ELECD_NM": "서울 마포구갑",
     "NAAS_PIC": "", "STATUS_NM": "전직의원"},
]

OFFICIALS_LIST = [
    {
        "name": "박공무",
        "affiliation": "국토교통부",
        "assets": [
            {"relationship": "본인", "type": "아파트", "description": "세종",
             "previous_value": 500000, "current_value": 530000},
            {"relationship": "본인", "type": "채무", "description": "임대보증금",
             "previous_value": 100000, "current_value": 100000, "reason": "변동없음"},
        ],
    },
    {
        "name": "최정부",
        "affiliation": None,
        "assets": [
            {"relationship": "배우자", "type": "자동차", "description": "그랜저",
             "previous_value": 20000, "current_value": 17000},
        ],
    },
]


def write_json(path: Path, document) -> Path:
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """tmp_path holding all three documents (officials in the wrapped shape)"""
    write_json(tmp_path / "assembly_assets.json", ASSEMBLY_DOC)
    write_json(tmp_path / "members_info.json", PROFILES_DOC)
    write_json(tmp_path / "officials_property.json", {"officials": OFFICIALS_LIST})
    return tmp_path


@pytest.fixture
def service(data_dir):
    """DisclosureService reading the sample documents"""
    return DisclosureService(
        assembly_source=AssemblyDisclosureSource(location=str(data_dir / "assembly_assets.json")),
        officials_source=OfficialsDisclosureSource(location=str(data_dir / "officials_property.json")),
        profile_source=LegislatorProfileSource(location=str(data_dir / "members_info.json")),
    )


# ── In-memory MongoDB collection ──────────────────────────────────────────────

def _matches(document: dict, query: dict) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents):
        self._documents = list(documents)

    def sort(self, key, direction=1):
        self._documents.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self._documents)


class FakeCollection:
    """The subset of pymongo.collection.Collection the app uses."""

    def __init__(self):
        self.documents = []
        self.indexes = {"_id_": [("_id", 1)]}
        self.drop_count = 0

    def find(self, query=None, projection=None):
        hidden = {k for k, v in (projection or {}).items() if not v}
        rows = [
            {k: v for k, v in doc.items() if k not in hidden}
            for doc in self.documents
            if _matches(doc, query or {})
        ]
        return FakeCursor(rows)

    def find_one(self, query):
        for doc in self.documents:
            if _matches(doc, query):
                return dict(doc)
        return None

    def insert_one(self, document):
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def delete_one(self, query):
        for i, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def delete_many(self, query):
        before = len(self.documents)
        self.documents = [d for d in self.documents if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.documents))

    def create_index(self, keys, name=None):
        self.indexes[name] = list(keys)
        return name

    def drop_indexes(self):
        self.drop_count += 1
        self.indexes = {"_id_": [("_id", 1)]}

    def index_information(self):
        return {name: {"key": keys} for name, keys in self.indexes.items()}


class FakeDatabase(dict):
    """db[name] returns the same FakeCollection every time."""

    def __missing__(self, name):
        collection = FakeCollection()
        self[name] = collection
        return collection


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def fake_db():
    return FakeDatabase()
