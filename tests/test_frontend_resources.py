"""
Tests for frontend/resources.py - the cached objects every page shares.

st.cache_resource works without a running Streamlit server (it falls back
to an in-memory cache), so the factories can be called directly.
"""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "frontend"))

import resources  # noqa: E402
from disclosure_watchdog.models.disclosure import Population  # noqa: E402


def test_service_is_shared():
    assert resources.get_service() is resources.get_service()


def test_service_is_preloaded():
    service = resources.get_service()
    assert service.cache.get(Population.ASSEMBLY) is not None
    assert service.cache.get(Population.GOVERNMENT) is not None


def test_refresh_clears_the_shared_cache():
    resources.get_service().refresh()
    assert resources.get_service().cache.stats()["size"] == 0
    asyncio.run(resources.get_service().preload())


def test_comment_store_is_shared():
    assert resources.get_comment_store() is resources.get_comment_store()
