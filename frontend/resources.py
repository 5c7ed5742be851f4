"""
Process-wide resources shared by every page.

Pages import these instead of defining their own cached factories, so the
ranking page's refresh button clears the same cache the detail page reads.
"""
import asyncio

import streamlit as st

from disclosure_watchdog.database.connection import get_comments_collection
from disclosure_watchdog.services.comments import CommentStore
from disclosure_watchdog.services.summaries import DisclosureService


@st.cache_resource
def get_service() -> DisclosureService:
    """Disclosure service with all documents preloaded"""
    service = DisclosureService()
    asyncio.run(service.preload())
    return service


@st.cache_resource
def get_comment_store() -> CommentStore:
    """Comment store on the shared MongoDB connection"""
    return CommentStore(get_comments_collection())
