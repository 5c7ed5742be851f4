"""
Base source class for the static disclosure documents.

Each source fetches one JSON document (local file or URL), transforms it
into model instances, and keeps simple statistics. A failed fetch is
logged once and degrades to an empty result; there are no retries.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generic, List, Optional, TypeVar
import json
import logging

import httpx

from disclosure_watchdog.config.settings import settings

T = TypeVar('T')


class BaseSource(ABC, Generic[T]):
    """
    Base class for all document sources.

    Subclasses set `filename` (relative to settings.DATA_SOURCE_BASE) or
    pass an explicit `location`, and implement transform_item().
    """

    filename: str = ""

    def __init__(
        self,
        location: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the source.

        Args:
            location: File path or http(s) URL of the document. Defaults to
                      settings.DATA_SOURCE_BASE joined with `filename`.
            client: Shared httpx client (remote locations only). If None,
                    a short-lived client is created per fetch.
            timeout: HTTP timeout in seconds (default: settings.HTTP_TIMEOUT)
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.location = location or settings.data_location(self.filename)
        self.client = client
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> dict:
        return {
            "processed": 0,
            "loaded": 0,
            "skipped": 0,
            "errors": 0,
            "started_at": None,
            "completed_at": None
        }

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    async def fetch_data(self) -> Any:
        """
        Fetch and parse the raw JSON document.

        Raises:
            httpx.HTTPError: remote fetch failed
            OSError: local file could not be read
            ValueError: document is not valid JSON
        """
        if self.is_remote:
            return await self._fetch_remote()
        return self._read_local()

    async def _fetch_remote(self) -> Any:
        if self.client is not None:
            response = await self.client.get(self.location)
            response.raise_for_status()
            return response.json()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.location)
            response.raise_for_status()
            return response.json()

    def _read_local(self) -> Any:
        text = Path(self.location).read_text(encoding="utf-8")
        return json.loads(text)

    def unwrap(self, document: Any) -> List[Any]:
        """
        Extract the list of raw rows from the document.

        Override for documents that are not a bare array.
        """
        if isinstance(document, list):
            return document
        self.logger.warning(f"Expected a JSON array in {self.location}, got {type(document).__name__}")
        return []

    @abstractmethod
    def transform_item(self, raw_item: Any) -> Optional[T]:
        """
        Transform one raw row to our model.

        Args:
            raw_item: Raw row from the document

        Returns:
            Model instance, or None to skip the row
        """
        pass

    def transform(self, document: Any) -> List[T]:
        """Transform a whole document, skipping unusable rows"""
        items = []
        for raw_item in self.unwrap(document):
            self.stats["processed"] += 1
            item = self.transform_item(raw_item)
            if item is None:
                self.stats["skipped"] += 1
                continue
            items.append(item)
            self.stats["loaded"] += 1
        return items

    async def load(self) -> List[T]:
        """
        Fetch and transform the document.

        Never raises for a missing or unparseable document: the failure
        is logged and an empty list returned.

        Returns:
            Transformed items (possibly empty)
        """
        self.logger.info(f"Loading {self.location}...")
        self.reset_stats()
        self.stats["started_at"] = datetime.now(timezone.utc)

        try:
            document = await self.fetch_data()
            items = self.transform(document)

        except (httpx.HTTPError, OSError, ValueError) as e:
            self.stats["errors"] += 1
            self.logger.error(f"Failed to load {self.location}: {e}")
            items = []

        finally:
            self.stats["completed_at"] = datetime.now(timezone.utc)

        self.logger.info(
            f"Load complete. "
            f"Processed: {self.stats['processed']}, "
            f"Loaded: {self.stats['loaded']}, "
            f"Skipped: {self.stats['skipped']}, "
            f"Errors: {self.stats['errors']}"
        )
        return items

    def reset_stats(self):
        """Reset statistics counters"""
        self.stats = self._empty_stats()
