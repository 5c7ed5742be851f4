"""
Summary service - ranking, search, and lookup over aggregated disclosures.

Summaries are derived from the static documents and cached per population.
The documents only change on redeploy, so the cache is only cleared
explicitly (refresh()).

Usage:
    service = DisclosureService()
    ranking = await service.summaries(Population.ASSEMBLY)
    person = await service.find_person("홍길동")
"""
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional
import asyncio
import logging

from disclosure_watchdog.analysis.aggregator import aggregate
from disclosure_watchdog.config.constants import (
    DEFAULT_PARTY,
    DEFAULT_DISTRICT,
    DEFAULT_GOVERNMENT_AFFILIATION,
    GOVERNMENT_SECONDARY_LABEL,
)
from disclosure_watchdog.database.normalization import (
    index_profiles,
    last_segment,
    normalize_person_name,
)
from disclosure_watchdog.ingestion.disclosures import (
    AssemblyDisclosureSource,
    OfficialsDisclosureSource,
)
from disclosure_watchdog.ingestion.profiles import LegislatorProfileSource
from disclosure_watchdog.ingestion import load_all_sources
from disclosure_watchdog.models.disclosure import (
    Bucket,
    Population,
    PersonRecord,
    PersonSummary,
)
from disclosure_watchdog.models.profile import LegislatorProfile

logger = logging.getLogger(__name__)


class SortKey(str, Enum):
    """Ranking sort options."""
    NET_WORTH = "net_worth"
    CHANGE_AMOUNT = "change_amount"
    CHANGE_RATE = "change_rate"
    NAME = "name"
    REAL_ESTATE = "real_estate"
    FINANCIAL = "financial"
    VEHICLE = "vehicle"
    VIRTUAL_ASSET = "virtual_asset"
    DEBT = "debt"
    OTHER = "other"


_SUMMARY_SORT_FIELDS = {
    SortKey.NET_WORTH: "net_worth",
    SortKey.CHANGE_AMOUNT: "change_amount",
    SortKey.CHANGE_RATE: "change_rate_percent",
    SortKey.NAME: "name",
}


def sort_value(summary: PersonSummary, sort_by: SortKey):
    """Value of one summary under a sort key (bucket keys use the bucket total)"""
    field = _SUMMARY_SORT_FIELDS.get(sort_by)
    if field is not None:
        return getattr(summary, field)
    return summary.bucket_totals[Bucket(sort_by.value)]


# ============================================================================
# Cache
# ============================================================================

class SummaryCache:
    """
    Computed summaries keyed by population.

    Entries live until invalidate() is called.
    """

    def __init__(self):
        self._entries: Dict[Population, List[PersonSummary]] = {}
        self._hits = 0
        self._misses = 0

    def get(self, population: Population) -> Optional[List[PersonSummary]]:
        entry = self._entries.get(population)
        if entry is None:
            self._misses += 1
        else:
            self._hits += 1
        return entry

    def set(self, population: Population, summaries: List[PersonSummary]) -> None:
        self._entries[population] = summaries

    async def get_or_build(
        self,
        population: Population,
        builder: Callable[[], Awaitable[List[PersonSummary]]]
    ) -> List[PersonSummary]:
        """Return the cached entry, building and storing it on a miss"""
        entry = self.get(population)
        if entry is None:
            entry = await builder()
            self.set(population, entry)
        return entry

    def invalidate(self, population: Optional[Population] = None) -> None:
        """Drop one population, or everything when population is None"""
        if population is None:
            self._entries.clear()
        else:
            self._entries.pop(population, None)

    def stats(self) -> dict:
        return {"hits": self._hits, "misses": self._misses, "size": len(self._entries)}


# ============================================================================
# Summary building
# ============================================================================

def summarize_legislator(
    record: PersonRecord,
    profile: Optional[LegislatorProfile]
) -> PersonSummary:
    """Aggregate one legislator, labelled from their profile if any"""
    return aggregate(
        record.assets,
        name=record.name,
        population=Population.ASSEMBLY,
        affiliation_label=last_segment(profile.party if profile else None, default=DEFAULT_PARTY),
        secondary_label=last_segment(profile.district if profile else None, default=DEFAULT_DISTRICT),
        image_url=profile.photo_url if profile else "",
    )


def summarize_official(record: PersonRecord) -> PersonSummary:
    """Aggregate one government official"""
    return aggregate(
        record.assets,
        name=record.name,
        population=Population.GOVERNMENT,
        affiliation_label=record.affiliation or DEFAULT_GOVERNMENT_AFFILIATION,
        secondary_label=GOVERNMENT_SECONDARY_LABEL,
        image_url="",
    )


def rank_by_net_worth(summaries: List[PersonSummary]) -> List[PersonSummary]:
    """Largest net worth first; ties keep document order"""
    return sorted(summaries, key=lambda s: s.net_worth, reverse=True)


def matches_query(summary: PersonSummary, query: str) -> bool:
    """Substring match against name, affiliation, and secondary label"""
    if not query:
        return True
    return (
        query in summary.name
        or query in summary.affiliation_label
        or query in summary.secondary_label
    )


# ============================================================================
# Service
# ============================================================================

class DisclosureService:
    """
    Loads the disclosure documents and serves per-population summaries.

    Documents are loaded lazily on first use; a failed document load
    leaves that population empty rather than raising.
    """

    def __init__(
        self,
        assembly_source: Optional[AssemblyDisclosureSource] = None,
        officials_source: Optional[OfficialsDisclosureSource] = None,
        profile_source: Optional[LegislatorProfileSource] = None,
        cache: Optional[SummaryCache] = None
    ):
        self.assembly_source = assembly_source or AssemblyDisclosureSource()
        self.officials_source = officials_source or OfficialsDisclosureSource()
        self.profile_source = profile_source or LegislatorProfileSource()
        self.cache = cache or SummaryCache()

    @staticmethod
    def _build_assembly(
        records: List[PersonRecord],
        profiles: List[LegislatorProfile]
    ) -> List[PersonSummary]:
        profile_map = index_profiles(profiles)
        summaries = [summarize_legislator(r, profile_map.get(r.name)) for r in records]
        logger.info(f"Built {len(summaries)} assembly summaries ({len(profile_map)} profiles)")
        return rank_by_net_worth(summaries)

    @staticmethod
    def _build_government(records: List[PersonRecord]) -> List[PersonSummary]:
        summaries = [summarize_official(r) for r in records]
        logger.info(f"Built {len(summaries)} government summaries")
        return rank_by_net_worth(summaries)

    async def _load_assembly(self) -> List[PersonSummary]:
        records, profiles = await asyncio.gather(
            self.assembly_source.load(),
            self.profile_source.load(),
        )
        return self._build_assembly(records, profiles)

    async def _load_government(self) -> List[PersonSummary]:
        return self._build_government(await self.officials_source.load())

    async def preload(self) -> None:
        """
        Load all three documents concurrently and fill the cache for
        both populations.
        """
        assembly, officials, profiles = await load_all_sources(
            self.assembly_source,
            self.officials_source,
            self.profile_source,
        )
        self.cache.set(Population.ASSEMBLY, self._build_assembly(assembly, profiles))
        self.cache.set(Population.GOVERNMENT, self._build_government(officials))

    async def summaries(self, population: Population) -> List[PersonSummary]:
        """
        All summaries for a population, ranked by net worth.

        Args:
            population: Population.ASSEMBLY or Population.GOVERNMENT

        Returns:
            Summaries, largest net worth first (empty if the document
            could not be loaded)
        """
        if population == Population.GOVERNMENT:
            return await self.cache.get_or_build(population, self._load_government)
        return await self.cache.get_or_build(population, self._load_assembly)

    async def find_person(
        self,
        name: str,
        population: Optional[Population] = None
    ) -> Optional[PersonSummary]:
        """
        Look up one person by exact name.

        Args:
            name: Person name (URL-encoded names are decoded)
            population: Restrict the search; None searches legislators
                        first, then officials

        Returns:
            PersonSummary, or None if nobody matches
        """
        target = normalize_person_name(name)
        if not target:
            return None

        populations = [population] if population else [Population.ASSEMBLY, Population.GOVERNMENT]
        for pop in populations:
            for summary in await self.summaries(pop):
                if summary.name == target:
                    return summary

        logger.info(f"No disclosure data for {target!r}")
        return None

    async def search(
        self,
        population: Population,
        query: str = "",
        sort_by: SortKey = SortKey.NET_WORTH,
        descending: bool = True,
        category: Optional[Bucket] = None
    ) -> List[PersonSummary]:
        """
        Search, filter, and sort the ranking for a population.

        Args:
            population: Which population to search
            query: Substring of name, party/affiliation, or district/position
            sort_by: Sort key (net worth, change, name, or a bucket total)
            descending: Sort direction
            category: Keep only people with a nonzero total in this bucket

        Returns:
            Matching summaries in the requested order
        """
        query = (query or "").strip()
        results = [s for s in await self.summaries(population) if matches_query(s, query)]

        if category is not None:
            results = [s for s in results if s.bucket_totals[category] != 0]

        return sorted(results, key=lambda s: sort_value(s, sort_by), reverse=descending)

    def refresh(self, population: Optional[Population] = None) -> None:
        """Forget cached summaries so the next call reloads the documents"""
        self.cache.invalidate(population)
        logger.info(f"Summary cache cleared ({population.value if population else 'all'})")
