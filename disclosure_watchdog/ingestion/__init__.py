"""
Ingestion module - loads the static disclosure and profile documents.

Usage:
    assembly, officials, profiles = await load_all_sources()
"""
import asyncio
from typing import List, Optional, Tuple

import httpx

from disclosure_watchdog.ingestion.base import BaseSource
from disclosure_watchdog.ingestion.disclosures import (
    AssemblyDisclosureSource,
    OfficialsDisclosureSource,
)
from disclosure_watchdog.ingestion.profiles import LegislatorProfileSource
from disclosure_watchdog.models.disclosure import PersonRecord
from disclosure_watchdog.models.profile import LegislatorProfile


async def load_all_sources(
    assembly_source: Optional[AssemblyDisclosureSource] = None,
    officials_source: Optional[OfficialsDisclosureSource] = None,
    profile_source: Optional[LegislatorProfileSource] = None,
    client: Optional[httpx.AsyncClient] = None
) -> Tuple[List[PersonRecord], List[PersonRecord], List[LegislatorProfile]]:
    """
    Load the three documents concurrently.

    Each load degrades to an empty list on failure, so this never raises
    for a missing document.

    Returns:
        (assembly records, officials records, current legislator profiles)
    """
    assembly_source = assembly_source or AssemblyDisclosureSource(client=client)
    officials_source = officials_source or OfficialsDisclosureSource(client=client)
    profile_source = profile_source or LegislatorProfileSource(client=client)

    assembly, officials, profiles = await asyncio.gather(
        assembly_source.load(),
        officials_source.load(),
        profile_source.load(),
    )
    return assembly, officials, profiles


__all__ = [
    "BaseSource",
    "AssemblyDisclosureSource",
    "OfficialsDisclosureSource",
    "LegislatorProfileSource",
    "load_all_sources",
]
