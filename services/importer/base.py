"""
Base loader class - Abstract base for the import stages.
"""

from abc import ABC, abstractmethod
from typing import List

from loguru import logger

from services.importer import repo
from services.importer.keys import LookupKeyGenerator
from services.importer.models.base import ImportStats
from services.importer.sources.local import LocalSource


class BaseLoader(ABC):
    """
    Abstract base class for all import stages.

    Subclasses must implement:
    - stage_name: Unique identifier for this stage
    - load(): Read the input files and write the collections
    """

    def __init__(self, source: LocalSource, keys: LookupKeyGenerator):
        self.source = source
        self.keys = keys

    @property
    @abstractmethod
    def stage_name(self) -> str:
        """Unique identifier for this stage (e.g., 'countries', 'hotels')."""
        pass

    @abstractmethod
    async def load(self) -> ImportStats:
        """Run the stage. Any failure propagates and aborts the run."""
        pass

    async def _reset_collections(self, collections: List[str]) -> None:
        """Create each collection if missing, then truncate it."""
        for collection in collections:
            await repo.ensure_collection(collection)
            await repo.truncate_collection(collection)

    async def _load_countries(self) -> dict:
        """Stored countries keyed by country code."""
        countries = await repo.get_all_countries()
        logger.info(f"Loaded {len(countries)} countries from storage")
        return {c["_key"]: c for c in countries}
