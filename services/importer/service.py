"""
Importer Service - Load the Parto hotel static data into the document store.

Runs the registered stages strictly in sequence:
- countries: add new countries to Country
- facilities: reload PartoHotelFacility
- cities: reload PartoHotelCity and the city lookup records
- hotels: reload PartoHotel and the hotel lookup records
"""

import time
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from loguru import logger

from services.importer import registry
from services.importer.keys import LookupKeyGenerator, SequentialKeys
from services.importer.models.base import ImportStats
from services.importer.sources.local import LocalSource

# Import loaders to register them
import services.importer.loaders  # noqa: F401


class IService(ABC):
    """Importer Service Interface - Load static hotel data."""

    @abstractmethod
    async def run(self, stages: Optional[List[str]] = None) -> Dict[str, ImportStats]:
        """
        Run the import pipeline.

        Args:
            stages: Stage names to run (all when None). Always run in pipeline order.

        Returns:
            Mapping of stage name -> stats
        """
        pass

    @abstractmethod
    def list_stages(self) -> List[str]:
        """List all registered stages in run order."""
        pass


class Service(IService):
    """Service for importing the static data dump."""

    def __init__(self, source: LocalSource, keys: Optional[LookupKeyGenerator] = None):
        self.source = source
        self.keys = keys or SequentialKeys()

    async def run(self, stages: Optional[List[str]] = None) -> Dict[str, ImportStats]:
        """
        Run the import pipeline.

        Usage:
            service = Service(LocalSource("/data/parto"))
            results = await service.run()
            results = await service.run(["cities", "hotels"])
        """
        names = registry.resolve_stages(stages)
        started = time.monotonic()

        results: Dict[str, ImportStats] = {}
        for name in names:
            loader = registry.get_loader(name)(self.source, self.keys)

            logger.info(f"ADDING {name.upper()} IN-PROGRESS")
            results[name] = await loader.load()
            logger.info(f"ADDING {name.upper()} FINISHED")

        elapsed = time.monotonic() - started
        logger.info(
            f"The whole script added {self.keys.issued} city/hotel to HotelLookup collection."
        )
        logger.info(f"The whole script took {elapsed:.3f} seconds.")

        return results

    def list_stages(self) -> List[str]:
        """List all registered stages in run order."""
        return registry.list_stages()
