"""
City loader - Reload PartoHotelCity and the city half of HotelLookup.

Each city is joined to its destination (from PropertyDestination.json) and
to its country (read back from the Country collection), and gets a lookup
record for the unified city/hotel search.
"""

from typing import Dict, List, Tuple

from loguru import logger

from services.importer import repo
from services.importer.base import BaseLoader
from services.importer.errors import MissingReferenceError
from services.importer.joins import index_by
from services.importer.registry import register
from services.importer.models.base import ImportStats
from services.importer.models.documents import (
    CITY_COLLECTION,
    LOOKUP_COLLECTION,
    City,
    LookupRecord,
    LookupType,
    Provider,
    document_id,
)
from services.importer.models.parto import PartoCity, PartoDestination

CITY_FILE = "PropertyCity.json"
DESTINATION_FILE = "PropertyDestination.json"

# Cities ranked first in search (exact, case-sensitive names)
TOP_DESTINATIONS = frozenset(
    {
        "Penang Island",
        "Istanbul",
        "Hong Kong Island",
        "Frankfurt am Main",
        "Dubai",
    }
)


def city_rate(name: str) -> int:
    """1 for top destinations, 0 otherwise."""
    return 1 if name in TOP_DESTINATIONS else 0


def build_city(
    city: PartoCity,
    destinations: Dict[int, PartoDestination],
    countries: Dict[str, dict],
    lookup_key: str,
) -> Tuple[City, LookupRecord]:
    """
    Build the stored city and its lookup record.

    Args:
        city: Provider city
        destinations: Destinations by id
        countries: Stored country documents by key
        lookup_key: Key of the new lookup record

    Raises:
        MissingReferenceError: If the destination or its country is unknown
    """
    destination = destinations.get(city.destination_id)
    if destination is None:
        raise MissingReferenceError("PropertyDestination", city.destination_id, f"City {city.id}")

    country = countries.get(destination.country_id)
    if country is None:
        raise MissingReferenceError(
            "Country", destination.country_id, f"PropertyDestination {destination.id}"
        )

    key = str(city.id)
    country_name = country["CountryName"]

    db_city = City(
        key=key,
        name=city.name,
        destination=destination.name,
        country_id=country["_key"],
        lookup_key=lookup_key,
    )
    lookup = LookupRecord(
        key=lookup_key,
        type=LookupType.CITY,
        name=f"{city.name}, {country_name}",
        fulltext=f"{city.name} {destination.name} {country_name} {country['_key']}",
        rate=city_rate(city.name),
        providers=[Provider(key=key, collection_id=document_id(CITY_COLLECTION, key))],
    )
    return db_city, lookup


@register("cities")
class CityLoader(BaseLoader):
    """Truncate and reload cities together with their lookup records."""

    stage_name = "cities"

    async def load(self) -> ImportStats:
        stats = ImportStats()

        await self._reset_collections([CITY_COLLECTION, LOOKUP_COLLECTION])

        countries = await self._load_countries()
        destinations = await self.source.read_records(DESTINATION_FILE, PartoDestination)
        cities = await self.source.read_records(CITY_FILE, PartoCity)
        stats.files_processed += 2
        stats.records_read = len(cities)

        destinations_by_id = index_by(destinations, lambda d: d.id)

        city_docs: List[dict] = []
        lookup_docs: List[dict] = []
        for city in cities:
            db_city, lookup = build_city(
                city, destinations_by_id, countries, self.keys.next()
            )
            city_docs.append(db_city.to_document())
            lookup_docs.append(lookup.to_document())

        stats.records_saved = await repo.import_with_lookups(
            CITY_COLLECTION, city_docs, lookup_docs, LOOKUP_COLLECTION
        )
        stats.lookups_saved = len(lookup_docs)

        logger.info(f"{stats.records_saved} cities added to {CITY_COLLECTION} collection")
        return stats
