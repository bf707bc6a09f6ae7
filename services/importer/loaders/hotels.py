"""
Hotel loader - Reload PartoHotel and the hotel half of HotelLookup.

Hotels arrive in several Property_*.json shards. Chain names and facility
ids are aggregated per property up front; each shard is then transformed
and written on its own, so shards already written stay in place if a later
one fails.
"""

from typing import Dict, List, Optional

from loguru import logger

from services.importer import repo
from services.importer.base import BaseLoader
from services.importer.errors import MissingReferenceError
from services.importer.joins import append_grouped, index_by
from services.importer.registry import register
from services.importer.models.base import ImportStats
from services.importer.models.documents import (
    CITY_COLLECTION,
    FULLTEXT_FIELD,
    HOTEL_COLLECTION,
    LOOKUP_COLLECTION,
    Hotel,
    LookupRecord,
    LookupType,
    Provider,
    document_id,
)
from services.importer.models.parto import (
    PartoAccommodation,
    PartoChain,
    PartoProperty,
    PartoPropertyChain,
    PartoPropertyFacility,
)

ACCOMMODATION_FILE = "PropertyAccommodation.json"
CHAIN_FILE = "Chain.json"
PROPERTY_CHAIN_FILE = "PropertyChain.json"

# Shard filename filters
PROPERTY_FACILITY_FILTER = "PropertyFacility_"
PROPERTY_FILTER = "Property_"

ChainMap = Dict[int, List[str]]
FacilityMap = Dict[int, List[int]]


def build_chain_map(
    chains: List[PartoChain], property_chains: List[PartoPropertyChain]
) -> ChainMap:
    """
    Map property id -> chain names, in link file order.

    Raises:
        MissingReferenceError: If a link names an unknown chain
    """
    chains_by_id = index_by(chains, lambda c: c.id)
    chain_map: ChainMap = {}
    for link in property_chains:
        chain = chains_by_id.get(link.chain_id)
        if chain is None:
            raise MissingReferenceError("Chain", link.chain_id, f"Property {link.property_id}")
        append_grouped(chain_map, link.property_id, chain.name)
    return chain_map


def add_facility_links(facility_map: FacilityMap, links: List[PartoPropertyFacility]) -> None:
    """Append one shard of property -> facility links to the map."""
    for link in links:
        append_grouped(facility_map, link.property_id, link.facility_id)


def build_hotel(
    prop: PartoProperty,
    accommodations: Dict[int, PartoAccommodation],
    chain_map: ChainMap,
    facility_map: FacilityMap,
    lookup_key: str,
) -> Hotel:
    """
    Resolve a provider property into the stored hotel.

    Raises:
        MissingReferenceError: If the accommodation type is unknown
    """
    accommodation = accommodations.get(prop.accommodation_id)
    if accommodation is None:
        raise MissingReferenceError(
            "PropertyAccommodation", prop.accommodation_id, f"Property {prop.id}"
        )

    values = {
        **prop.passthrough,
        "_key": str(prop.id),
        "Name": prop.name,
        "CityId": str(prop.city_id),
        "Accommodation": accommodation.name,
        "Facilities": list(facility_map.get(prop.id, [])),
        "lookupKey": lookup_key,
    }
    chains = chain_map.get(prop.id)
    if chains is not None:
        values["Chains"] = list(chains)
    return Hotel.model_validate(values)


def build_hotel_lookup(hotel: Hotel, city: dict, country: dict) -> LookupRecord:
    """Build the lookup record of a hotel from its stored city and country."""
    country_name = country["CountryName"]
    return LookupRecord(
        key=hotel.lookup_key,
        type=LookupType.HOTEL,
        name=f"{hotel.name}, {city['Name']} {country_name}",
        fulltext=(
            f"{hotel.name} {city['Name']} {city['Destination']} "
            f"{country_name} {country['_key']}"
        ),
        rate=0,
        providers=[
            Provider(key=hotel.key, collection_id=document_id(HOTEL_COLLECTION, hotel.key))
        ],
    )


@register("hotels")
class HotelLoader(BaseLoader):
    """Truncate and reload hotels shard by shard, with their lookup records."""

    stage_name = "hotels"

    async def load(self) -> ImportStats:
        stats = ImportStats()

        await self._reset_collections([HOTEL_COLLECTION])
        await repo.ensure_collection(LOOKUP_COLLECTION)

        accommodations = await self.source.read_records(ACCOMMODATION_FILE, PartoAccommodation)
        chain_map = await self._load_chain_map()
        facility_map = await self._load_facility_map()
        countries = await self._load_countries()

        accommodations_by_id = index_by(accommodations, lambda a: a.id)

        async for filename, properties in self.source.fetch_all(PROPERTY_FILTER, PartoProperty):
            logger.info(f"{len(properties)} hotels in file: {filename}")
            stats.files_processed += 1
            stats.records_read += len(properties)

            saved = await self._load_shard(
                properties, accommodations_by_id, chain_map, facility_map, countries
            )
            stats.records_saved += saved
            stats.lookups_saved += saved

        logger.info(f"Ensure {FULLTEXT_FIELD} index on {LOOKUP_COLLECTION}")
        await repo.ensure_fulltext_index(LOOKUP_COLLECTION, FULLTEXT_FIELD)

        logger.info(f"{stats.records_saved} hotels added to {HOTEL_COLLECTION} collection")
        return stats

    async def _load_chain_map(self) -> ChainMap:
        chains = await self.source.read_records(CHAIN_FILE, PartoChain)
        links = await self.source.read_records(PROPERTY_CHAIN_FILE, PartoPropertyChain)
        chain_map = build_chain_map(chains, links)
        logger.info(f"Size of PropertyChain map: {len(chain_map)}")
        return chain_map

    async def _load_facility_map(self) -> FacilityMap:
        facility_map: FacilityMap = {}
        async for _, links in self.source.fetch_all(
            PROPERTY_FACILITY_FILTER, PartoPropertyFacility
        ):
            add_facility_links(facility_map, links)
        logger.info(f"Size of PropertyFacility map: {len(facility_map)}")
        return facility_map

    async def _load_shard(
        self,
        properties: List[PartoProperty],
        accommodations: Dict[int, PartoAccommodation],
        chain_map: ChainMap,
        facility_map: FacilityMap,
        countries: Dict[str, dict],
    ) -> int:
        """Transform one shard and write it. Returns number of hotels saved."""
        # Cities referenced by this shard, read back from storage in one query
        city_keys = list(dict.fromkeys(str(p.city_id) for p in properties))
        cities = await repo.get_documents_by_keys(CITY_COLLECTION, city_keys)

        hotel_docs: List[dict] = []
        lookup_docs: List[dict] = []
        for prop in properties:
            hotel = build_hotel(prop, accommodations, chain_map, facility_map, self.keys.next())

            city: Optional[dict] = cities.get(hotel.city_id)
            if city is None:
                raise MissingReferenceError(CITY_COLLECTION, hotel.city_id, f"Property {prop.id}")

            country = countries.get(city["CountryId"])
            if country is None:
                raise MissingReferenceError("Country", city["CountryId"], f"City {hotel.city_id}")

            hotel_docs.append(hotel.to_document())
            lookup_docs.append(build_hotel_lookup(hotel, city, country).to_document())

        return await repo.import_with_lookups(
            HOTEL_COLLECTION, hotel_docs, lookup_docs, LOOKUP_COLLECTION
        )
