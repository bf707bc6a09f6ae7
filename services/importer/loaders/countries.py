"""
Country loader - Add provider countries missing from the Country collection.

The Country collection is shared with other applications, so it is never
truncated: only codes not stored yet are inserted.
"""

from typing import Iterable, List, Set

from loguru import logger

from services.importer import repo
from services.importer.base import BaseLoader
from services.importer.registry import register
from services.importer.models.base import ImportStats
from services.importer.models.documents import COUNTRY_COLLECTION, Country
from services.importer.models.parto import PartoCountry

COUNTRY_FILE = "Country.json"


def new_countries(records: Iterable[PartoCountry], existing_keys: Set[str]) -> List[Country]:
    """Countries whose code is not stored yet, each code at most once."""
    seen = set(existing_keys)
    countries = []
    for record in records:
        if record.code in seen:
            continue
        seen.add(record.code)
        countries.append(
            Country(key=record.code, country_code=record.code, country_name=record.name)
        )
    return countries


@register("countries")
class CountryLoader(BaseLoader):
    """Insert countries from Country.json that are not stored yet."""

    stage_name = "countries"

    async def load(self) -> ImportStats:
        stats = ImportStats()

        records = await self.source.read_records(COUNTRY_FILE, PartoCountry)
        stats.files_processed += 1
        stats.records_read = len(records)

        await repo.ensure_collection(COUNTRY_COLLECTION)
        existing = await repo.get_country_keys()

        countries = new_countries(records, existing)
        stats.records_saved = await repo.import_documents(
            COUNTRY_COLLECTION, [c.to_document() for c in countries]
        )

        logger.info(f"{stats.records_saved} countries added to {COUNTRY_COLLECTION} collection")
        return stats
