"""
Facility loader - Reload PartoHotelFacility with each facility's group name.
"""

from typing import List

from loguru import logger

from services.importer import repo
from services.importer.base import BaseLoader
from services.importer.errors import MissingReferenceError
from services.importer.joins import index_by
from services.importer.registry import register
from services.importer.models.base import ImportStats
from services.importer.models.documents import FACILITY_COLLECTION, Facility
from services.importer.models.parto import PartoFacility, PartoFacilityGroup

FACILITY_FILE = "Facility.json"
FACILITY_GROUP_FILE = "FacilityGroup.json"


def build_facilities(
    facilities: List[PartoFacility], groups: List[PartoFacilityGroup]
) -> List[Facility]:
    """
    Join each facility to its group.

    Raises:
        MissingReferenceError: If a facility names an unknown group
    """
    groups_by_id = index_by(groups, lambda g: g.id)
    result = []
    for facility in facilities:
        group = groups_by_id.get(facility.facility_group_id)
        if group is None:
            raise MissingReferenceError(
                "FacilityGroup", facility.facility_group_id, f"Facility {facility.id}"
            )
        result.append(Facility(key=str(facility.id), name=facility.name, group=group.name))
    return result


@register("facilities")
class FacilityLoader(BaseLoader):
    """Truncate and reload the PartoHotelFacility collection."""

    stage_name = "facilities"

    async def load(self) -> ImportStats:
        stats = ImportStats()

        await self._reset_collections([FACILITY_COLLECTION])

        groups = await self.source.read_records(FACILITY_GROUP_FILE, PartoFacilityGroup)
        facilities = await self.source.read_records(FACILITY_FILE, PartoFacility)
        stats.files_processed += 2
        stats.records_read = len(facilities)

        documents = build_facilities(facilities, groups)
        stats.records_saved = await repo.import_documents(
            FACILITY_COLLECTION, [f.to_document() for f in documents]
        )

        logger.info(f"{stats.records_saved} facilities added to {FACILITY_COLLECTION} collection")
        return stats
