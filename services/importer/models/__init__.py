"""
Importer data models.
"""

from services.importer.models.base import ImportStats
from services.importer.models.documents import (
    City,
    Country,
    Facility,
    Hotel,
    LookupRecord,
    LookupType,
    Provider,
    ProviderType,
)

__all__ = [
    "ImportStats",
    "City",
    "Country",
    "Facility",
    "Hotel",
    "LookupRecord",
    "LookupType",
    "Provider",
    "ProviderType",
]
