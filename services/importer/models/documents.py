"""
Stored documents.

Every document is addressed by `_key` inside its collection and dumped with
`to_document()` for insertion.
"""

from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Collection names
COUNTRY_COLLECTION = "Country"
FACILITY_COLLECTION = "PartoHotelFacility"
CITY_COLLECTION = "PartoHotelCity"
HOTEL_COLLECTION = "PartoHotel"
LOOKUP_COLLECTION = "HotelLookup"

KNOWN_COLLECTIONS = frozenset(
    {
        COUNTRY_COLLECTION,
        FACILITY_COLLECTION,
        CITY_COLLECTION,
        HOTEL_COLLECTION,
        LOOKUP_COLLECTION,
    }
)

# Field carrying the synthesized search text on lookup records
FULLTEXT_FIELD = "Fulltext"


def document_id(collection: str, key: str) -> str:
    """Internal identifier of a stored document."""
    return f"{collection}/{key}"


class LookupType(IntEnum):
    """Kind of entity a lookup record points at."""

    CITY = 1
    HOTEL = 2


class ProviderType(IntEnum):
    """Upstream content providers."""

    PARTO = 1


class Document(BaseModel):
    """Base model for stored documents."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., alias="_key")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Country(Document):
    country_code: str = Field(..., alias="CountryCode")
    country_name: str = Field(..., alias="CountryName")


class Facility(Document):
    name: str = Field(..., alias="Name")
    group: str = Field(..., alias="Group")


class City(Document):
    name: str = Field(..., alias="Name")
    destination: str = Field(..., alias="Destination")
    country_id: str = Field(..., alias="CountryId")
    lookup_key: str = Field(..., alias="lookupKey")


class Hotel(Document):
    """
    A provider property with its joins resolved.

    Provider fields the importer does not touch are stored as extras.
    Chains stays absent from the document when the property has no chain.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(..., alias="Name")
    city_id: str = Field(..., alias="CityId")
    accommodation: str = Field(..., alias="Accommodation")
    chains: Optional[List[str]] = Field(default=None, alias="Chains")
    facilities: List[int] = Field(default_factory=list, alias="Facilities")
    lookup_key: str = Field(..., alias="lookupKey")

    def to_document(self) -> Dict[str, Any]:
        doc = self.model_dump(by_alias=True, mode="json")
        if self.chains is None:
            doc.pop("Chains", None)
        return doc


class Provider(BaseModel):
    """Reference from a lookup record to a provider's entity."""

    model_config = ConfigDict(populate_by_name=True)

    type: ProviderType = Field(default=ProviderType.PARTO, alias="Type")
    key: str = Field(..., alias="Key")
    collection_id: Optional[str] = Field(default=None, alias="CollectionId")


class LookupRecord(Document):
    """Search-facing projection of a city or hotel."""

    type: LookupType = Field(..., alias="Type")
    name: str = Field(..., alias="Name")
    fulltext: str = Field(..., alias=FULLTEXT_FIELD)
    rate: int = Field(default=0, alias="Rate")
    providers: List[Provider] = Field(default_factory=list, alias="Providers")
