"""
Parto static data records.

Field aliases follow the PascalCase names used in the provider's JSON dump.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PartoRecord(BaseModel):
    """Base model for provider records."""

    model_config = ConfigDict(populate_by_name=True)


class PartoCountry(PartoRecord):
    """Country.json"""

    code: str = Field(..., alias="Code")
    name: str = Field(..., alias="Name")


class PartoFacilityGroup(PartoRecord):
    """FacilityGroup.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")


class PartoFacility(PartoRecord):
    """Facility.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    facility_group_id: int = Field(..., alias="FacilityGroupId")


class PartoDestination(PartoRecord):
    """PropertyDestination.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    country_id: str = Field(..., alias="CountryId")


class PartoCity(PartoRecord):
    """PropertyCity.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    destination_id: int = Field(..., alias="PropertyDestinationId")


class PartoAccommodation(PartoRecord):
    """PropertyAccommodation.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")


class PartoChain(PartoRecord):
    """Chain.json"""

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")


class PartoPropertyChain(PartoRecord):
    """PropertyChain.json"""

    property_id: int = Field(..., alias="PropertyId")
    chain_id: int = Field(..., alias="ChainId")


class PartoPropertyFacility(PartoRecord):
    """PropertyFacility_*.json"""

    property_id: int = Field(..., alias="PropertyId")
    facility_id: int = Field(..., alias="FacilityId")


class PartoProperty(PartoRecord):
    """
    Property_*.json

    Only the fields the importer joins on are declared; every other provider
    field is kept as an extra and passed through to the stored hotel.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    city_id: int = Field(..., alias="PropertyCityId")
    accommodation_id: int = Field(..., alias="Accommodation")

    @property
    def passthrough(self) -> Dict[str, Any]:
        """Provider fields not consumed by the importer."""
        return dict(self.model_extra or {})
