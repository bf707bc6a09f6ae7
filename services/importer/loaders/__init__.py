"""
Import stage implementations.

Import this module to register all loaders with the registry.
"""

from services.importer.loaders.countries import CountryLoader
from services.importer.loaders.facilities import FacilityLoader
from services.importer.loaders.cities import CityLoader
from services.importer.loaders.hotels import HotelLoader

__all__ = [
    "CountryLoader",
    "FacilityLoader",
    "CityLoader",
    "HotelLoader",
]
