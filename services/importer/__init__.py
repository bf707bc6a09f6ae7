"""
Importer Service - Load the Parto hotel static data dump.

Stages (run in this order):
- countries: Country.json -> Country (additive)
- facilities: Facility.json + FacilityGroup.json -> PartoHotelFacility
- cities: PropertyCity.json + PropertyDestination.json -> PartoHotelCity + HotelLookup
- hotels: Property_*.json + reference files -> PartoHotel + HotelLookup

Usage:
    from services.importer import Service, LocalSource, SequentialKeys

    service = Service(LocalSource("/data/parto"), SequentialKeys())
    results = await service.run()

    # Subset of stages (still in pipeline order)
    results = await service.run(["cities", "hotels"])
"""

# Service
from services.importer.service import Service, IService

# Base classes
from services.importer.base import BaseLoader
from services.importer.models.base import ImportStats

# Registry
from services.importer.registry import register, get_loader, list_stages

# Loaders
from services.importer.loaders.countries import CountryLoader
from services.importer.loaders.facilities import FacilityLoader
from services.importer.loaders.cities import CityLoader, TOP_DESTINATIONS
from services.importer.loaders.hotels import HotelLoader

# Keys
from services.importer.keys import LookupKeyGenerator, SequentialKeys, UuidKeys, make_key_generator

# Config and errors
from services.importer.config import ImporterConfig
from services.importer.errors import (
    ImporterError,
    ConfigurationError,
    InputFileError,
    MissingReferenceError,
)

# Sources
from services.importer.sources import LocalSource

# Logging
from services.importer.logging import ImportLogger, capture_import_logs

__all__ = [
    # Service
    "Service",
    "IService",
    # Base classes
    "BaseLoader",
    "ImportStats",
    # Registry
    "register",
    "get_loader",
    "list_stages",
    # Loaders
    "CountryLoader",
    "FacilityLoader",
    "CityLoader",
    "HotelLoader",
    "TOP_DESTINATIONS",
    # Keys
    "LookupKeyGenerator",
    "SequentialKeys",
    "UuidKeys",
    "make_key_generator",
    # Config and errors
    "ImporterConfig",
    "ImporterError",
    "ConfigurationError",
    "InputFileError",
    "MissingReferenceError",
    # Sources
    "LocalSource",
    # Logging
    "ImportLogger",
    "capture_import_logs",
]
