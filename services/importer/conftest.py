"""Shared fixtures for importer tests."""

from typing import Dict, List, Optional, Set

import pytest

from services.importer import repo


class MemoryStore:
    """Dict-backed stand-in for the repo module's collection operations."""

    def __init__(self):
        self.collections: Dict[str, Dict[str, dict]] = {}
        self.truncated: List[str] = []
        self.indexes: Set[tuple] = set()
        self.fail_on: Optional[str] = None

    def docs(self, collection: str) -> List[dict]:
        return list(self.collections.get(collection, {}).values())

    async def ensure_collection(self, collection: str) -> bool:
        if collection in self.collections:
            return False
        self.collections[collection] = {}
        return True

    async def truncate_collection(self, collection: str) -> None:
        self.collections[collection] = {}
        self.truncated.append(collection)

    async def import_documents(self, collection: str, documents: List[dict]) -> int:
        if collection == self.fail_on:
            raise RuntimeError(f"write to {collection} failed")
        target = self.collections.setdefault(collection, {})
        for doc in documents:
            if doc["_key"] in target:
                raise RuntimeError(f"duplicate key {doc['_key']} in {collection}")
            target[doc["_key"]] = doc
        return len(documents)

    async def import_with_lookups(self, collection, documents, lookups, lookup_collection) -> int:
        saved = await self.import_documents(collection, documents)
        await self.import_documents(lookup_collection, lookups)
        return saved

    async def get_country_keys(self) -> Set[str]:
        return set(self.collections.get("Country", {}))

    async def get_all_countries(self) -> List[dict]:
        return self.docs("Country")

    async def get_documents_by_keys(self, collection: str, keys: List[str]) -> Dict[str, dict]:
        stored = self.collections.get(collection, {})
        return {k: stored[k] for k in keys if k in stored}

    async def ensure_fulltext_index(self, collection: str, field: str, name=None) -> None:
        self.indexes.add((collection, field))


@pytest.fixture
def memory_store(monkeypatch):
    """Patch the repo module so loaders read and write a MemoryStore."""
    store = MemoryStore()
    for name in (
        "ensure_collection",
        "truncate_collection",
        "import_documents",
        "import_with_lookups",
        "get_country_keys",
        "get_all_countries",
        "get_documents_by_keys",
        "ensure_fulltext_index",
    ):
        monkeypatch.setattr(repo, name, getattr(store, name))
    return store


@pytest.fixture
def static_dir(tmp_path, write_json):
    """A small but complete static data dump."""
    write_json("Country.json", [
        {"Code": "AE", "Name": "United Arab Emirates"},
        {"Code": "US", "Name": "United States"},
    ])
    write_json("FacilityGroup.json", [
        {"Id": 1, "Name": "General"},
        {"Id": 2, "Name": "Wellness"},
    ])
    write_json("Facility.json", [
        {"Id": 100, "Name": "Wi-Fi", "FacilityGroupId": 1},
        {"Id": 200, "Name": "Spa", "FacilityGroupId": 2},
    ])
    write_json("PropertyDestination.json", [
        {"Id": 7, "Name": "Dubai Emirate", "CountryId": "AE"},
        {"Id": 8, "Name": "Illinois", "CountryId": "US"},
    ])
    write_json("PropertyCity.json", [
        {"Id": 10, "Name": "Dubai", "PropertyDestinationId": 7},
        {"Id": 11, "Name": "Springfield", "PropertyDestinationId": 8},
    ])
    write_json("PropertyAccommodation.json", [
        {"Id": 1, "Name": "Hotel"},
        {"Id": 2, "Name": "Apartment"},
    ])
    write_json("Chain.json", [
        {"Id": 5, "Name": "Jumeirah"},
        {"Id": 6, "Name": "Rotana"},
    ])
    write_json("PropertyChain.json", [
        {"PropertyId": 1000, "ChainId": 5},
        {"PropertyId": 1000, "ChainId": 6},
    ])
    write_json("PropertyFacility_1.json", [
        {"PropertyId": 1000, "FacilityId": 100},
    ])
    write_json("PropertyFacility_2.json", [
        {"PropertyId": 1000, "FacilityId": 200},
    ])
    write_json("Property_1.json", [
        {"Id": 1000, "Name": "Burj Al Arab", "PropertyCityId": 10, "Accommodation": 1, "Star": 5},
    ])
    write_json("Property_2.json", [
        {"Id": 2000, "Name": "Simpson Inn", "PropertyCityId": 11, "Accommodation": 2, "Star": 2},
    ])
    return tmp_path
