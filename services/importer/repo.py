"""
Importer Repository - Collection operations on the document store.
"""

from typing import Dict, List, Optional, Set

from loguru import logger

from db.client import queries, get_conn, get_transaction
from db.queries.collections import (
    COLLECTION_EXISTS,
    CREATE_COLLECTION,
    CREATE_FULLTEXT_INDEX,
    GET_DOCUMENTS_BY_KEYS,
    INSERT_DOCUMENT,
    TRUNCATE_COLLECTION,
)
from services.importer.models.documents import KNOWN_COLLECTIONS


def _checked(collection: str) -> str:
    """Collection names are interpolated into SQL, so only known ones pass."""
    if collection not in KNOWN_COLLECTIONS:
        raise ValueError(f"Unknown collection: '{collection}'")
    return collection


async def ensure_collection(collection: str) -> bool:
    """
    Create the collection if it does not exist.

    Returns True if it was created.
    """
    collection = _checked(collection)
    async with get_conn() as conn:
        exists = await conn.fetchval(COLLECTION_EXISTS, collection)
        if exists:
            return False
        await conn.execute(CREATE_COLLECTION.format(collection=collection))
    logger.info(f"{collection} collection created")
    return True


async def truncate_collection(collection: str) -> None:
    """Delete every document in the collection."""
    collection = _checked(collection)
    async with get_conn() as conn:
        await conn.execute(TRUNCATE_COLLECTION.format(collection=collection))
    logger.info(f"{collection} collection truncated")


async def _insert(conn, collection: str, documents: List[dict]) -> int:
    if not documents:
        return 0
    await conn.executemany(
        INSERT_DOCUMENT.format(collection=_checked(collection)),
        [(doc["_key"], doc) for doc in documents],
    )
    return len(documents)


async def import_documents(collection: str, documents: List[dict]) -> int:
    """
    Bulk insert documents into a collection.

    Returns number of documents inserted.
    """
    async with get_conn() as conn:
        return await _insert(conn, collection, documents)


async def import_with_lookups(
    collection: str,
    documents: List[dict],
    lookups: List[dict],
    lookup_collection: str,
) -> int:
    """
    Bulk insert entity documents and their lookup records in one transaction.

    Either both collections receive the batch or neither does.
    Returns number of entity documents inserted.
    """
    async with get_transaction() as conn:
        logger.info(f"Adding {len(documents)} documents to {collection} collection")
        saved = await _insert(conn, collection, documents)
        logger.info(f"Adding {len(lookups)} documents to {lookup_collection} collection")
        await _insert(conn, lookup_collection, lookups)
        return saved


async def get_country_keys() -> Set[str]:
    """Keys of every stored country."""
    async with get_conn() as conn:
        rows = await queries.get_country_keys(conn)
        return {r["_key"] for r in rows}


async def get_all_countries() -> List[dict]:
    """Every stored country document."""
    async with get_conn() as conn:
        rows = await queries.get_all_countries(conn)
        return [r["doc"] for r in rows]


async def get_documents_by_keys(collection: str, keys: List[str]) -> Dict[str, dict]:
    """
    Batch lookup documents by key.

    Returns dict mapping key -> document for existing documents.
    """
    if not keys:
        return {}

    collection = _checked(collection)
    async with get_conn() as conn:
        rows = await conn.fetch(
            GET_DOCUMENTS_BY_KEYS.format(collection=collection),
            list(keys),
        )
        return {r["_key"]: r["doc"] for r in rows}


async def ensure_fulltext_index(collection: str, field: str, name: Optional[str] = None) -> None:
    """Create a full-text index on a document field if it does not exist."""
    collection = _checked(collection)
    if not field.isidentifier():
        raise ValueError(f"Invalid field name: '{field}'")
    index = name or f"{collection}_{field}_fulltext_idx"
    async with get_conn() as conn:
        await conn.execute(
            CREATE_FULLTEXT_INDEX.format(index=index, collection=collection, field=field)
        )
