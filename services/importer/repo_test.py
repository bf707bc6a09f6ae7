"""Tests for importer repository."""

import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

from services.importer import repo


def _conn_patch(target: str, conn):
    """Patch a connection context manager on the repo module to yield conn."""
    @asynccontextmanager
    async def _fake():
        yield conn

    return patch.object(repo, target, _fake)


class TestCollectionNames:
    """Only known collections reach SQL."""

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_unknown_collection_rejected(self):
        with pytest.raises(ValueError, match="Unknown collection"):
            await repo.truncate_collection('Country"; DROP TABLE x; --')

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_fulltext_rejects_bad_field(self):
        with pytest.raises(ValueError, match="Invalid field name"):
            await repo.ensure_fulltext_index("HotelLookup", "Full text")


class TestEnsureCollection:
    """Tests for ensure_collection."""

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_creates_when_missing(self):
        """Creates the table when it does not exist."""
        mock_conn = AsyncMock()
        mock_conn.fetchval.return_value = False

        with _conn_patch("get_conn", mock_conn):
            created = await repo.ensure_collection("PartoHotelCity")

        assert created is True
        mock_conn.fetchval.assert_called_once()
        assert mock_conn.fetchval.call_args[0][1] == "PartoHotelCity"
        sql = mock_conn.execute.call_args[0][0]
        assert 'CREATE TABLE IF NOT EXISTS "PartoHotelCity"' in sql

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_skips_existing(self):
        mock_conn = AsyncMock()
        mock_conn.fetchval.return_value = True

        with _conn_patch("get_conn", mock_conn):
            created = await repo.ensure_collection("Country")

        assert created is False
        mock_conn.execute.assert_not_called()


class TestTruncateCollection:

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_truncates(self):
        mock_conn = AsyncMock()

        with _conn_patch("get_conn", mock_conn):
            await repo.truncate_collection("PartoHotel")

        mock_conn.execute.assert_called_once_with('TRUNCATE TABLE "PartoHotel"')


class TestImportDocuments:
    """Tests for bulk inserts."""

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_inserts_key_and_document(self):
        mock_conn = AsyncMock()
        docs = [{"_key": "1", "Name": "A"}, {"_key": "2", "Name": "B"}]

        with _conn_patch("get_conn", mock_conn):
            saved = await repo.import_documents("PartoHotelFacility", docs)

        assert saved == 2
        sql, rows = mock_conn.executemany.call_args[0]
        assert 'INSERT INTO "PartoHotelFacility"' in sql
        assert rows == [("1", docs[0]), ("2", docs[1])]

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_empty_is_noop(self):
        mock_conn = AsyncMock()

        with _conn_patch("get_conn", mock_conn):
            saved = await repo.import_documents("Country", [])

        assert saved == 0
        mock_conn.executemany.assert_not_called()

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_import_with_lookups_uses_one_transaction(self):
        """Entity and lookup inserts share the transaction connection."""
        mock_conn = AsyncMock()
        cities = [{"_key": "10"}]
        lookups = [{"_key": "1"}]

        with _conn_patch("get_transaction", mock_conn), patch.object(repo, "get_conn") as plain:
            saved = await repo.import_with_lookups(
                "PartoHotelCity", cities, lookups, "HotelLookup"
            )

        assert saved == 1
        plain.assert_not_called()
        calls = mock_conn.executemany.call_args_list
        assert len(calls) == 2
        assert '"PartoHotelCity"' in calls[0][0][0]
        assert '"HotelLookup"' in calls[1][0][0]


class TestReads:
    """Tests for document reads."""

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_get_country_keys(self):
        mock_conn = AsyncMock()

        with _conn_patch("get_conn", mock_conn):
            with patch.object(repo, "queries") as mock_queries:
                mock_queries.get_country_keys = AsyncMock(
                    return_value=[{"_key": "US"}, {"_key": "DE"}]
                )
                keys = await repo.get_country_keys()

        assert keys == {"US", "DE"}
        mock_queries.get_country_keys.assert_called_once_with(mock_conn)

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_get_all_countries(self):
        mock_conn = AsyncMock()
        doc = {"_key": "US", "CountryCode": "US", "CountryName": "United States"}

        with _conn_patch("get_conn", mock_conn):
            with patch.object(repo, "queries") as mock_queries:
                mock_queries.get_all_countries = AsyncMock(return_value=[{"doc": doc}])
                countries = await repo.get_all_countries()

        assert countries == [doc]

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_get_documents_by_keys(self):
        mock_conn = AsyncMock()
        mock_conn.fetch.return_value = [{"_key": "10", "doc": {"_key": "10", "Name": "Dubai"}}]

        with _conn_patch("get_conn", mock_conn):
            result = await repo.get_documents_by_keys("PartoHotelCity", ["10", "11"])

        assert result == {"10": {"_key": "10", "Name": "Dubai"}}
        assert mock_conn.fetch.call_args[0][1] == ["10", "11"]

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_get_documents_by_keys_empty(self):
        with patch.object(repo, "get_conn", MagicMock()) as mock_get_conn:
            result = await repo.get_documents_by_keys("PartoHotelCity", [])

        assert result == {}
        mock_get_conn.assert_not_called()


class TestFulltextIndex:

    @pytest.mark.no_db
    @pytest.mark.asyncio
    async def test_creates_index_if_not_exists(self):
        mock_conn = AsyncMock()

        with _conn_patch("get_conn", mock_conn):
            await repo.ensure_fulltext_index("HotelLookup", "Fulltext")

        sql = mock_conn.execute.call_args[0][0]
        assert 'CREATE INDEX IF NOT EXISTS "HotelLookup_Fulltext_fulltext_idx"' in sql
        assert "doc->>'Fulltext'" in sql
        assert "USING GIN" in sql
