"""Tests for lookup key generators."""

import pytest

from services.importer.keys import SequentialKeys, UuidKeys, make_key_generator


class TestSequentialKeys:
    """Tests for SequentialKeys."""

    @pytest.mark.no_db
    def test_counts_from_one(self):
        """First key is "1" and keys increase by one."""
        keys = SequentialKeys()

        assert [keys.next() for _ in range(3)] == ["1", "2", "3"]

    @pytest.mark.no_db
    def test_custom_start(self):
        """Counter continues after the given start."""
        keys = SequentialKeys(start=41)

        assert keys.next() == "42"

    @pytest.mark.no_db
    def test_tracks_issued(self):
        """Issued counts every key handed out."""
        keys = SequentialKeys(start=100)
        for _ in range(5):
            keys.next()

        assert keys.issued == 5


class TestUuidKeys:
    """Tests for UuidKeys."""

    @pytest.mark.no_db
    def test_keys_are_unique(self):
        """UUID keys do not repeat."""
        keys = UuidKeys()
        issued = {keys.next() for _ in range(100)}

        assert len(issued) == 100
        assert keys.issued == 100

    @pytest.mark.no_db
    def test_key_format(self):
        """UUID keys are canonical 36-character strings."""
        key = UuidKeys().next()

        assert len(key) == 36
        assert key.count("-") == 4


class TestMakeKeyGenerator:
    """Tests for make_key_generator."""

    @pytest.mark.no_db
    def test_known_kinds(self):
        assert isinstance(make_key_generator("sequential"), SequentialKeys)
        assert isinstance(make_key_generator("uuid"), UuidKeys)

    @pytest.mark.no_db
    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown lookup key kind"):
            make_key_generator("random")
