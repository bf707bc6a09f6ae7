"""
Local filesystem source handler - Read the static JSON dump from disk.
"""

import json
from pathlib import Path
from typing import AsyncIterator, List, Tuple, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from services.importer.errors import ConfigurationError, InputFileError

M = TypeVar("M", bound=BaseModel)


class LocalSource:
    """
    Read provider files from a local directory.

    Single files are addressed by name relative to the base directory;
    sharded files are discovered by a substring of their name.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.encoding = encoding
        self._base_path = Path(path)

    async def list_files(self, name_filter: str) -> List[str]:
        """
        List file names in the directory containing the filter substring.

        Args:
            name_filter: Substring the file name must contain (e.g. "Property_")

        Returns:
            File names sorted so shard order is the same on every platform
        """
        if not self._base_path.is_dir():
            raise ConfigurationError(f"Static files directory does not exist: {self._base_path}")

        files = sorted(
            entry.name
            for entry in self._base_path.iterdir()
            if entry.is_file() and name_filter in entry.name
        )

        logger.info(f"Found {len(files)} files matching '{name_filter}' in {self._base_path}")
        return files

    async def fetch_file(self, filename: str) -> bytes:
        """
        Read a file from the base directory.

        Raises:
            InputFileError: If the file does not exist
        """
        path = self._base_path / filename

        if not path.is_file():
            raise InputFileError(filename, "file not found")

        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            raise InputFileError(filename, str(e)) from e

    async def read_json(self, filename: str) -> list:
        """Read a file holding a JSON array."""
        content = await self.fetch_file(filename)

        try:
            data = json.loads(content.decode(self.encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InputFileError(filename, f"malformed JSON: {e}") from e

        if not isinstance(data, list):
            raise InputFileError(filename, f"expected a JSON array, got {type(data).__name__}")

        return data

    async def read_records(self, filename: str, model: Type[M]) -> List[M]:
        """Read a JSON array and validate each element against model."""
        data = await self.read_json(filename)

        try:
            return TypeAdapter(List[model]).validate_python(data)
        except ValidationError as e:
            raise InputFileError(filename, f"invalid records: {e}") from e

    async def fetch_all(
        self, name_filter: str, model: Type[M]
    ) -> AsyncIterator[Tuple[str, List[M]]]:
        """
        Read every shard matching the filter, one at a time.

        Yields:
            Tuples of (filename, records)
        """
        for filename in await self.list_files(name_filter):
            records = await self.read_records(filename, model)
            yield filename, records
