"""
Importer configuration models.
"""

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from db.config import DatabaseConfig
from services.importer.errors import ConfigurationError


class ImporterConfig(BaseModel):
    """
    Runtime configuration for one import run.

    Database settings come from db.config; the rest from PARTO_* variables.
    """

    database: DatabaseConfig

    # Directory holding Country.json, Property_*.json, etc.
    input_base_path: str = Field(..., min_length=1, description="Directory of the static JSON dump")

    # Lookup key scheme shared by the city and hotel stages
    lookup_keys: Literal["sequential", "uuid"] = Field(
        default="sequential", description="How HotelLookup keys are generated"
    )

    # Directory for compressed run logs (disabled when unset)
    log_dir: Optional[str] = None

    @property
    def base_path(self) -> Path:
        return Path(self.input_base_path)

    def check_paths(self) -> None:
        """Raise ConfigurationError if the input directory is unusable."""
        if not self.base_path.is_dir():
            raise ConfigurationError(
                f"Static files directory does not exist: {self.input_base_path}"
            )

    @classmethod
    def from_env(
        cls,
        input_base_path: Optional[str] = None,
        lookup_keys: Optional[str] = None,
        log_dir: Optional[str] = None,
    ) -> "ImporterConfig":
        """
        Build configuration from the environment (.env is loaded by db.config).

        Explicit arguments override environment values.

        Raises:
            ConfigurationError: If a required option is missing or invalid
        """
        try:
            return cls(
                database=DatabaseConfig.from_env(),
                input_base_path=input_base_path or os.getenv("PARTO_STATIC_PATH", ""),
                lookup_keys=lookup_keys or os.getenv("PARTO_LOOKUP_KEYS", "sequential"),
                log_dir=log_dir or os.getenv("PARTO_IMPORT_LOG_DIR") or None,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid importer configuration: {e}") from e
