"""
Database connection settings.

Read from DATABASE_URL when present, otherwise from the individual
PARTO_DB_* variables.
"""

import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 5432


def _parse_database_url() -> Optional[dict]:
    """Parse DATABASE_URL into individual components."""
    url = os.getenv("DATABASE_URL")
    if not url:
        return None

    parsed = urlparse(url)
    return {
        "endpoint": f"{parsed.hostname}:{parsed.port or DEFAULT_PORT}",
        "database": parsed.path.lstrip("/"),
        "username": parsed.username,
        "password": parsed.password or "",
    }


class DatabaseConfig(BaseModel):
    """Connection settings for the document store."""

    endpoint: str = Field(default=f"localhost:{DEFAULT_PORT}", description="host[:port]")
    database: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    password: SecretStr = SecretStr("")

    @field_validator("endpoint")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        value = value.strip()
        if "://" in value:
            value = value.split("://", 1)[1]
        value = value.rstrip("/")
        host, _, port = value.partition(":")
        if not host:
            raise ValueError("endpoint must contain a host")
        if port and not port.isdigit():
            raise ValueError(f"endpoint port must be numeric, got '{port}'")
        return value

    @property
    def host(self) -> str:
        return self.endpoint.partition(":")[0]

    @property
    def port(self) -> int:
        port = self.endpoint.partition(":")[2]
        return int(port) if port else DEFAULT_PORT

    @classmethod
    def from_env(cls, **overrides) -> "DatabaseConfig":
        """Build settings from the environment; keyword overrides win."""
        values = _parse_database_url() or {
            "endpoint": os.getenv("PARTO_DB_ENDPOINT", f"localhost:{DEFAULT_PORT}"),
            "database": os.getenv("PARTO_DB_NAME", ""),
            "username": os.getenv("PARTO_DB_USER", ""),
            "password": os.getenv("PARTO_DB_PASSWORD", ""),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
