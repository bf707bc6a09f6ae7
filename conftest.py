"""Pytest configuration and shared fixtures."""

import os
import pytest

# Load env vars
from dotenv import load_dotenv
load_dotenv()


# =============================================================================
# SAFETY CHECK: Prevent tests from running against production database
# =============================================================================

ALLOWED_DB_HOSTS = {"localhost", "127.0.0.1", "host.docker.internal", "db", "postgres"}


def pytest_configure(config):
    """Register custom markers and check database safety."""
    config.addinivalue_line("markers", "no_db: mark test as not touching the database")
    config.addinivalue_line("markers", "integration: mark test as integration test (needs a database)")

    # Check database host
    endpoint = os.getenv("PARTO_DB_ENDPOINT", "localhost")
    db_host = endpoint.split("://")[-1].split(":")[0]

    if db_host not in ALLOWED_DB_HOSTS:
        pytest.exit(
            f"\n\n"
            f"{'=' * 60}\n"
            f"SAFETY CHECK FAILED: Cannot run tests against production DB!\n"
            f"{'=' * 60}\n"
            f"\n"
            f"Current PARTO_DB_ENDPOINT: {endpoint}\n"
            f"Allowed hosts: {', '.join(sorted(ALLOWED_DB_HOSTS))}\n"
            f"\n"
            f"To run tests, set PARTO_DB_ENDPOINT to 'localhost' in your .env\n"
            f"{'=' * 60}\n",
            returncode=1,
        )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
async def db_pool():
    """Initialize database connection pool for integration tests."""
    from db.client import init_db, close_db

    pool = await init_db()
    yield pool
    await close_db()


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON file into a temporary static data directory."""
    import json

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
