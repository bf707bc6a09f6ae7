#!/usr/bin/env python3
"""
Parto Static Data Import Workflow - Load the hotel content dump.

Reads the static JSON files published by Parto (countries, cities, hotels,
facilities, chains) and loads them into the document store, rebuilding the
HotelLookup search collection.

Data source: https://cdn.partocrs.com/ApiDocument/StaticData/HotelStaticData.zip

Usage:
    # Full import from the directory in PARTO_STATIC_PATH
    uv run python -m workflows.import_parto

    # Explicit input directory
    uv run python -m workflows.import_parto --path /data/parto

    # Reload cities and hotels (either stage pulls in the other)
    uv run python -m workflows.import_parto --stage hotels

    # UUID lookup keys and an archived run log
    uv run python -m workflows.import_parto --uuid-keys --log-dir logs/
"""

import argparse
import asyncio
import sys
import os

import asyncpg
from loguru import logger

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.importer import (
    ConfigurationError,
    ImporterConfig,
    ImporterError,
    LocalSource,
    Service,
    capture_import_logs,
    list_stages,
    make_key_generator,
)
from db.client import init_db, close_db


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import the Parto hotel static data into the database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Full import
    uv run python -m workflows.import_parto --path /data/parto

    # Reload countries, then cities and hotels
    uv run python -m workflows.import_parto --stage countries --stage cities

Stages: """ + ", ".join(list_stages())
    )

    parser.add_argument(
        "-p", "--path",
        help="Directory of the static JSON files (default: PARTO_STATIC_PATH)",
    )
    parser.add_argument(
        "-s", "--stage",
        action="append",
        choices=list_stages(),
        help="Run only this stage (can be specified multiple times; cities and hotels always run together)",
    )
    parser.add_argument(
        "--uuid-keys",
        action="store_true",
        help="Use UUIDs instead of sequential numbers for HotelLookup keys",
    )
    parser.add_argument(
        "--log-dir",
        help="Write a compressed copy of the run log here (default: PARTO_IMPORT_LOG_DIR)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output",
    )
    return parser


async def run_import(config: ImporterConfig, stages=None) -> dict:
    """Run the import against an initialized database and return stats per stage."""
    config.check_paths()

    await init_db(config.database)
    try:
        service = Service(
            LocalSource(config.input_base_path),
            make_key_generator(config.lookup_keys),
        )
        return await service.run(stages)
    finally:
        await close_db()


async def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if args.verbose else "INFO",
        format="<level>{level: <8}</level> | {message}",
    )

    try:
        config = ImporterConfig.from_env(
            input_base_path=args.path,
            lookup_keys="uuid" if args.uuid_keys else None,
            log_dir=args.log_dir,
        )
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        logger.error("Check the PARTO_* settings in your environment or .env file")
        return 1

    try:
        with capture_import_logs("parto_import", local_backup_dir=config.log_dir):
            results = await run_import(config, args.stage)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except ImporterError as e:
        logger.error(f"Data error, import aborted: {e}")
        return 1
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
        logger.error(f"Storage error, import aborted: {e}")
        return 1

    # Output summary
    logger.info("")
    logger.info("=" * 60)
    logger.info("Import Complete")
    logger.info("=" * 60)
    for stage, stats in results.items():
        logger.info(
            f"{stage}: {stats.records_saved:,} saved, {stats.lookups_saved:,} lookups, "
            f"{stats.files_processed} files"
        )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
