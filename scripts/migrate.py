#!/usr/bin/env python3
"""CLI script to create the database schema (fund, investor, investment).

Creates any missing tables from the SQLModel metadata. Existing tables are
left untouched. In production the script waits 5 seconds before writing so
the operator can cancel.

Usage:
    python scripts/migrate.py
    python scripts/migrate.py --dry-run
"""

import argparse
import logging
import sys
import time

from sqlmodel import SQLModel

# Add parent directory to path for imports
sys.path.insert(0, ".")

from private_markets.core.config import get_settings
from private_markets.core.logging import setup_logging
from private_markets.db import Database
import private_markets.models  # noqa: F401  (registers tables on the metadata)

from _console import print_header, print_info, print_success, print_warning, print_error

PRODUCTION_DELAY_SECONDS = 5


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Create the Private Markets database schema")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the tables that would be created without touching the database",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging("DEBUG" if args.verbose else settings.LOG_LEVEL)

    print_header("Running Migrations")
    print(f"  Environment: {settings.ENVIRONMENT}")

    database = Database.from_settings(settings)
    try:
        missing = database.missing_tables()
        if not missing:
            print_warning("All tables already exist - nothing to do")
            return 0

        print(f"  Tables to create: {', '.join(missing)}\n")
        if args.dry_run:
            print_info("DRY RUN MODE - No changes made")
            return 0

        if settings.ENVIRONMENT == "production":
            print_warning("Running migrations in PRODUCTION environment!")
            print_warning(f"Press Ctrl+C to cancel. Continuing in {PRODUCTION_DELAY_SECONDS} seconds...")
            time.sleep(PRODUCTION_DELAY_SECONDS)

        SQLModel.metadata.create_all(database.engine)
        print_success("Migrations completed successfully")
        return 0

    except KeyboardInterrupt:
        print_error("Cancelled")
        return 1
    except Exception as e:
        print_error(f"Migration failed: {e}")
        logging.exception("Fatal error during migration")
        return 1
    finally:
        database.close()


if __name__ == "__main__":
    sys.exit(main())
