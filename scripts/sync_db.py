#!/usr/bin/env python
"""Create the inventory tables from the ORM models.

This script:
1. Connects with the configured database settings (DB_* / .env)
2. Creates every missing table, or drops and recreates all with --force
3. Prints the row count of each table

Usage:
    # Create missing tables
    python scripts/sync_db.py

    # Drop everything and start from an empty schema
    python scripts/sync_db.py --force
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from inventory_api.infra.database import close_db_engine, create_tables, get_db_session
from inventory_api.infra.logging import get_logger, setup_logging
from inventory_api.models import Category, Product, ProductTag, Tag

setup_logging()
logger = get_logger(__name__)


async def table_counts() -> dict[str, int]:
    """Count rows in each inventory table."""
    counts: dict[str, int] = {}
    async with get_db_session() as session:
        for model in (Category, Product, Tag, ProductTag):
            count = await session.scalar(select(func.count()).select_from(model))
            counts[model.__tablename__] = count or 0
    return counts


async def main() -> int:
    parser = argparse.ArgumentParser(description="Sync the inventory database schema")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Drop all tables before recreating them (destroys data)",
    )
    args = parser.parse_args()

    try:
        await create_tables(drop_existing=args.force)
        counts = await table_counts()
    except Exception as e:
        logger.error("Database sync failed", error=str(e))
        return 1
    finally:
        await close_db_engine()

    print("\nDatabase synced:")
    for table, count in counts.items():
        print(f"  {table:<12} {count} rows")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
