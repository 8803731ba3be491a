"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, backend.configs
System role: Database schema initialization

Usage:
    python -m backend.boundary.db.create_tables
    python -m backend.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from backend.boundary.db.connection import Database
from backend.configs import get_settings
from backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(database: Database) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    await database.create_all()
    logger.info("All tables created successfully")


async def drop_all_tables(database: Database) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    await database.drop_all()
    logger.info("All tables dropped successfully")


async def main(drop: bool = False) -> None:
    settings = get_settings()
    database = Database.from_settings(settings.database)
    try:
        if drop:
            await drop_all_tables(database)
        await create_all_tables(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create course platform tables")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(main(drop=args.drop))
