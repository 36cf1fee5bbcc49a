#!/usr/bin/env python3
"""
Initialize database schema for production.
Run this once after setting up PostgreSQL.
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from feedback_api.config import Settings, load_env_file_fallback
from feedback_api.database import Database


async def init_db(database_url: str) -> None:
    """Create all tables."""
    database = Database(database_url, echo=True)
    try:
        await database.create_all()
    finally:
        await database.dispose()
    print("Database schema initialized successfully!")


if __name__ == "__main__":
    load_env_file_fallback()
    asyncio.run(init_db(Settings.from_env().database_url))
