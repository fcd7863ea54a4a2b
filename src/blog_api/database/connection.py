"""
Database connection and client management
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.uri_parser import parse_uri

from blog_api.config.settings import DATABASE_TIMEOUT_MS, POSTS_COLLECTION, get_database_url

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "blog-app"

# Global client and database handle
db_client = None
db = None
db_name = None

def database_name_from_url(database_url: str) -> str:
    """Extract the database name from a MongoDB connection string"""
    return parse_uri(database_url)["database"] or DEFAULT_DATABASE_NAME

async def init_database(database_url: Optional[str] = None, client=None):
    """
    Initialize the database client

    An injected client (e.g. an in-memory mock) is adopted as-is; otherwise a
    motor client is opened for ``database_url`` and the server is pinged.
    """
    global db_client, db, db_name
    database_url = database_url or get_database_url()

    if client is None:
        db_client = AsyncIOMotorClient(
            database_url,
            serverSelectionTimeoutMS=DATABASE_TIMEOUT_MS,
            tz_aware=True
        )
        # Test connection
        await db_client.admin.command("ping")
    else:
        db_client = client

    db_name = database_name_from_url(database_url)
    db = db_client[db_name]
    logger.info(f"Database initialized successfully: {db_name}")


async def close_database():
    """Close database client"""
    global db_client, db, db_name
    if db_client is not None:
        db_client.close()
    db_client = None
    db = None
    db_name = None
    logger.info("Database connections closed")

async def drop_database():
    """Drop the whole database (test teardown only)"""
    if db is None:
        raise RuntimeError("Database not initialized")
    logger.warning(f"Deleting database {db_name}")
    await db_client.drop_database(db_name)

def get_database():
    """Get the database instance"""
    return db

def get_collection(name: str = POSTS_COLLECTION):
    """Get a collection from the active database"""
    if db is None:
        raise RuntimeError("Database not initialized")
    return db[name]
