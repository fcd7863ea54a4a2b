"""
pytest configuration and fixtures for the blog posts test suite
Each test gets its own database: seeded before, dropped after.
"""

import pytest
import pytest_asyncio
from faker import Faker
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from blog_api.app import app
from blog_api.config.settings import TEST_DATABASE_URL
from blog_api.database import connection
from blog_api.tools.seed_posts import PostSeeder

SEED_COUNT = 11


@pytest.fixture
def seeder():
    """Post generator backed by a fresh Faker instance"""
    return PostSeeder(Faker())


@pytest_asyncio.fixture
async def database():
    """In-memory document store, torn down after each test"""
    await connection.init_database(TEST_DATABASE_URL, client=AsyncMongoMockClient())
    yield connection.get_database()
    await connection.drop_database()
    await connection.close_database()


@pytest_asyncio.fixture
async def seeded_posts(database, seeder):
    """Seed the store with synthetic posts"""
    return await seeder.seed(SEED_COUNT)


@pytest_asyncio.fixture
async def api_client(database):
    """HTTP client bound to the in-process application"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
