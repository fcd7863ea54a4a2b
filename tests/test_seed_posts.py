"""
Seed tooling tests
"""

from datetime import datetime, timezone

import pytest
from mongomock_motor import AsyncMongoMockClient

from blog_api.database.connection import get_collection
from blog_api.models.post import BlogPostCreateRequest
from blog_api.tools import seed_posts


def test_generated_post_matches_create_schema(seeder):
    post = seeder.generate_post()

    request = BlogPostCreateRequest.model_validate(post)
    assert request.title == post["title"]
    assert post["created"] < datetime.now()


def test_generate_post_overrides(seeder):
    post = seeder.generate_post(title="Fixed title")

    assert post["title"] == "Fixed title"


@pytest.mark.asyncio
async def test_seed_inserts_posts(database, seeder):
    posts = await seeder.seed(11)

    assert len(posts) == 11
    assert await get_collection().count_documents({}) == 11
    stored = await get_collection().find_one({"_id": posts[0]["_id"]})
    assert stored["title"] == posts[0]["title"]
    assert posts[0]["created"].tzinfo == timezone.utc


@pytest.mark.asyncio
async def test_run_seeds_and_closes(monkeypatch):
    client = AsyncMongoMockClient()
    original_init = seed_posts.init_database

    async def init_with_mock(database_url=None):
        await original_init(database_url, client=client)

    monkeypatch.setattr(seed_posts, "init_database", init_with_mock)

    created = await seed_posts.run(3, "mongodb://localhost/seed-test", drop=True)

    assert created == 3
    assert await client["seed-test"]["blogposts"].count_documents({}) == 3
