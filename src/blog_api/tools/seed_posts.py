#!/usr/bin/env python3
"""
Seed tool for filling a blog database with synthetic posts
"""

import sys
import argparse
import asyncio
import logging
from typing import Any, Dict, List, Optional

from faker import Faker

from blog_api.database.connection import init_database, close_database, drop_database
from blog_api.services.posts_service import get_posts_service

logger = logging.getLogger(__name__)

DEFAULT_SEED_COUNT = 11


class PostSeeder:
    """Generates fake blog posts and inserts them through the posts service"""

    def __init__(self, faker: Optional[Faker] = None):
        self.fake = faker or Faker()

    def generate_post(self, **overrides) -> Dict[str, Any]:
        """Generate one post document"""
        data = {
            "author": {
                "firstName": self.fake.first_name(),
                "lastName": self.fake.last_name()
            },
            "title": self.fake.sentence(nb_words=4).rstrip("."),
            "content": " ".join(self.fake.sentences()),
            "created": self.fake.past_datetime()
        }
        data.update(overrides)
        return data

    def generate_posts(self, count: int = DEFAULT_SEED_COUNT) -> List[Dict[str, Any]]:
        return [self.generate_post() for _ in range(count)]

    async def seed(self, count: int = DEFAULT_SEED_COUNT) -> List[Dict[str, Any]]:
        """Insert ``count`` generated posts and return the stored documents"""
        logger.info("seeding blog data")
        result = await get_posts_service().insert_many(self.generate_posts(count))
        if not result.success:
            raise RuntimeError(f"Seeding failed: {result.error}")
        return result.data


async def run(count: int, database_url: Optional[str], drop: bool) -> int:
    await init_database(database_url)
    try:
        if drop:
            await drop_database()
        posts = await PostSeeder().seed(count)
        return len(posts)
    finally:
        await close_database()


def main():
    """Main CLI interface"""
    parser = argparse.ArgumentParser(description="Seed the blog database with fake posts")
    parser.add_argument("--count", type=int, default=DEFAULT_SEED_COUNT, help="Number of posts to create")
    parser.add_argument("--database-url", default=None, help="MongoDB connection string (defaults to settings)")
    parser.add_argument("--drop", action="store_true", help="Drop the database before seeding")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    if args.count < 0:
        parser.error("--count must not be negative")

    try:
        created = asyncio.run(run(args.count, args.database_url, args.drop))
        print(f"✅ Seeded {created} posts")
    except Exception as e:
        print(f"❌ Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
