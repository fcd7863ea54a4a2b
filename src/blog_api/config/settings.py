"""
Configuration settings for the Blog Posts API
"""

import os
import logging

logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or TEST
DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://localhost:27017/blog-app")
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "mongodb://localhost:27017/test-blog-app")
DATABASE_TIMEOUT_MS = int(os.getenv("DATABASE_TIMEOUT_MS", 5000))
PORT = int(os.getenv("PORT", 8080))

# Collection holding blog post documents
POSTS_COLLECTION = "blogposts"

def get_database_url() -> str:
    """Get the database URL for the current environment"""
    return TEST_DATABASE_URL if ENV == "TEST" else DATABASE_URL

if not DATABASE_URL.startswith(("mongodb://", "mongodb+srv://")):
    raise ValueError("DATABASE_URL must be a mongodb:// or mongodb+srv:// connection string")

logger.info(f"Environment: {ENV}")

# CORS settings
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]
