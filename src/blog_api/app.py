"""
Blog Posts API Server
Core functionality: list, read, create, update and delete blog posts
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.config.settings import ALLOWED_ORIGINS
from blog_api.database.connection import init_database, close_database
from blog_api.api.routes import health, posts
from blog_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    yield
    await close_database()

def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title="Blog Posts API",
        description="CRUD API for blog posts backed by MongoDB",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials="*" not in ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(posts.router, prefix="/posts", tags=["Posts"])

    return app

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
