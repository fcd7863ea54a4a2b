"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException
from blog_api.database.connection import get_database

router = APIRouter()

@router.get("/")
async def health_check():
    """Health check - pings the document store"""
    db = get_database()

    try:
        if db is None:
            raise RuntimeError("Database not initialized")
        await db.command("ping")

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected"
        }

    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")
