"""
Blog posts service - data access for blog post documents
"""

import logging
from typing import Dict, Any, List, Optional

from blog_api.config.settings import POSTS_COLLECTION
from blog_api.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content")

class BlogPostsService(BaseService):
    """Service for blog post operations"""

    def __init__(self):
        super().__init__(POSTS_COLLECTION)

    async def find_all(self) -> ServiceResult:
        """Get every post, newest first"""
        return await self.read(order_by=[{"field": "created", "dir": "desc"}])

    async def find_by_id(self, post_id: str) -> ServiceResult:
        return await self.get_by_id(post_id)

    async def insert(self, post_data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a new post

        Args:
            post_data: Document with author, title, content and optional created

        Returns:
            ServiceResult with the stored post
        """
        logger.info(f"Creating new post: {post_data.get('title', '')[:100]}")
        return await self.create(post_data)

    async def insert_many(self, posts: List[Dict[str, Any]]) -> ServiceResult:
        logger.info(f"Seeding {len(posts)} posts")
        return await self.create_many(posts)

    async def update_by_id(self, post_id: str, fields: Dict[str, Any]) -> ServiceResult:
        """
        Apply title/content changes to an existing post

        Fields other than title and content are dropped before the update.
        """
        update_data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        if not update_data:
            return ServiceResult(
                success=False,
                error="No updatable fields provided",
                error_type="INVALID_QUERY"
            )

        logger.info(f"Updating post {post_id} fields: {sorted(update_data)}")
        return await self.update(post_id, update_data)

    async def delete_by_id(self, post_id: str) -> ServiceResult:
        logger.info(f"Deleting post {post_id}")
        return await self.delete(post_id)

# Global service instance
_posts_service: Optional[BlogPostsService] = None

def get_posts_service() -> BlogPostsService:
    """Get the global blog posts service instance"""
    global _posts_service
    if _posts_service is None:
        _posts_service = BlogPostsService()
    return _posts_service
