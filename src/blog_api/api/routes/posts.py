"""
Blog posts API routes
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Response
from pydantic import ValidationError

from blog_api.models.post import (
    BlogPostCreateRequest,
    BlogPostUpdateRequest,
    BlogPostResponse,
    serialize_post
)
from blog_api.services.base_service import ServiceResult
from blog_api.services.posts_service import get_posts_service

router = APIRouter()
logger = logging.getLogger(__name__)

def raise_for_result(result: ServiceResult, not_found_detail: str = "Post not found"):
    """Translate a failed service result into an HTTP error"""
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=not_found_detail)
    elif result.error_type == "INVALID_QUERY":
        raise HTTPException(status_code=400, detail=result.error)
    else:
        raise HTTPException(status_code=500, detail=result.error)

@router.get("", response_model=List[BlogPostResponse])
async def list_posts():
    """List all blog posts"""
    posts_service = get_posts_service()

    result = await posts_service.find_all()
    raise_for_result(result)

    posts = []
    for post in result.data:
        try:
            posts.append(serialize_post(post))
        except ValidationError as e:
            # Stored documents missing author, title or content are left out of the listing
            logger.warning(f"Skipping malformed post {post.get('_id')}: {e.error_count()} invalid fields")
    return posts

@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_post(post_id: str):
    """Get a blog post by ID"""
    posts_service = get_posts_service()

    result = await posts_service.find_by_id(post_id)
    raise_for_result(result)

    return serialize_post(result.data[0])

@router.post("", response_model=BlogPostResponse, status_code=201)
async def create_post(request: BlogPostCreateRequest):
    """Create a new blog post"""
    posts_service = get_posts_service()

    result = await posts_service.insert(request.to_document())
    raise_for_result(result)

    post = result.data[0]
    logger.info(f"Created post {post['_id']}")
    return serialize_post(post)

@router.put("/{post_id}", response_model=BlogPostResponse, status_code=201)
async def update_post(post_id: str, request: BlogPostUpdateRequest):
    """Update the title and/or content of a blog post"""
    if request.id is not None and request.id != post_id:
        raise HTTPException(
            status_code=400,
            detail=f"Request path id ({post_id}) and request body id ({request.id}) must match"
        )

    update_data = request.update_fields()
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields provided for update")

    posts_service = get_posts_service()

    result = await posts_service.update_by_id(post_id, update_data)
    raise_for_result(result)

    return serialize_post(result.data[0])

@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: str):
    """Delete a blog post"""
    posts_service = get_posts_service()

    result = await posts_service.delete_by_id(post_id)
    raise_for_result(result)

    logger.info(f"Deleted post {post_id}")
    return Response(status_code=204)
