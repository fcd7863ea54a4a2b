"""
Blog post Pydantic models
"""

from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

class AuthorName(BaseModel):
    """Author name pair, stored and exchanged as firstName/lastName"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", description="Author first name")
    last_name: str = Field(..., alias="lastName", description="Author last name")

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('author name cannot be empty')
        return v.strip()

    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class BlogPostCreateRequest(BaseModel):
    """Request model for creating a blog post"""
    author: AuthorName
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    created: Optional[datetime] = Field(None, description="Creation time, defaults to insertion time")

    @field_validator('title', 'content')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v or not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty')
        return v

    def to_document(self) -> Dict[str, Any]:
        """Build the document to insert into the store"""
        document = {
            "author": self.author.model_dump(by_alias=True),
            "title": self.title,
            "content": self.content,
        }
        if self.created is not None:
            document["created"] = self.created
        return document


class BlogPostUpdateRequest(BaseModel):
    """Request model for updating a blog post; only title and content are updatable"""
    id: Optional[str] = Field(None, description="Must match the id in the path when supplied")
    title: Optional[str] = None
    content: Optional[str] = None

    @field_validator('title', 'content')
    @classmethod
    def validate_not_blank(cls, v, info):
        if v is not None and not v.strip():
            raise ValueError(f'{info.field_name} cannot be empty')
        return v

    def update_fields(self) -> Dict[str, Any]:
        """Fields present in the request, ready for a $set"""
        update_data = {}
        if self.title is not None:
            update_data["title"] = self.title
        if self.content is not None:
            update_data["content"] = self.content
        return update_data


class BlogPostResponse(BaseModel):
    id: str
    author: str
    title: str
    content: str
    created: Optional[datetime] = None


def serialize_post(document: Dict[str, Any]) -> BlogPostResponse:
    """
    Convert a stored post document into its API representation

    Raises pydantic.ValidationError when the document lacks author, title or content.
    """
    author = AuthorName.model_validate(document.get("author"))
    return BlogPostResponse(
        id=str(document["_id"]),
        author=author.display_name(),
        title=document.get("title"),
        content=document.get("content"),
        created=document.get("created")
    )
