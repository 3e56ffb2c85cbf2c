"""Post schema definitions."""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

import pytz
from pydantic import Field, field_validator

from mvc_portfolio.schemas.common import CamelModel, ensure_utc


class Post(CamelModel):
    """structure of blog post"""

    id: str = Field(
        description="The unique identifier for the post.",
        default_factory=lambda: str(uuid.uuid4()),
    )
    title: str
    content: str
    author_id: str = Field(description="ID of the author; not checked against users.")
    published: bool = False
    tags: List[str] = Field(default_factory=list, description="Ordered list of tags.")
    created_at: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))

    # SQLite hands timestamps back without tzinfo
    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    def excerpt(self, length: int = 160) -> str:
        """First ``length`` characters of the content, cut at a word."""
        text = " ".join(self.content.split())
        if len(text) <= length:
            return text
        return text[:length].rsplit(" ", 1)[0] + "..."

    def paragraphs(self) -> List[str]:
        """Content split on blank lines, empty paragraphs dropped."""
        chunks = self.content.replace("\r\n", "\n").split("\n\n")
        return [chunk.strip() for chunk in chunks if chunk.strip()]


class CreatePostRequest(CamelModel):
    """Body of POST /api/posts."""

    title: Optional[str] = None
    content: Optional[str] = None
    published: bool = False
    tags: List[str] = Field(default_factory=list)
    author_id: Optional[str] = None


class UpdatePostRequest(CamelModel):
    """Body of PUT /api/posts/{id}; only supplied fields are changed."""

    title: Optional[str] = None
    content: Optional[str] = None
    published: Optional[bool] = None
    tags: Optional[List[str]] = None
    author_id: Optional[str] = None


class PostStatistics(CamelModel):
    total: int
    published: int
    unpublished: int
    by_tag: Dict[str, int]
