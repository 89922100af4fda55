"""Pydantic DTOs for the ArticleComment feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCommentCreate(BaseModel):
    """Schema for creating a comment on an existing article."""

    article_id: int = Field(..., ge=1, examples=[1])
    content: str = Field(..., min_length=1, max_length=500, examples=["Nice write-up!"])


class ArticleCommentUpdate(BaseModel):
    """Schema for updating a comment — all fields optional."""

    article_id: int | None = Field(None, ge=1)
    content: str | None = Field(None, min_length=1, max_length=500)


class ArticleCommentResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    article_id: int
    content: str
    created_at: datetime
    created_by: str
    modified_at: datetime
    modified_by: str

    model_config = {"from_attributes": True}


class ArticleCommentPage(BaseModel):
    """One page of comments plus the total row count."""

    items: list[ArticleCommentResponse]
    total: int
    skip: int
    limit: int
