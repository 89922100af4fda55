"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    content: str = Field(..., min_length=1, max_length=10000, examples=["First post on the board."])
    hashtag: str | None = Field(None, max_length=255, examples=["#intro"])


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1, max_length=10000)
    hashtag: str | None = Field(None, max_length=255)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    hashtag: str | None
    created_at: datetime
    created_by: str
    modified_at: datetime
    modified_by: str

    model_config = {"from_attributes": True}


class ArticlePage(BaseModel):
    """One page of articles plus the total row count."""

    items: list[ArticleResponse]
    total: int
    skip: int
    limit: int
