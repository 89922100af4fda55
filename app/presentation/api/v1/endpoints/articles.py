"""Article CRUD endpoints, plus the nested comment collection of an article."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ArticleCommentPage,
    ArticleCommentResponse,
    ArticleCreate,
    ArticlePage,
    ArticleResponse,
    ArticleUpdate,
)
from app.application.services import ArticleService
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError, ValidationError
from app.infrastructure.dependencies import get_article_service, get_current_actor

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=ArticlePage)
async def list_articles(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=500),
    service: ArticleService = Depends(get_article_service),
) -> ArticlePage:
    """Retrieve a paginated list of articles."""
    articles, total = await service.list_articles(skip=skip, limit=limit)
    return ArticlePage(
        items=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}/article-comments", response_model=ArticleCommentPage)
async def list_article_comments(
    article_id: int,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=500),
    service: ArticleService = Depends(get_article_service),
) -> ArticleCommentPage:
    """Retrieve the comments of one article, oldest first."""
    try:
        comments, total = await service.list_comments(article_id, skip=skip, limit=limit)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleCommentPage(
        items=[ArticleCommentResponse.model_validate(c, from_attributes=True) for c in comments],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
    actor: str = Depends(get_current_actor),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.create_article(data, actor)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
    actor: str = Depends(get_current_actor),
) -> ArticleResponse:
    """Update an existing article."""
    try:
        article = await service.update_article(article_id, data, actor)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article and every comment attached to it."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
