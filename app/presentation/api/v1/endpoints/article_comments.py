"""ArticleComment CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ArticleCommentCreate,
    ArticleCommentPage,
    ArticleCommentResponse,
    ArticleCommentUpdate,
)
from app.application.services import ArticleCommentService
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError, ValidationError
from app.infrastructure.dependencies import get_article_comment_service, get_current_actor

router = APIRouter(prefix="/article-comments", tags=["Article Comments"])


@router.get("", response_model=ArticleCommentPage)
async def list_comments(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=500),
    service: ArticleCommentService = Depends(get_article_comment_service),
) -> ArticleCommentPage:
    """Retrieve a paginated list of comments across all articles."""
    comments, total = await service.list_comments(skip=skip, limit=limit)
    return ArticleCommentPage(
        items=[ArticleCommentResponse.model_validate(c, from_attributes=True) for c in comments],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/{comment_id}", response_model=ArticleCommentResponse)
async def get_comment(
    comment_id: int,
    service: ArticleCommentService = Depends(get_article_comment_service),
) -> ArticleCommentResponse:
    """Retrieve a single comment by ID."""
    try:
        comment = await service.get_comment(comment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleCommentResponse.model_validate(comment, from_attributes=True)


@router.post("", response_model=ArticleCommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    data: ArticleCommentCreate,
    service: ArticleCommentService = Depends(get_article_comment_service),
    actor: str = Depends(get_current_actor),
) -> ArticleCommentResponse:
    """Create a comment on an existing article."""
    try:
        comment = await service.create_comment(data, actor)
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ArticleCommentResponse.model_validate(comment, from_attributes=True)


@router.put("/{comment_id}", response_model=ArticleCommentResponse)
async def update_comment(
    comment_id: int,
    data: ArticleCommentUpdate,
    service: ArticleCommentService = Depends(get_article_comment_service),
    actor: str = Depends(get_current_actor),
) -> ArticleCommentResponse:
    """Update a comment's content or move it to another article."""
    try:
        comment = await service.update_comment(comment_id, data, actor)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ArticleCommentResponse.model_validate(comment, from_attributes=True)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    service: ArticleCommentService = Depends(get_article_comment_service),
) -> None:
    """Delete a comment by ID."""
    try:
        await service.delete_comment(comment_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
