"""Concrete repository implementation for ArticleComment backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleCommentRepository
from app.domain.entities import ArticleComment
from app.domain.entities.auditable import require_actor
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError
from app.infrastructure.database.models import ArticleCommentModel, ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleCommentRepository(ArticleCommentRepository):
    """Implements the ArticleCommentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleCommentModel) -> ArticleComment:
        """Map ORM model → domain entity."""
        return ArticleComment(
            id=model.id,
            article_id=model.article_id,
            content=model.content,
            created_at=model.created_at,
            created_by=model.created_by,
            modified_at=model.modified_at,
            modified_by=model.modified_by,
        )

    def _sync_entity(self, entity: ArticleComment, model: ArticleCommentModel) -> ArticleComment:
        """Copy the persisted state back onto the caller's instance."""
        entity.id = model.id
        entity.article_id = model.article_id
        entity.content = model.content
        entity.created_at = model.created_at
        entity.created_by = model.created_by
        entity.modified_at = model.modified_at
        entity.modified_by = model.modified_by
        entity.mark_clean()
        return entity

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConstraintViolationError("ArticleComment", str(e.orig)) from e

    async def _require_article(self, article_id: int) -> None:
        if await self._session.get(ArticleModel, article_id) is None:
            raise ConstraintViolationError(
                "ArticleComment", f"article with id '{article_id}' does not exist"
            )

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[ArticleComment]:
        await self._flush()
        stmt = select(ArticleCommentModel).order_by(ArticleCommentModel.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_id(self, comment_id: int) -> ArticleComment | None:
        result = await self._session.get(ArticleCommentModel, comment_id)
        return self._to_entity(result) if result else None

    async def find_by_article_id(
        self, article_id: int, skip: int = 0, limit: int | None = None
    ) -> list[ArticleComment]:
        await self._flush()
        stmt = (
            select(ArticleCommentModel)
            .where(ArticleCommentModel.article_id == article_id)
            .order_by(ArticleCommentModel.id)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def save(self, comment: ArticleComment, actor: str) -> ArticleComment:
        actor = require_actor(actor)
        now = datetime.now(timezone.utc)

        if comment.id is None:
            await self._require_article(comment.article_id)
            model = ArticleCommentModel(
                article_id=comment.article_id,
                content=comment.content,
                created_at=now,
                created_by=actor,
                modified_at=now,
                modified_by=actor,
            )
            self._session.add(model)
            await self._flush()
            logger.debug(
                "Inserted comment %d on article %d (created_by=%s)",
                model.id, model.article_id, actor,
            )
            return self._sync_entity(comment, model)

        model = await self._session.get(ArticleCommentModel, comment.id)
        if model is None:
            raise EntityNotFoundError("ArticleComment", comment.id)
        if comment.is_dirty:
            if comment.article_id != model.article_id:
                await self._require_article(comment.article_id)
            model.article_id = comment.article_id
            model.content = comment.content
            model.modified_at = now
            model.modified_by = actor
            await self._flush()
            logger.debug("Updated comment %d (modified_by=%s)", model.id, actor)
        return self._sync_entity(comment, model)

    async def delete(self, comment: ArticleComment) -> None:
        model = await self._session.get(ArticleCommentModel, comment.id) if comment.id is not None else None
        if model is None:
            raise EntityNotFoundError(
                "ArticleComment", comment.id if comment.id is not None else "<unsaved>"
            )
        await self._session.delete(model)
        await self._flush()

    async def count(self) -> int:
        await self._flush()
        result = await self._session.execute(select(func.count()).select_from(ArticleCommentModel))
        return result.scalar_one()

    async def count_by_article_id(self, article_id: int) -> int:
        await self._flush()
        result = await self._session.execute(
            select(func.count())
            .select_from(ArticleCommentModel)
            .where(ArticleCommentModel.article_id == article_id)
        )
        return result.scalar_one()
