"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.entities.auditable import require_actor
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError
from app.infrastructure.database.models import ArticleCommentModel, ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            hashtag=model.hashtag,
            created_at=model.created_at,
            created_by=model.created_by,
            modified_at=model.modified_at,
            modified_by=model.modified_by,
        )

    def _sync_entity(self, entity: Article, model: ArticleModel) -> Article:
        """Copy the persisted state back onto the caller's instance."""
        entity.id = model.id
        entity.title = model.title
        entity.content = model.content
        entity.hashtag = model.hashtag
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
            raise ConstraintViolationError("Article", str(e.orig)) from e

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[Article]:
        await self._flush()
        stmt = select(ArticleModel).order_by(ArticleModel.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def save(self, article: Article, actor: str) -> Article:
        actor = require_actor(actor)
        now = datetime.now(timezone.utc)

        if article.id is None:
            model = ArticleModel(
                title=article.title,
                content=article.content,
                hashtag=article.hashtag,
                created_at=now,
                created_by=actor,
                modified_at=now,
                modified_by=actor,
            )
            self._session.add(model)
            await self._flush()
            logger.debug("Inserted article %d (created_by=%s)", model.id, actor)
            return self._sync_entity(article, model)

        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        if article.is_dirty:
            model.title = article.title
            model.content = article.content
            model.hashtag = article.hashtag
            model.modified_at = now
            model.modified_by = actor
            await self._flush()
            logger.debug("Updated article %d (modified_by=%s)", model.id, actor)
        return self._sync_entity(article, model)

    async def delete(self, article: Article) -> None:
        model = await self._session.get(ArticleModel, article.id) if article.id is not None else None
        if model is None:
            raise EntityNotFoundError("Article", article.id if article.id is not None else "<unsaved>")

        # Comments go first, in the same transaction; any failure aborts the unit of work.
        result = await self._session.execute(
            delete(ArticleCommentModel).where(ArticleCommentModel.article_id == model.id)
        )
        await self._session.delete(model)
        await self._flush()
        logger.debug("Deleted article %d and %d comment(s)", article.id, result.rowcount)

    async def count(self) -> int:
        await self._flush()
        result = await self._session.execute(select(func.count()).select_from(ArticleModel))
        return result.scalar_one()
