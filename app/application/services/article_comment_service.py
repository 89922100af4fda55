"""Application service (use case) for ArticleComment operations."""

import logging

from app.application.interfaces import ArticleCommentRepository, ArticleRepository
from app.application.schemas import ArticleCommentCreate, ArticleCommentUpdate
from app.domain.entities import Article, ArticleComment
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleCommentService:
    """Orchestrates comment use cases. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleCommentRepository,
        article_repository: ArticleRepository,
    ):
        self._repository = repository
        self._article_repository = article_repository

    async def _require_article(self, article_id: int) -> Article:
        article = await self._article_repository.find_by_id(article_id)
        if article is None:
            raise ConstraintViolationError(
                "ArticleComment", f"article with id '{article_id}' does not exist"
            )
        return article

    async def get_comment(self, comment_id: int) -> ArticleComment:
        comment = await self._repository.find_by_id(comment_id)
        if comment is None:
            raise EntityNotFoundError("ArticleComment", comment_id)
        return comment

    async def list_comments(
        self, skip: int = 0, limit: int = 100
    ) -> tuple[list[ArticleComment], int]:
        comments = await self._repository.find_all(skip=skip, limit=limit)
        return comments, await self._repository.count()

    async def create_comment(self, data: ArticleCommentCreate, actor: str) -> ArticleComment:
        article = await self._require_article(data.article_id)
        comment = ArticleComment.create(article=article, content=data.content)
        saved = await self._repository.save(comment, actor)
        logger.info("Comment %d on article %d created by %s", saved.id, saved.article_id, actor)
        return saved

    async def update_comment(
        self, comment_id: int, data: ArticleCommentUpdate, actor: str
    ) -> ArticleComment:
        comment = await self.get_comment(comment_id)
        if data.article_id is not None and data.article_id != comment.article_id:
            comment.set_article(await self._require_article(data.article_id))
        if data.content is not None:
            comment.set_content(data.content)
        saved = await self._repository.save(comment, actor)
        logger.info("Comment %d updated by %s", saved.id, actor)
        return saved

    async def delete_comment(self, comment_id: int) -> None:
        comment = await self.get_comment(comment_id)
        await self._repository.delete(comment)
        logger.info("Comment %d deleted", comment_id)
