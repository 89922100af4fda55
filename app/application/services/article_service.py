"""Application service (use case) for Article operations."""

import logging

from app.application.interfaces import ArticleCommentRepository, ArticleRepository
from app.application.schemas import ArticleCreate, ArticleUpdate
from app.domain.entities import Article, ArticleComment
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article use cases. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        comment_repository: ArticleCommentRepository,
    ):
        self._repository = repository
        self._comment_repository = comment_repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.find_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, skip: int = 0, limit: int = 100) -> tuple[list[Article], int]:
        articles = await self._repository.find_all(skip=skip, limit=limit)
        return articles, await self._repository.count()

    async def create_article(self, data: ArticleCreate, actor: str) -> Article:
        article = Article.create(title=data.title, content=data.content, hashtag=data.hashtag)
        saved = await self._repository.save(article, actor)
        logger.info("Article %d created by %s", saved.id, actor)
        return saved

    async def update_article(self, article_id: int, data: ArticleUpdate, actor: str) -> Article:
        article = await self.get_article(article_id)
        if data.title is not None:
            article.set_title(data.title)
        if data.content is not None:
            article.set_content(data.content)
        if "hashtag" in data.model_fields_set:
            article.set_hashtag(data.hashtag)
        saved = await self._repository.save(article, actor)
        logger.info("Article %d updated by %s", saved.id, actor)
        return saved

    async def delete_article(self, article_id: int) -> int:
        """Delete an article and its comments; returns how many comments went with it."""
        article = await self.get_article(article_id)
        comment_count = await self._comment_repository.count_by_article_id(article_id)
        await self._repository.delete(article)
        logger.info("Article %d deleted with %d comment(s)", article_id, comment_count)
        return comment_count

    async def list_comments(
        self, article_id: int, skip: int = 0, limit: int = 100
    ) -> tuple[list[ArticleComment], int]:
        await self.get_article(article_id)
        comments = await self._comment_repository.find_by_article_id(
            article_id, skip=skip, limit=limit
        )
        return comments, await self._comment_repository.count_by_article_id(article_id)
