"""Abstract repository interface (port) for ArticleComment persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import ArticleComment


class ArticleCommentRepository(ABC):
    """Port for article comment persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[ArticleComment]:
        """Return comments ordered by id, after flushing pending changes."""
        ...

    @abstractmethod
    async def find_by_id(self, comment_id: int) -> ArticleComment | None:
        """Retrieve a single comment, or None if no such id exists."""
        ...

    @abstractmethod
    async def find_by_article_id(
        self, article_id: int, skip: int = 0, limit: int | None = None
    ) -> list[ArticleComment]:
        """Return the comments of one article ordered by id."""
        ...

    @abstractmethod
    async def save(self, comment: ArticleComment, actor: str) -> ArticleComment:
        """Insert or update a comment and stamp audit fields from ``actor``.

        Only mutator changes are written; a non-dirty entity with an id is
        refreshed from the stored row instead, discarding direct assignments.
        Raises ConstraintViolationError if ``article_id`` references no article.
        """
        ...

    @abstractmethod
    async def delete(self, comment: ArticleComment) -> None:
        """Delete a comment. Raises EntityNotFoundError if it does not exist."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored comments."""
        ...

    @abstractmethod
    async def count_by_article_id(self, article_id: int) -> int:
        """Number of comments attached to one article."""
        ...
