"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every call runs inside the caller's unit of work; mutating calls take the
    actor to stamp explicitly.
    """

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[Article]:
        """Return articles ordered by id, after flushing pending changes."""
        ...

    @abstractmethod
    async def find_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article, or None if no such id exists."""
        ...

    @abstractmethod
    async def save(self, article: Article, actor: str) -> Article:
        """Insert (id unset) or update (id set) and stamp audit fields from ``actor``.

        Only changes made through the ``set_*`` mutators are written. An entity
        with an id that no mutator marked dirty is not written; it is refreshed
        from the stored row, so fields assigned directly are overwritten.
        """
        ...

    @abstractmethod
    async def delete(self, article: Article) -> None:
        """Delete an article together with all of its comments.

        Raises EntityNotFoundError if the article does not exist.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored articles."""
        ...
