"""Domain entity for comments attached to an article."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities.article import Article
from app.domain.entities.auditable import AuditedEntity, require_text
from app.domain.exceptions import ValidationError

CONTENT_MAX_LENGTH = 500


def _require_article_id(article: Article | None) -> int:
    if article is None:
        raise ValidationError("ArticleComment", "article", "must not be empty")
    if article.id is None:
        raise ValidationError("ArticleComment", "article", "must be saved before it can be commented on")
    return article.id


@dataclass(eq=False)
class ArticleComment(AuditedEntity):
    """A comment owned by exactly one article, referenced by ``article_id``."""

    article_id: int
    content: str
    id: int | None = None
    created_at: datetime | None = None
    created_by: str | None = None
    modified_at: datetime | None = None
    modified_by: str | None = None
    _dirty: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.article_id is None:
            raise ValidationError("ArticleComment", "article", "must not be empty")
        require_text("ArticleComment", "content", self.content, CONTENT_MAX_LENGTH)

    @classmethod
    def create(cls, article: Article | None, content: str) -> "ArticleComment":
        """Build a new comment on a persisted article. Raises ValidationError."""
        return cls(article_id=_require_article_id(article), content=content)

    def set_content(self, content: str) -> None:
        self.content = require_text("ArticleComment", "content", content, CONTENT_MAX_LENGTH)
        self._dirty = True

    def set_article(self, article: Article | None) -> None:
        self.article_id = _require_article_id(article)
        self._dirty = True
