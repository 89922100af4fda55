"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities.auditable import AuditedEntity, optional_text, require_text

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 10_000
HASHTAG_MAX_LENGTH = 255


@dataclass(eq=False)
class Article(AuditedEntity):
    """Core domain entity representing a board article.

    ``id`` and the four audit fields are assigned by the repository on save;
    callers never set them. Comments are looked up through the comment
    repository by ``article_id`` rather than held here.
    """

    title: str
    content: str
    hashtag: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    created_by: str | None = None
    modified_at: datetime | None = None
    modified_by: str | None = None
    _dirty: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        require_text("Article", "title", self.title, TITLE_MAX_LENGTH)
        require_text("Article", "content", self.content, CONTENT_MAX_LENGTH)
        optional_text("Article", "hashtag", self.hashtag, HASHTAG_MAX_LENGTH)

    @classmethod
    def create(cls, title: str, content: str, hashtag: str | None = None) -> "Article":
        """Build a new, not-yet-persisted article. Raises ValidationError."""
        return cls(title=title, content=content, hashtag=hashtag)

    def set_title(self, title: str) -> None:
        self.title = require_text("Article", "title", title, TITLE_MAX_LENGTH)
        self._dirty = True

    def set_content(self, content: str) -> None:
        self.content = require_text("Article", "content", content, CONTENT_MAX_LENGTH)
        self._dirty = True

    def set_hashtag(self, hashtag: str | None) -> None:
        self.hashtag = optional_text("Article", "hashtag", hashtag, HASHTAG_MAX_LENGTH)
        self._dirty = True
