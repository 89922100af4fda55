"""SQLAlchemy ORM model for the ArticleComment entity."""

from datetime import datetime

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base
from app.infrastructure.database.types import UTCDateTime


class ArticleCommentModel(Base):
    """ORM model — maps to the 'article_comments' table.

    Only the foreign key is mapped; there is no relationship() back to the
    article, so comments of an article are always fetched by query.
    """

    __tablename__ = "article_comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    modified_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    modified_by: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        Index("ix_article_comments_article_id", "article_id"),
        Index("ix_article_comments_content", "content"),
        Index("ix_article_comments_created_at", "created_at"),
        Index("ix_article_comments_created_by", "created_by"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<ArticleCommentModel(id={self.id}, article_id={self.article_id})>"
