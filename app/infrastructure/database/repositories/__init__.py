from .article_repository import SQLAlchemyArticleRepository
from .article_comment_repository import SQLAlchemyArticleCommentRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyArticleCommentRepository",
]
