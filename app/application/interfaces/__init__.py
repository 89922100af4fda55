from .article_repository import ArticleRepository
from .article_comment_repository import ArticleCommentRepository
from .auditor_provider import AuditorProvider

__all__ = [
    "ArticleRepository",
    "ArticleCommentRepository",
    "AuditorProvider",
]
