from .article_service import ArticleService
from .article_comment_service import ArticleCommentService

__all__ = [
    "ArticleService",
    "ArticleCommentService",
]
