from .article import ArticleCreate, ArticleUpdate, ArticleResponse, ArticlePage
from .article_comment import (
    ArticleCommentCreate,
    ArticleCommentUpdate,
    ArticleCommentResponse,
    ArticleCommentPage,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticlePage",
    "ArticleCommentCreate",
    "ArticleCommentUpdate",
    "ArticleCommentResponse",
    "ArticleCommentPage",
]
