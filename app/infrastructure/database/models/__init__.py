from .article import ArticleModel
from .article_comment import ArticleCommentModel

__all__ = [
    "ArticleModel",
    "ArticleCommentModel",
]
