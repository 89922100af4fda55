from .article import Article
from .article_comment import ArticleComment
from .auditable import AuditedEntity

__all__ = [
    "Article",
    "ArticleComment",
    "AuditedEntity",
]
