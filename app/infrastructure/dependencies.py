"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.interfaces import AuditorProvider
from app.application.services import ArticleCommentService, ArticleService
from app.infrastructure.auditing import StaticAuditorProvider
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleCommentRepository,
    SQLAlchemyArticleRepository,
)


def get_auditor_provider() -> AuditorProvider:
    """Provides the audit identity source configured in settings."""
    return StaticAuditorProvider(get_settings().auditor_name)


def get_current_actor(
    provider: AuditorProvider = Depends(get_auditor_provider),
) -> str:
    """Resolves the actor once per request; passed explicitly to every write."""
    return provider.current_auditor()


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with both repositories bound to the request session."""
    yield ArticleService(
        SQLAlchemyArticleRepository(session),
        SQLAlchemyArticleCommentRepository(session),
    )


async def get_article_comment_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleCommentService, None]:
    """Provides an ArticleCommentService with both repositories bound to the request session."""
    yield ArticleCommentService(
        SQLAlchemyArticleCommentRepository(session),
        SQLAlchemyArticleRepository(session),
    )
