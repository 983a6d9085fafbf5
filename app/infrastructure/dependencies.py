"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import ArticleAdminService
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
)
from app.infrastructure.database.session import get_db_session
from app.infrastructure.messaging import SessionFlashBag
from app.infrastructure.security import SessionCsrfTokenManager


def get_flash_bag(request: Request) -> SessionFlashBag:
    """Flash queue stored in the caller's session."""
    return SessionFlashBag(request.session)


def get_csrf_token_manager(request: Request) -> SessionCsrfTokenManager:
    return SessionCsrfTokenManager(request.session)


async def get_article_admin_service(
    session: AsyncSession = Depends(get_db_session),
    flashes: SessionFlashBag = Depends(get_flash_bag),
    csrf: SessionCsrfTokenManager = Depends(get_csrf_token_manager),
) -> AsyncGenerator[ArticleAdminService, None]:
    """Provides an ArticleAdminService with repositories bound to one DB session."""
    yield ArticleAdminService(
        articles=SQLAlchemyArticleRepository(session),
        categories=SQLAlchemyCategoryRepository(session),
        flashes=flashes,
        csrf=csrf,
    )
