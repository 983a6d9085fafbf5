from .article_admin_service import (
    AdminOutcome,
    ArticleAdminService,
    ArticleFormPage,
    DeleteConfirmationPage,
    RedirectTo,
)

__all__ = [
    "AdminOutcome",
    "ArticleAdminService",
    "ArticleFormPage",
    "DeleteConfirmationPage",
    "RedirectTo",
]
