from .article import (
    ArticleFormData,
    ArticleFormView,
    ArticleListView,
    ArticleResponse,
    CategoryResponse,
    DeleteConfirmationView,
    NotificationResponse,
)

__all__ = [
    "ArticleFormData",
    "ArticleFormView",
    "ArticleListView",
    "ArticleResponse",
    "CategoryResponse",
    "DeleteConfirmationView",
    "NotificationResponse",
]
