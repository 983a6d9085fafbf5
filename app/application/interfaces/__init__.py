from .article_repository import ArticleRepository
from .category_repository import CategoryRepository
from .csrf_token_manager import CsrfTokenManager
from .flash_bag import FlashBag

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "CsrfTokenManager",
    "FlashBag",
]
