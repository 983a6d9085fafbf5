from .article import ARTICLE_RULES, Article
from .category import CATEGORY_RULES, Category
from .notification import Notification, Severity

__all__ = [
    "ARTICLE_RULES",
    "Article",
    "CATEGORY_RULES",
    "Category",
    "Notification",
    "Severity",
]
