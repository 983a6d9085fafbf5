from .article import ArticleModel
from .category import CategoryModel

__all__ = [
    "ArticleModel",
    "CategoryModel",
]
