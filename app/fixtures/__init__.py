from .article_fixtures import ArticleFixtures
from .base import Fixture, FixtureStore, ReferenceRepository
from .category_fixtures import CategoryFixtures
from .loader import FixtureLoader

__all__ = [
    "ArticleFixtures",
    "CategoryFixtures",
    "Fixture",
    "FixtureLoader",
    "FixtureStore",
    "ReferenceRepository",
]
