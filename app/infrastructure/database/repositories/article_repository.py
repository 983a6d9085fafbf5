"""Concrete repository implementation backed by SQLAlchemy."""

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article, Category
from app.infrastructure.database.models import ArticleModel
from app.infrastructure.database.repositories.base import TrackingRepository


class SQLAlchemyArticleRepository(TrackingRepository[Article, ArticleModel], ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    model_class = ArticleModel
    entity_name = "Article"
    flush_order = 1

    def _to_entity(self, model: ArticleModel) -> Article:
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            published_at=model.published_at,
            category=Category(
                id=model.category.id,
                name=model.category.name,
                description=model.category.description,
            ),
        )

    def _apply(self, entity: Article, model: ArticleModel) -> None:
        if entity.category is None or entity.category.id is None:
            raise ValueError("Article must reference a persisted category")
        model.title = entity.title
        model.content = entity.content
        model.published_at = entity.published_at
        model.category_id = entity.category.id
