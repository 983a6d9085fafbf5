"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import func, select

from app.application.interfaces import CategoryRepository
from app.domain.entities import Category
from app.domain.exceptions import CategoryInUseError
from app.infrastructure.database.models import ArticleModel, CategoryModel
from app.infrastructure.database.repositories.base import TrackingRepository


class SQLAlchemyCategoryRepository(TrackingRepository[Category, CategoryModel], CategoryRepository):
    """Implements the CategoryRepository port; deletion is restricted while articles remain."""

    model_class = CategoryModel
    entity_name = "Category"
    flush_order = 0

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, description=model.description)

    def _apply(self, entity: Category, model: CategoryModel) -> None:
        model.name = entity.name
        model.description = entity.description

    async def count_articles(self, category: Category) -> int:
        if category.id is None:
            return 0
        stmt = select(func.count()).select_from(ArticleModel).where(ArticleModel.category_id == category.id)
        return (await self._session.execute(stmt)).scalar_one()

    async def _before_delete(self, entity: Category) -> None:
        count = await self.count_articles(entity)
        if count:
            raise CategoryInUseError(entity.id, count)
