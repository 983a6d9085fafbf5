from abc import ABC, abstractmethod

from app.domain.entities import Category


class CategoryRepository(ABC):
    """Port for category persistence — same unit-of-work contract as ArticleRepository."""

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Category | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Category]:
        ...

    @abstractmethod
    async def add(self, category: Category) -> None:
        ...

    @abstractmethod
    async def remove(self, category: Category) -> None:
        """Schedule the deletion of a category.

        Commit raises CategoryInUseError while articles still reference it.
        """
        ...

    @abstractmethod
    async def count_articles(self, category: Category) -> int:
        """Number of stored articles referencing the category."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...
