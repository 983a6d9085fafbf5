"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Changes are explicit: ``add`` and ``remove`` only schedule work, and
    in-place mutations of loaded articles are written by ``commit``.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article."""
        ...

    @abstractmethod
    async def add(self, article: Article) -> None:
        """Register a new article; its ID is assigned on commit."""
        ...

    @abstractmethod
    async def remove(self, article: Article) -> None:
        """Schedule the deletion of an article."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Write all pending additions, mutations and removals."""
        ...
