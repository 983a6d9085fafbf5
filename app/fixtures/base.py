"""Fixture building blocks: the store handed to fixtures and named references."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from app.application.interfaces import ArticleRepository, CategoryRepository
from app.domain.validation import Rule, validate_fields


@dataclass
class FixtureStore:
    """Repositories a fixture registers its entities with."""

    categories: CategoryRepository
    articles: ArticleRepository


class ReferenceRepository:
    """Named objects shared between the fixtures of one loader run."""

    def __init__(self) -> None:
        self._references: dict[str, Any] = {}

    def add(self, name: str, obj: Any) -> None:
        if name in self._references:
            raise ValueError(f"Reference '{name}' already exists")
        self._references[name] = obj

    def get(self, name: str) -> Any:
        try:
            return self._references[name]
        except KeyError:
            raise KeyError(f"Reference '{name}' does not exist") from None

    def names(self) -> list[str]:
        return list(self._references)


class Fixture(ABC):
    """A unit of seed data.

    ``dependencies`` lists the fixture classes whose references this one
    reads; the loader runs them first.
    """

    dependencies: ClassVar[tuple[type["Fixture"], ...]] = ()

    def __init__(self) -> None:
        self.references = ReferenceRepository()

    @abstractmethod
    async def load(self, store: FixtureStore) -> None:
        ...

    def add_reference(self, name: str, obj: Any) -> None:
        self.references.add(name, obj)

    def get_reference(self, name: str) -> Any:
        return self.references.get(name)

    @staticmethod
    def check(entity: Any, rule_table: Mapping[str, Sequence[Rule]]) -> None:
        """Raise ValueError when generated data breaks the entity's rules."""
        errors = validate_fields(vars(entity), rule_table)
        if errors:
            raise ValueError(f"Invalid {type(entity).__name__} fixture: {errors}")
