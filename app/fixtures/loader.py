"""Runs fixtures in dependency order, optionally purging existing data first."""

import logging
from collections.abc import Iterable

from app.fixtures.base import Fixture, FixtureStore, ReferenceRepository

logger = logging.getLogger(__name__)


class FixtureLoader:
    def __init__(self, fixtures: Iterable[Fixture]):
        self._fixtures = list(fixtures)

    def ordered(self) -> list[Fixture]:
        """Fixtures sorted so that every dependency comes first.

        Raises ValueError on a missing dependency or a dependency cycle.
        """
        by_class = {type(fixture): fixture for fixture in self._fixtures}
        ordered: list[Fixture] = []
        visiting: set[type[Fixture]] = set()
        done: set[type[Fixture]] = set()

        def visit(fixture_class: type[Fixture]) -> None:
            if fixture_class in done:
                return
            if fixture_class in visiting:
                raise ValueError(f"Circular fixture dependency on {fixture_class.__name__}")
            if fixture_class not in by_class:
                raise ValueError(f"Missing fixture dependency {fixture_class.__name__}")
            visiting.add(fixture_class)
            for dependency in fixture_class.dependencies:
                visit(dependency)
            visiting.discard(fixture_class)
            done.add(fixture_class)
            ordered.append(by_class[fixture_class])

        for fixture in self._fixtures:
            visit(type(fixture))
        return ordered

    async def purge(self, store: FixtureStore) -> None:
        """Delete all articles and categories in a single commit."""
        articles = await store.articles.get_all()
        for article in articles:
            await store.articles.remove(article)
        categories = await store.categories.get_all()
        for category in categories:
            await store.categories.remove(category)
        await store.categories.commit()
        logger.info("Purged %d articles and %d categories", len(articles), len(categories))

    async def load(self, store: FixtureStore, append: bool = False) -> ReferenceRepository:
        fixtures = self.ordered()
        if not append:
            await self.purge(store)

        references = ReferenceRepository()
        for fixture in fixtures:
            fixture.references = references
            logger.info("Loading %s", type(fixture).__name__)
            await fixture.load(store)
        return references
