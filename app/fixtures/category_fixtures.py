import logging

from faker import Faker

from app.domain.entities import CATEGORY_RULES, Category
from app.fixtures.base import Fixture, FixtureStore

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "category_"


class CategoryFixtures(Fixture):
    """Generates categories with unique names, referenced as ``category_<n>``."""

    def __init__(self, faker: Faker | None = None, count: int = 10):
        super().__init__()
        self.faker = faker or Faker("fr_FR")
        self.count = count

    async def load(self, store: FixtureStore) -> None:
        for i in range(self.count):
            category = Category(
                name=self.faker.unique.word(),
                description=self.faker.text(max_nb_chars=200),
            )
            self.check(category, CATEGORY_RULES)
            await store.categories.add(category)

            # dependent fixtures attach to a category through its reference
            self.add_reference(f"{REFERENCE_PREFIX}{i}", category)

        # one write for the whole batch
        await store.categories.commit()
        logger.info("Loaded %d categories", self.count)
