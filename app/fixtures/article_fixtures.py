import logging
from datetime import timezone

from faker import Faker

from app.domain.entities import ARTICLE_RULES, Article
from app.fixtures.base import Fixture, FixtureStore
from app.fixtures.category_fixtures import REFERENCE_PREFIX, CategoryFixtures

logger = logging.getLogger(__name__)


class ArticleFixtures(Fixture):
    """Generates articles spread over the referenced categories, about half published."""

    dependencies = (CategoryFixtures,)

    def __init__(self, faker: Faker | None = None, count: int = 30):
        super().__init__()
        self.faker = faker or Faker("fr_FR")
        self.count = count

    async def load(self, store: FixtureStore) -> None:
        category_refs = [
            name for name in self.references.names() if name.startswith(REFERENCE_PREFIX)
        ]
        if not category_refs:
            raise LookupError("ArticleFixtures needs category references; load CategoryFixtures first")

        for _ in range(self.count):
            article = Article(
                title=self.faker.sentence(nb_words=6).rstrip("."),
                content="\n\n".join(self.faker.paragraphs(nb=3)),
                category=self.get_reference(self.faker.random_element(category_refs)),
            )
            if self.faker.boolean():
                article.publish(
                    self.faker.date_time_between(start_date="-1y", end_date="now", tzinfo=timezone.utc)
                )
            self.check(article, ARTICLE_RULES)
            await store.articles.add(article)

        await store.articles.commit()
        logger.info("Loaded %d articles", self.count)
