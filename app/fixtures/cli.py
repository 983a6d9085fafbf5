"""Command-line entry point: seed the database with fixture data."""

import asyncio

import click
from faker import Faker

from app.config import get_settings
from app.fixtures.article_fixtures import ArticleFixtures
from app.fixtures.base import FixtureStore
from app.fixtures.category_fixtures import CategoryFixtures
from app.fixtures.loader import FixtureLoader
from app.infrastructure.database import Base, build_engine, build_session_factory
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
)
from app.infrastructure.logging.log_config import setup_logging


async def _load(append: bool, seed: int | None, categories: int, articles: int) -> int:
    settings = get_settings()
    faker = Faker(settings.fixture_locale)
    if seed is not None:
        faker.seed_instance(seed)

    engine = build_engine(settings.database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with build_session_factory(engine)() as session:
            store = FixtureStore(
                categories=SQLAlchemyCategoryRepository(session),
                articles=SQLAlchemyArticleRepository(session),
            )
            loader = FixtureLoader([
                CategoryFixtures(faker=faker, count=categories),
                ArticleFixtures(faker=faker, count=articles),
            ])
            references = await loader.load(store, append=append)
            return len(references.names())
    finally:
        await engine.dispose()


@click.command()
@click.option("--append", is_flag=True, help="Keep existing rows instead of purging them.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible data.")
@click.option("--categories", type=int, default=None, help="Number of categories to generate.")
@click.option("--articles", type=int, default=None, help="Number of articles to generate.")
@click.option("--yes", "-y", is_flag=True, help="Do not ask before purging.")
def main(
    append: bool,
    seed: int | None,
    categories: int | None,
    articles: int | None,
    yes: bool,
) -> None:
    """Load category and article fixtures into the configured database."""
    setup_logging()
    settings = get_settings()
    categories = settings.fixture_category_count if categories is None else categories
    articles = settings.fixture_article_count if articles is None else articles

    if not append and not yes:
        click.confirm("Existing articles and categories will be deleted. Continue?", abort=True)

    references = asyncio.run(_load(append, seed, categories, articles))
    click.echo(f"Loaded {categories} categories and {articles} articles ({references} references).")


if __name__ == "__main__":
    main()
