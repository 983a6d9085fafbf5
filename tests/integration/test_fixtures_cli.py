"""The admin-fixtures command against a SQLite file database."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, text

from app.config import get_settings
from app.fixtures.cli import main


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch) -> Iterator[str]:
    url = f"sqlite:///{tmp_path / 'fixtures.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    yield url
    get_settings.cache_clear()


def row_counts(url: str) -> tuple[int, int]:
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            categories = conn.execute(text("SELECT COUNT(*) FROM categories")).scalar_one()
            articles = conn.execute(text("SELECT COUNT(*) FROM articles")).scalar_one()
    finally:
        engine.dispose()
    return categories, articles


def category_names(url: str) -> list[str]:
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            return list(conn.execute(text("SELECT name FROM categories ORDER BY id")).scalars())
    finally:
        engine.dispose()


def test_seeded_run_loads_ten_categories_and_thirty_articles(database_url):
    result = CliRunner().invoke(main, ["--yes", "--seed", "3"])

    assert result.exit_code == 0, result.output
    assert "Loaded 10 categories and 30 articles (10 references)" in result.output
    assert row_counts(database_url) == (10, 30)


def test_second_run_purges_articles_before_their_categories(database_url):
    runner = CliRunner()
    first = runner.invoke(main, ["--yes", "--seed", "3"])
    names = category_names(database_url)

    second = runner.invoke(main, ["--yes", "--seed", "3"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert row_counts(database_url) == (10, 30)
    # same seed, same data
    assert category_names(database_url) == names


def test_append_keeps_existing_rows(database_url):
    runner = CliRunner()
    runner.invoke(main, ["--yes", "--seed", "3"])

    result = runner.invoke(main, ["--append", "--seed", "4"])

    assert result.exit_code == 0, result.output
    assert row_counts(database_url) == (20, 60)


def test_purge_asks_for_confirmation(database_url):
    runner = CliRunner()
    runner.invoke(main, ["--yes", "--seed", "3"])

    result = runner.invoke(main, [], input="n\n")

    assert result.exit_code != 0
    assert row_counts(database_url) == (10, 30)
