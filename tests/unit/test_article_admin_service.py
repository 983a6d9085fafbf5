"""Unit tests for the ArticleAdminService workflow."""

from datetime import datetime, timedelta, timezone

import pytest

from app.application.services import (
    ArticleAdminService,
    ArticleFormPage,
    DeleteConfirmationPage,
    RedirectTo,
)
from app.domain.entities import Article, Category, Notification, Severity
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.messaging import SessionFlashBag
from app.infrastructure.security import SessionCsrfTokenManager
from tests.unit.fakes import FakeArticleRepository, FakeCategoryRepository


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, minutes: int) -> None:
        self.now += timedelta(minutes=minutes)


@pytest.fixture
def session() -> dict:
    return {}


@pytest.fixture
def csrf(session: dict) -> SessionCsrfTokenManager:
    return SessionCsrfTokenManager(session)


@pytest.fixture
def flashes(session: dict) -> SessionFlashBag:
    return SessionFlashBag(session)


@pytest.fixture
def categories() -> FakeCategoryRepository:
    return FakeCategoryRepository([Category(name=f"cat{i}", description="...") for i in range(1, 6)])


@pytest.fixture
def articles(categories: FakeCategoryRepository) -> FakeArticleRepository:
    return FakeArticleRepository(categories)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(articles, categories, flashes, csrf, clock) -> ArticleAdminService:
    return ArticleAdminService(articles, categories, flashes, csrf, clock=clock)


@pytest.fixture
def existing(articles: FakeArticleRepository, categories: FakeCategoryRepository) -> Article:
    category = categories._categories[1]
    return articles.seed(Article(title="Old title", content="Old content", category=category))


def article_form(csrf: SessionCsrfTokenManager, **fields) -> dict:
    data = {"title": "Hello", "content": "World", "category": "3", "_token": csrf.issue("article")}
    data.update(fields)
    return data


def confirmation_form(csrf: SessionCsrfTokenManager) -> dict:
    return {"_token": csrf.issue("confirmation")}


# ── list ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_articles_returns_every_article(service, articles, categories):
    category = await categories.get_by_id(1)
    articles.seed(Article(title="A1", content="C1", category=category))
    articles.seed(Article(title="A2", content="C2", category=category))

    result = await service.list_articles()

    assert [a.title for a in result] == ["A1", "A2"]


# ── create ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_valid_article_commits_once_and_redirects_to_edit(service, articles, csrf, flashes):
    outcome = await service.create_article(article_form(csrf))

    assert articles.commit_count == 1
    assert len(articles.added) == 1
    created = articles.added[0]
    assert created.id is not None
    assert created.title == "Hello"
    assert created.content == "World"
    assert created.category.id == 3
    assert created.published_at is None
    assert outcome == RedirectTo("admin_article_edit", {"id": created.id})
    assert flashes.drain() == [Notification(Severity.SUCCESS, "L'article a été créé")]


@pytest.mark.asyncio
async def test_create_without_submission_renders_empty_form(service, articles, flashes):
    outcome = await service.create_article(None)

    assert isinstance(outcome, ArticleFormPage)
    assert not outcome.form.is_submitted()
    assert outcome.form.errors == {}
    assert len(outcome.form.categories) == 5
    assert articles.commit_count == 0
    assert flashes.drain() == []


@pytest.mark.asyncio
async def test_create_blank_title_reports_error_and_skips_commit(service, articles, csrf, flashes):
    outcome = await service.create_article(article_form(csrf, title="", content="x"))

    assert isinstance(outcome, ArticleFormPage)
    assert outcome.form.is_submitted()
    assert not outcome.form.is_valid()
    assert outcome.form.errors == {"title": ["Le titre est manquant."]}
    assert outcome.form.data["content"] == "x"
    assert articles.commit_count == 0
    assert articles.added == []
    assert flashes.drain() == []


@pytest.mark.asyncio
async def test_create_reports_one_error_per_violated_constraint(service, articles, csrf):
    outcome = await service.create_article(
        {"title": "   ", "content": "", "category": "", "_token": csrf.issue("article")}
    )

    assert outcome.form.errors == {
        "title": ["Le titre est manquant."],
        "content": ["Le contenu est manquant."],
        "category": ["La catégorie est manquante."],
    }
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_create_title_longer_than_255_characters_is_rejected(service, articles, csrf):
    outcome = await service.create_article(article_form(csrf, title="a" * 256))

    assert outcome.form.errors == {
        "title": ["Le titre ne peut pas contenir plus de 255 caractères"],
    }
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_create_title_of_exactly_255_characters_is_accepted(service, articles, csrf):
    outcome = await service.create_article(article_form(csrf, title="a" * 255))

    assert isinstance(outcome, RedirectTo)
    assert articles.commit_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("category", ["999", "abc"])
async def test_create_with_unknown_or_malformed_category_is_invalid(service, articles, csrf, category):
    outcome = await service.create_article(article_form(csrf, category=category))

    assert outcome.form.errors == {"category": ["Cette valeur n'est pas valide."]}
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_create_with_bad_form_token_is_invalid(service, articles, csrf):
    outcome = await service.create_article(article_form(csrf, _token="forged"))

    assert "_token" in outcome.form.errors
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_create_with_non_text_value_does_not_raise(service, articles, csrf):
    outcome = await service.create_article(article_form(csrf, title=["a", "b"]))

    assert outcome.form.errors == {"title": ["Cette valeur n'est pas valide."]}
    assert articles.commit_count == 0


# ── edit ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_edit_without_submission_prefills_form(service, existing, articles):
    page = await service.edit_article(existing.id, None)

    assert page.article is existing
    assert page.form.data == {"title": "Old title", "content": "Old content", "category": 1}
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_edit_valid_submission_commits_exactly_once(service, existing, articles, csrf, flashes):
    page = await service.edit_article(
        existing.id, article_form(csrf, title="New title", content="New content", category="2")
    )

    assert articles.commit_count == 1
    assert articles.added == []
    assert len(await articles.get_all()) == 1
    stored = await articles.get_by_id(existing.id)
    assert stored.title == "New title"
    assert stored.content == "New content"
    assert stored.category.id == 2
    assert page.form.is_valid()
    assert flashes.drain() == [Notification(Severity.SUCCESS, "Article mis à jour.")]


@pytest.mark.asyncio
async def test_edit_invalid_submission_leaves_article_untouched(service, existing, articles, csrf, flashes):
    page = await service.edit_article(existing.id, article_form(csrf, title="", content="Changed"))

    assert articles.commit_count == 0
    assert existing.title == "Old title"
    assert existing.content == "Old content"
    assert page.form.errors == {"title": ["Le titre est manquant."]}
    assert page.form.data["content"] == "Changed"
    assert flashes.drain() == []


@pytest.mark.asyncio
async def test_edit_unknown_article_raises_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.edit_article(999, None)


# ── delete ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_without_confirmation_keeps_article(service, existing, articles):
    outcome = await service.delete_article(existing.id, None)

    assert isinstance(outcome, DeleteConfirmationPage)
    assert outcome.article is existing
    assert await articles.get_by_id(existing.id) is existing
    assert articles.commit_count == 0


@pytest.mark.asyncio
async def test_delete_with_bad_confirmation_token_keeps_article(service, existing, articles):
    outcome = await service.delete_article(existing.id, {"_token": "nope"})

    assert isinstance(outcome, DeleteConfirmationPage)
    assert outcome.form.errors
    assert await articles.get_by_id(existing.id) is existing


@pytest.mark.asyncio
async def test_confirmed_delete_removes_one_article_and_redirects_to_list(
    service, existing, articles, categories, csrf, flashes
):
    other = articles.seed(Article(title="Other", content="...", category=existing.category))

    outcome = await service.delete_article(existing.id, confirmation_form(csrf))

    assert outcome == RedirectTo("admin_article_list")
    assert articles.commit_count == 1
    assert await articles.get_all() == [other]
    assert len(await categories.get_all()) == 5
    assert flashes.drain() == [
        Notification(Severity.INFO, 'L\'article "Old title" a été supprimé.')
    ]


@pytest.mark.asyncio
async def test_delete_unknown_article_raises_not_found(service, csrf):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(42, confirmation_form(csrf))


# ── publish ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_publish_with_valid_token_sets_published_at(service, existing, articles, clock, flashes):
    outcome = await service.publish_article(existing.id, service.publish_token())

    assert existing.published_at == clock.now
    assert existing.is_published
    assert articles.commit_count == 1
    assert outcome == RedirectTo("admin_article_edit", {"id": existing.id})
    assert flashes.drain() == [Notification(Severity.SUCCESS, "L'article a été publié")]


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["forged", "", None])
async def test_publish_with_invalid_token_changes_nothing(service, existing, articles, flashes, token):
    service.publish_token()

    outcome = await service.publish_article(existing.id, token)

    assert existing.published_at is None
    assert articles.commit_count == 0
    assert outcome == RedirectTo("admin_article_edit", {"id": existing.id})
    assert outcome.route != "admin_article_list"
    assert flashes.drain() == [Notification(Severity.DANGER, "Le jeton est invalide.")]


@pytest.mark.asyncio
async def test_publish_token_of_another_intention_is_rejected(service, existing, csrf):
    await service.publish_article(existing.id, csrf.issue("article"))

    assert existing.published_at is None


@pytest.mark.asyncio
async def test_republishing_updates_timestamp_without_duplicates(
    service, existing, articles, categories, clock
):
    token = service.publish_token()
    await service.publish_article(existing.id, token)
    first = existing.published_at

    clock.advance(minutes=5)
    await service.publish_article(existing.id, token)

    assert existing.published_at > first
    assert articles.commit_count == 2
    assert len(await articles.get_all()) == 1
    assert len(await categories.get_all()) == 5


@pytest.mark.asyncio
async def test_publish_unknown_article_raises_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.publish_article(404, service.publish_token())
