"""Application service (use case) for the article admin workflow.

Each operation binds the request input to a form, validates it, and only on
a valid submission touches the repository: ``add`` for new articles, in-place
mutation for existing ones, then exactly one ``commit`` and one flash
notification. Outcomes are returned as plain objects so the presentation
layer decides how to render or redirect.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from app.application.forms import ArticleForm, ConfirmationForm
from app.application.interfaces import (
    ArticleRepository,
    CategoryRepository,
    CsrfTokenManager,
    FlashBag,
)
from app.domain.entities import Article, Severity
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

PUBLISH_INTENTION = "article-publish"

ROUTE_LIST = "admin_article_list"
ROUTE_EDIT = "admin_article_edit"


@dataclass(frozen=True)
class RedirectTo:
    """Redirect to a named admin route — never to a caller-supplied URL."""

    route: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class ArticleFormPage:
    """Create/edit form to render, with current values and errors."""

    form: ArticleForm
    article: Article | None = None


@dataclass
class DeleteConfirmationPage:
    form: ConfirmationForm
    article: Article


AdminOutcome = RedirectTo | ArticleFormPage | DeleteConfirmationPage


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleAdminService:
    """Orchestrates the list/create/edit/delete/publish use cases."""

    def __init__(
        self,
        articles: ArticleRepository,
        categories: CategoryRepository,
        flashes: FlashBag,
        csrf: CsrfTokenManager,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._articles = articles
        self._categories = categories
        self._flashes = flashes
        self._csrf = csrf
        self._clock = clock

    async def list_articles(self) -> list[Article]:
        return await self._articles.get_all()

    async def get_article(self, article_id: int) -> Article:
        article = await self._articles.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    def publish_token(self) -> str:
        """Token a view embeds in the publish link."""
        return self._csrf.issue(PUBLISH_INTENTION)

    async def create_article(self, data: Mapping[str, Any] | None) -> AdminOutcome:
        form = ArticleForm(self._csrf, await self._categories.get_all())
        form.handle(data)

        if form.is_submitted() and form.is_valid():
            article = form.build()
            await self._articles.add(article)
            await self._articles.commit()
            logger.info("Created article %d", article.id)

            self._flashes.push(Severity.SUCCESS, "L'article a été créé")
            return RedirectTo(ROUTE_EDIT, {"id": article.id})

        return ArticleFormPage(form=form)

    async def edit_article(self, article_id: int, data: Mapping[str, Any] | None) -> ArticleFormPage:
        article = await self.get_article(article_id)
        form = ArticleForm(self._csrf, await self._categories.get_all(), article=article)
        form.handle(data)

        if form.is_submitted() and form.is_valid():
            # already tracked by the repository: no add, the commit writes it
            form.apply(article)
            await self._articles.commit()
            logger.info("Updated article %d", article.id)
            self._flashes.push(Severity.SUCCESS, "Article mis à jour.")

        return ArticleFormPage(form=form, article=article)

    async def delete_article(self, article_id: int, data: Mapping[str, Any] | None) -> AdminOutcome:
        article = await self.get_article(article_id)
        form = ConfirmationForm(self._csrf)
        form.handle(data)

        if form.is_submitted() and form.is_valid():
            await self._articles.remove(article)
            await self._articles.commit()
            logger.info("Deleted article %d", article_id)

            self._flashes.push(Severity.INFO, f'L\'article "{article.title}" a été supprimé.')
            return RedirectTo(ROUTE_LIST)

        return DeleteConfirmationPage(form=form, article=article)

    async def publish_article(self, article_id: int, token: str | None) -> RedirectTo:
        article = await self.get_article(article_id)
        target = RedirectTo(ROUTE_EDIT, {"id": article.id})

        if not self._csrf.verify(PUBLISH_INTENTION, token):
            logger.warning("Rejected publish of article %d: invalid CSRF token", article.id)
            self._flashes.push(Severity.DANGER, "Le jeton est invalide.")
            return target

        article.publish(self._clock())
        await self._articles.commit()
        logger.info("Published article %d", article.id)

        self._flashes.push(Severity.SUCCESS, "L'article a été publié")
        return target
