from collections.abc import Mapping, Sequence
from typing import Any

from app.application.forms.base import INVALID_VALUE, Form
from app.application.interfaces import CsrfTokenManager
from app.domain.entities import ARTICLE_RULES, Article, Category
from app.domain.validation import validate_fields


class ArticleForm(Form):
    """Title / content / category form, optionally pre-filled from an article."""

    intention = "article"

    def __init__(
        self,
        csrf: CsrfTokenManager,
        categories: Sequence[Category],
        article: Article | None = None,
    ):
        super().__init__(csrf)
        self.categories = list(categories)
        self._category: Category | None = None
        if article is not None:
            self._category = article.category
            self.data = {
                "title": article.title,
                "content": article.content,
                "category": article.category.id if article.category else None,
            }
        else:
            self.data = {"title": None, "content": None, "category": None}

    def _bind(self, raw: Mapping[str, Any]) -> None:
        title = self._read_text(raw, "title")
        content = self._read_text(raw, "content")
        category_text = self._read_text(raw, "category")
        self._category = self._resolve_category(category_text)
        self.data = {
            "title": title,
            "content": content,
            "category": self._category.id if self._category else category_text,
        }
        for field_name, messages in validate_fields(
            {"title": title, "content": content, "category": self._category},
            ARTICLE_RULES,
        ).items():
            # a malformed value already carries its own error
            if field_name not in self.errors:
                self.errors[field_name] = messages

    def _resolve_category(self, value: str | None) -> Category | None:
        if value is None:
            return None
        try:
            category_id = int(value)
        except ValueError:
            self.add_error("category", INVALID_VALUE)
            return None
        for category in self.categories:
            if category.id == category_id:
                return category
        self.add_error("category", INVALID_VALUE)
        return None

    def build(self) -> Article:
        """New article from the bound values. Only meaningful when valid."""
        return Article(
            title=self.data["title"],
            content=self.data["content"],
            category=self._category,
        )

    def apply(self, article: Article) -> None:
        """Copy the bound values onto an existing article."""
        article.title = self.data["title"]
        article.content = self.data["content"]
        article.category = self._category
