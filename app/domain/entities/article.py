"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone

from app.domain.entities.category import Category
from app.domain.validation import Rule, max_length, not_blank, not_null

TITLE_MAX_LENGTH = 255

ARTICLE_RULES: dict[str, tuple[Rule, ...]] = {
    "title": (
        not_blank("Le titre est manquant."),
        max_length(
            TITLE_MAX_LENGTH,
            f"Le titre ne peut pas contenir plus de {TITLE_MAX_LENGTH} caractères",
        ),
    ),
    "content": (not_blank("Le contenu est manquant."),),
    "category": (not_null("La catégorie est manquante."),),
}


@dataclass
class Article:
    """Core domain entity representing an article managed from the admin panel.

    ``published_at`` is ``None`` while the article is a draft.
    """

    title: str
    content: str
    category: Category | None = None
    published_at: datetime | None = None
    id: int | None = None

    @property
    def is_published(self) -> bool:
        return self.published_at is not None

    def publish(self, when: datetime | None = None) -> None:
        """Mark the article as published at *when* (defaults to now, UTC)."""
        self.published_at = when or datetime.now(timezone.utc)
