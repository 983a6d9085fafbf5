from dataclasses import dataclass

from app.domain.validation import Rule, max_length, not_blank

CATEGORY_RULES: dict[str, tuple[Rule, ...]] = {
    "name": (
        not_blank("Le nom est manquant."),
        max_length(255, "Le nom ne peut pas contenir plus de 255 caractères"),
    ),
}


@dataclass
class Category:
    """Groups articles. Referenced by every article."""

    name: str
    description: str = ""
    id: int | None = None
