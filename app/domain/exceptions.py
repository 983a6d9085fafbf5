"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class CategoryInUseError(Exception):
    """Raised when removing a category that articles still reference."""

    def __init__(self, category_id: int, article_count: int):
        self.category_id = category_id
        self.article_count = article_count
        super().__init__(
            f"Category with id '{category_id}' is still referenced by {article_count} article(s)"
        )
