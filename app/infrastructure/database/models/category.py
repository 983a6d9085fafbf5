"""SQLAlchemy ORM model for the Category entity."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database.base import Base

if TYPE_CHECKING:
    from app.infrastructure.database.models.article import ArticleModel


class CategoryModel(Base):
    """ORM model — maps to the 'categories' table."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # inverse side; never loaded implicitly (async sessions cannot lazy-load)
    articles: Mapped[list["ArticleModel"]] = relationship(
        lazy="raise",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"
