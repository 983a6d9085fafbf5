"""Pydantic view models returned by the admin endpoints."""

from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    severity: str
    message: str

    model_config = {"from_attributes": True}


class CategoryResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str

    model_config = {"from_attributes": True}


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    published_at: datetime | None
    category: CategoryResponse

    model_config = {"from_attributes": True}


class ArticleListView(BaseModel):
    articles: list[ArticleResponse]
    flashes: list[NotificationResponse] = []


class ArticleFormData(BaseModel):
    """Current (possibly invalid) form values, echoed back for re-rendering."""

    title: str | None = None
    content: str | None = None
    category: int | str | None = None


class ArticleFormView(BaseModel):
    """Create / edit page: form state plus the tokens a template would embed."""

    submitted: bool
    valid: bool
    data: ArticleFormData
    errors: dict[str, list[str]]
    token: str
    categories: list[CategoryResponse]
    article: ArticleResponse | None = None
    publish_token: str | None = None
    flashes: list[NotificationResponse] = []


class DeleteConfirmationView(BaseModel):
    article: ArticleResponse
    submitted: bool
    errors: dict[str, list[str]]
    token: str
    flashes: list[NotificationResponse] = []
