"""Admin router built from an explicit route table."""

from collections.abc import Callable
from typing import Any, NamedTuple

from fastapi import APIRouter

from app.application.schemas import ArticleListView
from app.presentation.admin import article_controller


class Route(NamedTuple):
    name: str
    path: str
    endpoint: Callable[..., Any]
    methods: tuple[str, ...]
    response_model: Any = None


ARTICLE_ROUTES: tuple[Route, ...] = (
    Route("admin_article_list", "/", article_controller.list_articles, ("GET",), ArticleListView),
    Route("admin_article_add", "/new", article_controller.add_article, ("GET", "POST")),
    Route("admin_article_edit", "/{id}/edit", article_controller.edit_article, ("GET", "POST")),
    Route("admin_article_delete", "/{id}/delete", article_controller.delete_article, ("GET", "POST")),
    Route("admin_article_publish", "/{id}/publish/{token}", article_controller.publish_article, ("GET", "POST")),
)


def build_router(prefix: str, routes: tuple[Route, ...]) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["Admin"])
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            name=route.name,
            methods=list(route.methods),
            response_model=route.response_model,
        )
    return router


router = build_router("/admin/article", ARTICLE_ROUTES)
