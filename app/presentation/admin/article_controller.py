"""Article admin endpoints — translate workflow outcomes into HTTP responses.

Display requests (GET) pass ``None`` to the workflow so forms stay
unsubmitted; POST bodies are bound as submitted form data.
"""

from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from app.application.schemas import (
    ArticleFormData,
    ArticleFormView,
    ArticleListView,
    ArticleResponse,
    CategoryResponse,
    DeleteConfirmationView,
    NotificationResponse,
)
from app.application.services import (
    ArticleAdminService,
    ArticleFormPage,
    DeleteConfirmationPage,
    RedirectTo,
)
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_article_admin_service, get_flash_bag
from app.infrastructure.messaging import SessionFlashBag


async def _form_data(request: Request) -> dict[str, Any] | None:
    if request.method != "POST":
        return None
    return dict(await request.form())


def _redirect(request: Request, outcome: RedirectTo) -> RedirectResponse:
    url = request.url_for(outcome.route, **outcome.params)
    return RedirectResponse(str(url), status_code=status.HTTP_303_SEE_OTHER)


def _flashes(flashes: SessionFlashBag) -> list[NotificationResponse]:
    return [
        NotificationResponse(severity=n.severity.value, message=n.message)
        for n in flashes.drain()
    ]


def _render_form(
    page: ArticleFormPage,
    service: ArticleAdminService,
    flashes: SessionFlashBag,
) -> JSONResponse:
    form = page.form
    view = ArticleFormView(
        submitted=form.is_submitted(),
        valid=form.is_valid(),
        data=ArticleFormData(**form.data),
        errors=form.errors,
        token=form.token,
        categories=[CategoryResponse.model_validate(c, from_attributes=True) for c in form.categories],
        article=ArticleResponse.model_validate(page.article, from_attributes=True) if page.article else None,
        publish_token=service.publish_token() if page.article else None,
        flashes=_flashes(flashes),
    )
    code = 422 if form.is_submitted() and not form.is_valid() else status.HTTP_200_OK
    return JSONResponse(view.model_dump(mode="json"), status_code=code)


async def list_articles(
    service: ArticleAdminService = Depends(get_article_admin_service),
    flashes: SessionFlashBag = Depends(get_flash_bag),
) -> ArticleListView:
    """List every article."""
    articles = await service.list_articles()
    return ArticleListView(
        articles=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles],
        flashes=_flashes(flashes),
    )


async def add_article(
    request: Request,
    service: ArticleAdminService = Depends(get_article_admin_service),
    flashes: SessionFlashBag = Depends(get_flash_bag),
):
    """Show the creation form, or create the article from a submission."""
    outcome = await service.create_article(await _form_data(request))
    if isinstance(outcome, RedirectTo):
        return _redirect(request, outcome)
    return _render_form(outcome, service, flashes)


async def edit_article(
    id: int,
    request: Request,
    service: ArticleAdminService = Depends(get_article_admin_service),
    flashes: SessionFlashBag = Depends(get_flash_bag),
):
    """Show the edit form, or update the article from a submission."""
    try:
        page = await service.edit_article(id, await _form_data(request))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _render_form(page, service, flashes)


async def delete_article(
    id: int,
    request: Request,
    service: ArticleAdminService = Depends(get_article_admin_service),
    flashes: SessionFlashBag = Depends(get_flash_bag),
):
    """Ask for confirmation, then delete the article."""
    try:
        outcome = await service.delete_article(id, await _form_data(request))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if isinstance(outcome, RedirectTo):
        return _redirect(request, outcome)

    page: DeleteConfirmationPage = outcome
    view = DeleteConfirmationView(
        article=ArticleResponse.model_validate(page.article, from_attributes=True),
        submitted=page.form.is_submitted(),
        errors=page.form.errors,
        token=page.form.token,
        flashes=_flashes(flashes),
    )
    return JSONResponse(view.model_dump(mode="json"))


async def publish_article(
    id: int,
    token: str,
    request: Request,
    service: ArticleAdminService = Depends(get_article_admin_service),
) -> RedirectResponse:
    """Publish the article when the token matches the session's publish token."""
    try:
        outcome = await service.publish_article(id, token)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _redirect(request, outcome)
