from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse

from mdpages.common.body_reader import read_body
from mdpages.common.disconnect import run_until_disconnected
from mdpages.common.exceptions import (
    ResourceType,
    bad_gateway_response,
    empty_content_response,
    payload_too_large_response,
    resource_not_found_response,
)
from mdpages.common.routing import any_method_except
from mdpages.config import Settings, get_settings
from mdpages.pages.dependencies import get_page_service
from mdpages.pages.schemas import PageCreatedResponse
from mdpages.pages.service import PageService
from mdpages.pages.urls import page_path, page_url, resolve_public_host
from mdpages.rendering.responses import cached_html_response


router = APIRouter(
    prefix="/p",
    tags=["Pages"],
)


def created_response(
    request: Request, response: Response, page_id: str
) -> PageCreatedResponse:
    response.headers["Location"] = page_path(page_id)
    host = resolve_public_host(request.headers)
    return PageCreatedResponse(id=page_id, url=page_url(host, page_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        **empty_content_response,
        **payload_too_large_response,
        **bad_gateway_response,
    },
)
async def create_page(
    request: Request,
    response: Response,
    page_service: PageService = Depends(get_page_service),
    settings: Settings = Depends(get_settings),
) -> PageCreatedResponse:
    content = await read_body(request, settings.MAX_BODY_BYTES)
    page_id = await run_until_disconnected(request, page_service.create_page(content))
    return created_response(request, response, page_id)


@router.api_route(
    "/{page_id:path}",
    methods=any_method_except("PUT"),
    response_class=HTMLResponse,
    responses={**resource_not_found_response(ResourceType.PAGE)},
)
async def get_page(
    page_id: str,
    request: Request,
    page_service: PageService = Depends(get_page_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    document = await run_until_disconnected(request, page_service.render_page(page_id))
    return cached_html_response(document, settings.CACHE_MAX_AGE)


@router.put(
    "/{page_id:path}",
    status_code=status.HTTP_201_CREATED,
    responses={
        **resource_not_found_response(ResourceType.PAGE),
        **empty_content_response,
        **payload_too_large_response,
        **bad_gateway_response,
    },
)
async def update_page(
    page_id: str,
    request: Request,
    response: Response,
    page_service: PageService = Depends(get_page_service),
    settings: Settings = Depends(get_settings),
) -> PageCreatedResponse:
    content = await read_body(request, settings.MAX_BODY_BYTES)
    await run_until_disconnected(request, page_service.update_page(page_id, content))
    return created_response(request, response, page_id)
