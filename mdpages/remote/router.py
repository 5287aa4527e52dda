from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from mdpages.common.disconnect import run_until_disconnected
from mdpages.common.exceptions import ResourceType, resource_not_found_response
from mdpages.common.routing import ANY_METHOD
from mdpages.config import Settings, get_settings
from mdpages.remote.dependencies import get_remote_page_service
from mdpages.remote.service import RemotePageService
from mdpages.rendering.responses import cached_html_response


router = APIRouter(
    prefix="/g",
    tags=["Remote files"],
)


async def render_remote_file(
    request: Request,
    remote_service: RemotePageService,
    settings: Settings,
    org: str,
    repo: str,
    file_path: str | None,
) -> HTMLResponse:
    document = await run_until_disconnected(
        request, remote_service.render_file(org, repo, file_path)
    )
    return cached_html_response(document, settings.CACHE_MAX_AGE)


@router.api_route(
    "/{org}/{repo}",
    methods=ANY_METHOD,
    response_class=HTMLResponse,
    responses={**resource_not_found_response(ResourceType.REMOTE_FILE)},
)
async def get_remote_readme(
    org: str,
    repo: str,
    request: Request,
    remote_service: RemotePageService = Depends(get_remote_page_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    return await render_remote_file(request, remote_service, settings, org, repo, None)


@router.api_route(
    "/{org}/{repo}/{file_path:path}",
    methods=ANY_METHOD,
    response_class=HTMLResponse,
    responses={**resource_not_found_response(ResourceType.REMOTE_FILE)},
)
async def get_remote_file(
    org: str,
    repo: str,
    file_path: str,
    request: Request,
    remote_service: RemotePageService = Depends(get_remote_page_service),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    return await render_remote_file(
        request, remote_service, settings, org, repo, file_path
    )
