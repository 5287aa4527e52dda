from aiohttp import ClientSession
from fastapi import Depends

from mdpages.common.http_session import get_http_session
from mdpages.config import Settings, get_settings
from mdpages.remote.client import RawFileClient
from mdpages.remote.service import RemotePageService
from mdpages.rendering.dependencies import get_page_renderer
from mdpages.rendering.renderer import PageRenderer


def get_raw_file_client(
    session: ClientSession = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
) -> RawFileClient:
    return RawFileClient(
        session=session,
        base_url=settings.REMOTE_BASE_URL,
        branch=settings.REMOTE_BRANCH,
    )


def get_remote_page_service(
    raw_file_client: RawFileClient = Depends(get_raw_file_client),
    renderer: PageRenderer = Depends(get_page_renderer),
    settings: Settings = Depends(get_settings),
) -> RemotePageService:
    return RemotePageService(
        raw_file_client=raw_file_client,
        renderer=renderer,
        default_path=settings.REMOTE_DEFAULT_PATH,
    )
