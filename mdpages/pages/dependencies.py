from fastapi import Depends

from mdpages.pages.service import PageService
from mdpages.rendering.dependencies import get_page_renderer
from mdpages.rendering.renderer import PageRenderer
from mdpages.store.base import PageStore
from mdpages.store.dependencies import get_page_store


def get_page_service(
    page_store: PageStore = Depends(get_page_store),
    renderer: PageRenderer = Depends(get_page_renderer),
) -> PageService:
    return PageService(page_store=page_store, renderer=renderer)
