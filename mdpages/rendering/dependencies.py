from fastapi import Depends

from mdpages.config import Settings, get_settings
from mdpages.rendering.renderer import PageRenderer


def get_page_renderer(settings: Settings = Depends(get_settings)) -> PageRenderer:
    return PageRenderer(stylesheet_urls=settings.STYLESHEET_URLS)
