import logging
from typing import Callable
from uuid import uuid4

from mdpages.common.exceptions import (
    EmptyContentException,
    ResourceNotFoundException,
    ResourceType,
)
from mdpages.rendering.renderer import PageRenderer
from mdpages.store.base import PageStore

logger = logging.getLogger(__name__)


def generate_page_id() -> str:
    return str(uuid4())


class PageService:
    def __init__(
        self,
        *,
        page_store: PageStore,
        renderer: PageRenderer,
        id_factory: Callable[[], str] = generate_page_id,
    ):
        self.page_store = page_store
        self.renderer = renderer
        self.id_factory = id_factory

    async def render_page(self, page_id: str) -> str:
        if not page_id:
            raise ResourceNotFoundException(ResourceType.PAGE, page_id)

        content = await self.page_store.fetch_content(page_id)
        if content is None:
            raise ResourceNotFoundException(ResourceType.PAGE, page_id)

        return self.renderer.render(content)

    async def create_page(self, content: str) -> str:
        content = self._normalize_content(content)
        page_id = self.id_factory()
        await self.page_store.put_content(page_id, content)
        logger.info(f"Created page '{page_id}'")
        return page_id

    async def update_page(self, page_id: str, content: str) -> str:
        if not page_id:
            raise ResourceNotFoundException(ResourceType.PAGE, page_id)

        content = self._normalize_content(content)
        await self.page_store.put_content(page_id, content)
        logger.info(f"Updated page '{page_id}'")
        return page_id

    def _normalize_content(self, content: str) -> str:
        content = content.strip()
        if not content:
            raise EmptyContentException()
        return content
