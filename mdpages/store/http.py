import logging
from urllib.parse import quote
from aiohttp import ClientSession, ContentTypeError
from pydantic import ValidationError

from mdpages.common.exceptions import PageStoreException
from mdpages.store.base import PageStore
from mdpages.store.schemas import StoredPage

logger = logging.getLogger(__name__)


class HttpPageStore(PageStore):
    def __init__(self, *, session: ClientSession, store_url: str):
        self.session = session
        self.store_url = store_url.rstrip("/")

    def page_url(self, page_id: str) -> str:
        return f"{self.store_url}/p/{quote(page_id, safe='/')}"

    async def fetch_content(self, page_id: str) -> str | None:
        url = self.page_url(page_id)
        async with self.session.get(url) as response:
            if response.status != 200:
                logger.warning(
                    f"Store returned status {response.status} for page '{page_id}'"
                )
                return None
            try:
                payload = await response.json(content_type=None)
                return StoredPage.model_validate(payload).content
            except (ContentTypeError, ValueError, ValidationError) as e:
                raise PageStoreException(
                    f"Malformed store response for page '{page_id}': {e}"
                )

    async def put_content(self, page_id: str, content: str) -> None:
        url = self.page_url(page_id)
        async with self.session.put(
            url,
            json=StoredPage(content=content).model_dump(),
            headers={"Content-Type": "application/json"},
        ) as response:
            if response.status >= 300:
                raise PageStoreException(
                    f"Store rejected page '{page_id}' with status {response.status}",
                    status_code=response.status,
                )
            logger.debug(f"Stored page '{page_id}' ({len(content)} characters)")
