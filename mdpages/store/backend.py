from aiohttp import ClientSession

from mdpages.config import Settings
from mdpages.store.base import PageStore
from mdpages.store.http import HttpPageStore
from mdpages.store.memory import InMemoryPageStore


def get_page_store_backend(session: ClientSession, settings: Settings) -> PageStore:
    if settings.PAGE_STORE_BACKEND == "http":
        return HttpPageStore(session=session, store_url=settings.STORE_URL)
    elif settings.PAGE_STORE_BACKEND == "memory":
        return InMemoryPageStore()
    else:
        raise ValueError(
            f"Unsupported page store backend: {settings.PAGE_STORE_BACKEND}"
        )
