from mdpages.store.base import PageStore


class InMemoryPageStore(PageStore):
    def __init__(self, pages: dict[str, str] | None = None):
        self.pages: dict[str, str] = dict(pages or {})

    async def fetch_content(self, page_id: str) -> str | None:
        return self.pages.get(page_id)

    async def put_content(self, page_id: str, content: str) -> None:
        self.pages[page_id] = content
