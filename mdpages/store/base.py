from abc import ABC, abstractmethod


class PageStore(ABC):
    @abstractmethod
    async def fetch_content(self, page_id: str) -> str | None:
        pass

    @abstractmethod
    async def put_content(self, page_id: str, content: str) -> None:
        pass
