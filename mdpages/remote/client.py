import logging
from urllib.parse import quote
from aiohttp import ClientSession

logger = logging.getLogger(__name__)


class RawFileClient:
    def __init__(self, *, session: ClientSession, base_url: str, branch: str):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.branch = branch

    def file_url(self, org: str, repo: str, path: str) -> str:
        return "/".join(
            [
                self.base_url,
                quote(org, safe=""),
                quote(repo, safe=""),
                self.branch,
                quote(path, safe="/"),
            ]
        )

    async def fetch_file(self, org: str, repo: str, path: str) -> str | None:
        url = self.file_url(org, repo, path)
        async with self.session.get(url) as response:
            if response.status != 200:
                logger.warning(
                    f"Remote host returned status {response.status} for {url}"
                )
                return None
            return await response.text(encoding="utf-8", errors="replace")
