from mdpages.remote.client import RawFileClient


class FakeRawFileClient(RawFileClient):
    """Serves files from a dict keyed by ``org/repo/path`` and records lookups."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.requested: list[tuple[str, str, str]] = []

    async def fetch_file(self, org: str, repo: str, path: str) -> str | None:
        self.requested.append((org, repo, path))
        return self.files.get(f"{org}/{repo}/{path}")
