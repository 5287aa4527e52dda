from mdpages.common.exceptions import ResourceNotFoundException, ResourceType
from mdpages.remote.client import RawFileClient
from mdpages.rendering.renderer import PageRenderer


class RemotePageService:
    def __init__(
        self,
        *,
        raw_file_client: RawFileClient,
        renderer: PageRenderer,
        default_path: str,
    ):
        self.client = raw_file_client
        self.renderer = renderer
        self.default_path = default_path

    async def render_file(self, org: str, repo: str, path: str | None = None) -> str:
        path = path or self.default_path
        content = await self.client.fetch_file(org, repo, path)
        if content is None:
            raise ResourceNotFoundException(
                ResourceType.REMOTE_FILE, f"{org}/{repo}/{path}"
            )
        return self.renderer.render(content)
