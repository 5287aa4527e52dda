from pydantic import BaseModel


class FrontMatter(BaseModel):
    metadata: dict[str, str]
    body: str


class RenderedPage(BaseModel):
    title: str | None
    html: str
