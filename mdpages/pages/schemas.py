from pydantic import BaseModel


class PageCreatedResponse(BaseModel):
    id: str
    url: str
