from pydantic import BaseModel


class StoredPage(BaseModel):
    content: str
