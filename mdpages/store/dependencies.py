from fastapi import Request

from mdpages.store.base import PageStore


def get_page_store(request: Request) -> PageStore:
    return request.app.state.page_store
