from typing import AsyncGenerator, Generator
import pytest
from aiohttp import ClientSession
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mdpages.config import Settings
from mdpages.main import create_app
from mdpages.remote.dependencies import get_raw_file_client
from mdpages.store.dependencies import get_page_store
from mdpages.store.memory import InMemoryPageStore
from tests.integration.utils import FakeRawFileClient


@pytest.fixture
async def http_session() -> AsyncGenerator[ClientSession, None]:
    session = ClientSession()
    yield session
    await session.close()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore
        PAGE_STORE_BACKEND="memory",
        STORE_URL="http://store.test",
        HOMEPAGE_ID="welcome",
        MAX_BODY_BYTES=1024,
        OTEL_ENABLED=False,
    )


@pytest.fixture
def page_store() -> InMemoryPageStore:
    return InMemoryPageStore()


@pytest.fixture
def raw_file_client() -> FakeRawFileClient:
    return FakeRawFileClient(
        {
            "acme/widgets/README.md": "# Widgets\n\nA widget library.",
            "acme/widgets/docs/guide.md": "---\ntitle: Guide\n---\n## Getting started",
        }
    )


@pytest.fixture
def test_app(
    test_settings: Settings,
    page_store: InMemoryPageStore,
    raw_file_client: FakeRawFileClient,
) -> FastAPI:
    app = create_app(test_settings)
    app.dependency_overrides[get_page_store] = lambda: page_store
    app.dependency_overrides[get_raw_file_client] = lambda: raw_file_client
    return app


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
