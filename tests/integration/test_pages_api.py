import pytest
from fastapi.testclient import TestClient

from mdpages.store.memory import InMemoryPageStore


class TestPages:
    def test_create_then_render(self, test_client: TestClient) -> None:
        response = test_client.post("/p", content="# Hello\n\nFirst *page*.")

        assert response.status_code == 201
        data = response.json()
        page_id = data["id"]
        assert response.headers["location"] == f"/p/{page_id}"
        assert data["url"] == f"https://testserver/p/{page_id}"

        page = test_client.get(f"/p/{page_id}")
        assert page.status_code == 200
        assert page.headers["content-type"].startswith("text/html")
        assert page.headers["cache-control"] == "public, max-age=86400"
        assert "<h1>Hello</h1>" in page.text
        assert "<em>page</em>" in page.text

    def test_create_stores_trimmed_body(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        response = test_client.post("/p", content="\n\n  # Trimmed  \n")

        assert response.status_code == 201
        assert page_store.pages[response.json()["id"]] == "# Trimmed"

    def test_create_generates_distinct_ids(self, test_client: TestClient) -> None:
        first = test_client.post("/p", content="one").json()["id"]
        second = test_client.post("/p", content="two").json()["id"]

        assert first != second

    def test_url_uses_forwarded_host(self, test_client: TestClient) -> None:
        response = test_client.post(
            "/p",
            content="# Hello",
            headers={"X-Forwarded-For": "pages.example.com"},
        )

        page_id = response.json()["id"]
        assert response.json()["url"] == f"https://pages.example.com/p/{page_id}"

    @pytest.mark.parametrize("body", ["", " ", "\t\t", "\n\n", " \t\n \r\n"])
    def test_create_rejects_blank_body(
        self, test_client: TestClient, page_store: InMemoryPageStore, body: str
    ) -> None:
        response = test_client.post("/p", content=body)

        assert response.status_code == 400
        assert response.text == "Bad request. Provide markdown text as input."
        assert page_store.pages == {}

    def test_create_rejects_oversize_body(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        response = test_client.post("/p", content="a" * 2048)

        assert response.status_code == 413
        assert page_store.pages == {}

    def test_update_overwrites_content(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_id = test_client.post("/p", content="# Version one").json()["id"]

        response = test_client.put(f"/p/{page_id}", content="# Version two")

        assert response.status_code == 201
        assert response.headers["location"] == f"/p/{page_id}"
        assert response.json() == {
            "id": page_id,
            "url": f"https://testserver/p/{page_id}",
        }
        page = test_client.get(f"/p/{page_id}")
        assert "<h1>Version two</h1>" in page.text
        assert "Version one" not in page.text

    def test_update_creates_missing_page(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        response = test_client.put("/p/chosen-id", content="Brand new")

        assert response.status_code == 201
        assert page_store.pages["chosen-id"] == "Brand new"

    def test_update_rejects_blank_body(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["abc"] = "original"

        response = test_client.put("/p/abc", content="   \n")

        assert response.status_code == 400
        assert response.text == "Bad request. Provide markdown text as input."
        assert page_store.pages["abc"] == "original"

    def test_render_front_matter_title(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["titled"] = "---\ntitle: Hello\n---\nBody text"

        page = test_client.get("/p/titled")

        assert "<title>Hello</title>" in page.text
        assert "<p>Body text</p>" in page.text

    def test_render_without_front_matter(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["plain"] = "Body text"

        page = test_client.get("/p/plain")

        assert "<title>" not in page.text
        assert "<p>Body text</p>" in page.text

    def test_page_id_is_path_remainder(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["team/notes"] = "Nested id"

        page = test_client.get("/p/team/notes")

        assert page.status_code == 200
        assert "<p>Nested id</p>" in page.text

    def test_head_page(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["abc"] = "Body"

        response = test_client.head("/p/abc")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=86400"

    @pytest.mark.parametrize("path", ["/p/unknown", "/p/"])
    def test_missing_page(self, test_client: TestClient, path: str) -> None:
        response = test_client.get(path)

        assert response.status_code == 404
        assert response.text == "Not found"

    @pytest.mark.parametrize("method", ["POST", "DELETE", "PATCH", "OPTIONS"])
    def test_any_method_renders_page(
        self, test_client: TestClient, page_store: InMemoryPageStore, method: str
    ) -> None:
        page_store.pages["abc"] = "# Stored"

        response = test_client.request(method, "/p/abc")

        assert response.status_code == 200
        assert "<h1>Stored</h1>" in response.text
        assert page_store.pages["abc"] == "# Stored"

    @pytest.mark.parametrize("method", ["POST", "DELETE", "PATCH"])
    def test_any_method_missing_page_is_store_not_found(
        self, test_client: TestClient, method: str
    ) -> None:
        response = test_client.request(method, "/p/unknown")

        assert response.status_code == 404
        assert response.text == "Not found"

    def test_percent_encoded_id_reaches_store_decoded(
        self, test_client: TestClient, page_store: InMemoryPageStore
    ) -> None:
        page_store.pages["x?y"] = "Question id"

        response = test_client.get("/p/x%3Fy")

        assert response.status_code == 200
        assert "<p>Question id</p>" in response.text
