from fastapi.responses import HTMLResponse


def cached_html_response(content: str, max_age: int) -> HTMLResponse:
    return HTMLResponse(
        content=content,
        headers={"Cache-Control": f"public, max-age={max_age}"},
    )
