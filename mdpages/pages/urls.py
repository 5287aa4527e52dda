from starlette.datastructures import Headers


def first_header_value(headers: Headers, name: str) -> str | None:
    value = headers.get(name)
    if not value:
        return None
    first = value.split(",")[0].strip()
    return first or None


def resolve_public_host(headers: Headers) -> str:
    return (
        first_header_value(headers, "x-forwarded-host")
        or first_header_value(headers, "x-forwarded-for")
        or headers.get("host", "localhost")
    )


def page_path(page_id: str) -> str:
    return f"/p/{page_id}"


def page_url(host: str, page_id: str) -> str:
    # Published links are always served over TLS by the fronting proxy
    return f"https://{host}{page_path(page_id)}"
