from aiohttp import ClientSession, ClientTimeout
from fastapi import Request


def create_http_session(*, user_agent: str, timeout_seconds: float) -> ClientSession:
    return ClientSession(
        headers={"User-Agent": user_agent},
        timeout=ClientTimeout(total=timeout_seconds),
    )


def get_http_session(request: Request) -> ClientSession:
    return request.app.state.http_session
