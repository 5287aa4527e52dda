import asyncio
from enum import Enum
import logging
from typing import Any
from aiohttp import ClientError
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"
EMPTY_CONTENT_MESSAGE = "Bad request. Provide markdown text as input."

# Non-standard status used by proxies for a client that went away mid-request
CLIENT_CLOSED_REQUEST = 499


class ResourceType(str, Enum):
    PAGE = "Page"
    REMOTE_FILE = "Remote file"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: str):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} '{identifier}' not found")


class KnownException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class EmptyContentException(KnownException):
    def __init__(self):
        super().__init__(EMPTY_CONTENT_MESSAGE)


class PayloadTooLargeException(Exception):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Request body exceeds the limit of {limit} bytes")


class PageStoreException(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ClientDisconnectedException(Exception):
    pass


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.warning(exc)
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return PlainTextResponse(
            NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND
        )
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def known_exception_handler(request: Request, exc: KnownException):
    logger.error(exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


def payload_too_large_handler(request: Request, exc: PayloadTooLargeException):
    logger.error(exc)
    return PlainTextResponse(
        "Payload too large", status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    )


def page_store_exception_handler(request: Request, exc: PageStoreException):
    logger.error(f"Page store request failed: {exc}")
    return PlainTextResponse("Bad gateway", status_code=status.HTTP_502_BAD_GATEWAY)


def upstream_connection_exception_handler(request: Request, exc: ClientError):
    logger.error(f"Failed to reach upstream service: {exc!r}")
    return PlainTextResponse("Bad gateway", status_code=status.HTTP_502_BAD_GATEWAY)


def upstream_timeout_handler(request: Request, exc: asyncio.TimeoutError):
    logger.error(f"Upstream request timed out for {request.url.path}")
    return PlainTextResponse(
        "Gateway timeout", status_code=status.HTTP_504_GATEWAY_TIMEOUT
    )


def client_disconnected_handler(request: Request, exc: Exception):
    logger.info(f"Client disconnected during {request.method} {request.url.path}")
    return PlainTextResponse("", status_code=CLIENT_CLOSED_REQUEST)


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error during {request.method} {request.url.path}", exc_info=exc
    )
    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(resource_type: ResourceType) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {"text/plain": {"example": NOT_FOUND_MESSAGE}},
        }
    }


empty_content_response: ResponseDict = {
    400: {
        "description": "Empty or whitespace-only body",
        "content": {"text/plain": {"example": EMPTY_CONTENT_MESSAGE}},
    }
}

payload_too_large_response: ResponseDict = {
    413: {
        "description": "Request body too large",
        "content": {"text/plain": {"example": "Payload too large"}},
    }
}

bad_gateway_response: ResponseDict = {
    502: {
        "description": "Upstream service failed",
        "content": {"text/plain": {"example": "Bad gateway"}},
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"text/plain": {"example": "An unexpected error occurred"}},
    }
}
