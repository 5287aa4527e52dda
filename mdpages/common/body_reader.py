from fastapi import Request

from mdpages.common.exceptions import PayloadTooLargeException


async def read_body(request: Request, max_bytes: int) -> str:
    """Read the whole request stream and decode it as UTF-8.

    Chunks are accumulated until the stream ends; nothing is processed before
    that. Raises PayloadTooLargeException as soon as the accumulated size goes
    over ``max_bytes``. Errors raised by the stream itself propagate.
    """
    declared_length = request.headers.get("content-length")
    if (
        declared_length
        and declared_length.isdigit()
        and int(declared_length) > max_bytes
    ):
        raise PayloadTooLargeException(max_bytes)

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_bytes:
            raise PayloadTooLargeException(max_bytes)
        chunks.append(chunk)

    return b"".join(chunks).decode("utf-8", errors="replace")
