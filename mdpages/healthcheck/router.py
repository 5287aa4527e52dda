from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mdpages.config import Settings, get_settings

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {"backend": "http"},
                    }
                }
            },
        },
    },
)
def healthcheck(settings: Settings = Depends(get_settings)) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "store": {"backend": settings.PAGE_STORE_BACKEND},
    }
    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
