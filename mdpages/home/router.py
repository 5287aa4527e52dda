from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from mdpages.config import Settings, get_settings
from mdpages.pages.urls import page_path

router = APIRouter(tags=["Home"])


@router.get("/", status_code=status.HTTP_302_FOUND)
def home(settings: Settings = Depends(get_settings)) -> RedirectResponse:
    return RedirectResponse(
        url=page_path(settings.HOMEPAGE_ID), status_code=status.HTTP_302_FOUND
    )
