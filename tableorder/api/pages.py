"""Static page endpoints."""
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from tableorder.api.auth import require_admin
from tableorder.core.config import Settings
from tableorder.core.dependencies import get_settings_from_app
from tableorder.core.errors import NotFound

router = APIRouter()


def _page(settings: Settings, filename: str) -> FileResponse:
    path = Path(settings.static_dir) / filename
    if not path.is_file():
        raise NotFound(f"{filename} not found")
    return FileResponse(path)


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings_from_app)):
    """Serve the customer ordering page."""
    return _page(settings, "index.html")


@router.get("/admin", include_in_schema=False, dependencies=[Depends(require_admin)])
async def admin_page(settings: Settings = Depends(get_settings_from_app)):
    """Serve the admin page."""
    return _page(settings, "admin.html")
