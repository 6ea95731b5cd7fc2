"""Menu API endpoints."""
import logging
from datetime import datetime
from typing import Any, List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError

from tableorder.api.auth import require_admin
from tableorder.core.dependencies import get_menu_repository
from tableorder.core.errors import InternalError
from tableorder.db.models import MenuItem
from tableorder.services.menu.repository import MenuRepository

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuItemResponse(BaseModel):
    """Menu item response model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    price: float
    category: str
    is_available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_item(cls, item: MenuItem) -> "MenuItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            category=item.category,
            is_available=item.is_available,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class SeedMenuRequest(BaseModel):
    """Bulk menu replacement. Items are validated by the repository."""

    items: Any = None


class SeedMenuResponse(BaseModel):
    ok: bool = True
    count: int


@router.get("/api/menu", response_model=List[MenuItemResponse])
async def get_menu(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """List available menu items, by category then name."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        items = await menu_repository.list_available()
    except SQLAlchemyError as e:
        logger.error(f"[MENU] Error fetching menu - {type(e).__name__}: {e}", exc_info=True)
        raise InternalError()

    logger.info(f"[MENU] Menu loaded - {len(items)} available items")
    return [MenuItemResponse.from_item(item) for item in items]


@router.post("/api/admin/seed-menu", response_model=SeedMenuResponse)
async def seed_menu(
    payload: SeedMenuRequest,
    admin: str = Depends(require_admin),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Replace the entire menu."""
    try:
        count = await menu_repository.replace_all(payload.items)
    except SQLAlchemyError as e:
        logger.error(f"[MENU] Error replacing menu - {type(e).__name__}: {e}", exc_info=True)
        raise InternalError()

    logger.info(f"[MENU] Menu replaced by {admin} - {count} items")
    return SeedMenuResponse(count=count)
