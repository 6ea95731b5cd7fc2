"""FastAPI dependencies."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tableorder.core.config import Settings
from tableorder.db.database import get_db
from tableorder.services.menu.repository import MenuRepository
from tableorder.services.persistence.orders import OrderPersistenceService


def get_settings_from_app(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_menu_repository(db: AsyncSession = Depends(get_db)) -> MenuRepository:
    """Get menu repository instance."""
    return MenuRepository(db)


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderPersistenceService:
    """Get order persistence service instance."""
    return OrderPersistenceService(db)
