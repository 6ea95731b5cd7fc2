"""Menu repository."""
import logging
from typing import Any, List, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tableorder.db.models import MenuItem
from tableorder.services.menu.base import MenuItemData, normalize_menu_items

logger = logging.getLogger(__name__)


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_available(self) -> Sequence[MenuItem]:
        """Available items ordered by category, then name."""
        result = await self.db.execute(
            select(MenuItem)
            .where(MenuItem.is_available.is_(True))
            .order_by(MenuItem.category.asc(), MenuItem.name.asc())
        )
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(MenuItem))
        return result.scalar_one()

    async def insert_many(self, items: List[MenuItemData]) -> int:
        """Insert normalized items and commit."""
        self.db.add_all([MenuItem(**item.model_dump()) for item in items])
        await self.db.commit()
        return len(items)

    async def replace_all(self, raw_items: Any) -> int:
        """Replace the whole menu with ``raw_items``.

        The delete and the inserts share one transaction, so other
        connections never observe an empty menu. Returns the number of
        items inserted.
        """
        items = normalize_menu_items(raw_items)
        try:
            await self.db.execute(delete(MenuItem))
            self.db.add_all([MenuItem(**item.model_dump()) for item in items])
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        logger.info(f"Menu replaced with {len(items)} items")
        return len(items)
