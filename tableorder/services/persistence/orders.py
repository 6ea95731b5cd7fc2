"""Order persistence service."""
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tableorder.core.errors import NotFound
from tableorder.db.models import Order, OrderStatus, utcnow
from tableorder.services.ordering.models import NewOrder


class OrderPersistenceService:
    """Service for persisting order data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_order(self, new_order: NewOrder) -> Order:
        """Create a new pending order."""
        order = Order(
            table_label=new_order.table,
            items=[line.model_dump() for line in new_order.items],
            customer_note=new_order.customer_note,
            status=OrderStatus.PENDING.value,
        )
        self.db.add(order)
        await self.db.commit()
        await self.db.refresh(order)
        return order

    async def get_order_by_id(self, order_id: str) -> Optional[Order]:
        result = await self.db.execute(select(Order).where(Order.id == order_id))
        return result.scalar_one_or_none()

    async def list_recent(self, limit: int) -> Sequence[Order]:
        """Most recent orders first, at most ``limit`` of them."""
        result = await self.db.execute(
            select(Order).order_by(Order.created_at.desc()).limit(limit)
        )
        return result.scalars().all()

    async def update_status(self, order_id: str, status: OrderStatus) -> Order:
        """Set an order's status regardless of its current one."""
        order = await self.get_order_by_id(order_id)
        if order is None:
            raise NotFound("order not found")
        order.status = status.value
        order.updated_at = utcnow()
        await self.db.commit()
        await self.db.refresh(order)
        return order

    async def delete_order(self, order_id: str) -> None:
        order = await self.get_order_by_id(order_id)
        if order is None:
            raise NotFound("order not found")
        await self.db.delete(order)
        await self.db.commit()
