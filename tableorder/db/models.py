"""Database models."""
import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Float, JSON, String, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class OrderStatus(str, Enum):
    """Allowed order states. Any state may follow any other."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


def new_id() -> str:
    """Generate an opaque record identifier."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetime on every backend.

    SQLite drops the offset on storage, so values read back are tagged as UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MenuItem(Base):
    """Menu item model."""

    __tablename__ = "menu_items"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    category = Column(String, nullable=False, default="General", index=True)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)


class Order(Base):
    """Order model. Line items are denormalized copies: [{name, price, qty}]."""

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'preparing', 'ready', 'served', 'cancelled')",
            name="ck_orders_status",
        ),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    table_label = Column(String, nullable=False)
    items = Column(JSON, nullable=False)
    customer_note = Column(Text, nullable=False, default="")
    status = Column(String, nullable=False, default=OrderStatus.PENDING.value)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
