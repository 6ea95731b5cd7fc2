"""Order API endpoints."""
import logging
from datetime import datetime
from typing import Any, List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError

from tableorder.api.auth import authorize_order_listing, require_admin
from tableorder.core.config import Settings
from tableorder.core.dependencies import get_order_service, get_settings_from_app
from tableorder.core.errors import InternalError
from tableorder.db.models import Order
from tableorder.services.ordering.validator import validate_new_order, validate_status
from tableorder.services.persistence.orders import OrderPersistenceService

router = APIRouter()
logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderLineResponse(CamelModel):
    """Order line item response model."""

    name: str
    price: float
    qty: int


class OrderResponse(CamelModel):
    """Order response model."""

    id: str
    table: str
    items: List[OrderLineResponse] = []
    customer_note: str = ""
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            table=order.table_label,
            items=[OrderLineResponse(**line) for line in order.items or []],
            customer_note=order.customer_note or "",
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class PlaceOrderRequest(CamelModel):
    """Customer order. Fields are coerced leniently by the validator."""

    table: Any = None
    items: Any = None
    customer_note: Any = None


class PlaceOrderResponse(CamelModel):
    ok: bool = True
    order_id: str


class StatusUpdateRequest(BaseModel):
    status: Any = None


class AckResponse(BaseModel):
    ok: bool = True


@router.get(
    "/api/orders",
    response_model=List[OrderResponse],
    dependencies=[Depends(authorize_order_listing)],
)
async def list_orders(
    request: Request,
    settings: Settings = Depends(get_settings_from_app),
    order_service: OrderPersistenceService = Depends(get_order_service),
):
    """List the most recent orders, newest first."""
    logger.info(
        f"[ORDERS] List requested - limit: {settings.orders_list_limit}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        orders = await order_service.list_recent(settings.orders_list_limit)
    except SQLAlchemyError as e:
        logger.error(f"[ORDERS] Error listing orders - {type(e).__name__}: {e}", exc_info=True)
        raise InternalError()

    logger.info(f"[ORDERS] Found {len(orders)} orders")
    return [OrderResponse.from_order(order) for order in orders]


@router.post("/api/orders", response_model=PlaceOrderResponse)
async def place_order(
    payload: PlaceOrderRequest,
    order_service: OrderPersistenceService = Depends(get_order_service),
):
    """Place a new order for a table."""
    new_order = validate_new_order(payload.table, payload.items, payload.customer_note)
    try:
        order = await order_service.create_order(new_order)
    except SQLAlchemyError as e:
        logger.error(
            f"[ORDERS] Error creating order - table: {new_order.table}, "
            f"Error: {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise InternalError()

    logger.info(
        f"[ORDERS] Order {order.id} placed - table: {order.table_label}, "
        f"{len(new_order.items)} lines"
    )
    return PlaceOrderResponse(order_id=order.id)


@router.patch(
    "/api/orders/{order_id}",
    response_model=AckResponse,
    dependencies=[Depends(require_admin)],
)
async def update_order_status(
    order_id: str,
    payload: StatusUpdateRequest,
    order_service: OrderPersistenceService = Depends(get_order_service),
):
    """Set an order's status."""
    status = validate_status(payload.status)
    try:
        await order_service.update_status(order_id, status)
    except SQLAlchemyError as e:
        logger.error(
            f"[ORDERS] Error updating order {order_id} - {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise InternalError()

    logger.info(f"[ORDERS] Order {order_id} set to {status.value}")
    return AckResponse()


@router.delete(
    "/api/orders/{order_id}",
    response_model=AckResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_order(
    order_id: str,
    order_service: OrderPersistenceService = Depends(get_order_service),
):
    """Delete an order permanently."""
    try:
        await order_service.delete_order(order_id)
    except SQLAlchemyError as e:
        logger.error(
            f"[ORDERS] Error deleting order {order_id} - {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise InternalError()

    logger.info(f"[ORDERS] Order {order_id} deleted")
    return AckResponse()
