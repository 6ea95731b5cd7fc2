"""Order validation service."""
from typing import Any, List, Optional

from tableorder.core.errors import ValidationError
from tableorder.db.models import OrderStatus
from tableorder.services.coercion import coerce_price, coerce_quantity, coerce_text
from tableorder.services.ordering.models import NewOrder, OrderLine


def normalize_order_line(raw: Any) -> Optional[OrderLine]:
    """
    Normalize one client line item.

    Returns:
        The cleaned line, or None when it has no name or a quantity
        below one.
    """
    if not isinstance(raw, dict):
        return None
    line = OrderLine(
        name=coerce_text(raw.get("name")),
        price=coerce_price(raw.get("price")),
        qty=coerce_quantity(raw.get("qty", raw.get("quantity"))),
    )
    if not line.name or line.qty <= 0:
        return None
    return line


def normalize_order_lines(raw_items: Any) -> List[OrderLine]:
    lines = [normalize_order_line(raw) for raw in raw_items]
    return [line for line in lines if line is not None]


def validate_new_order(table: Any, items: Any, customer_note: Any = None) -> NewOrder:
    """
    Validate a customer order.

    Raises:
        ValidationError: table missing, items not a non-empty list, or no
            line item survives normalization.
    """
    table_label = coerce_text(table)
    if not table_label or not isinstance(items, list) or not items:
        raise ValidationError("table and items required")

    lines = normalize_order_lines(items)
    if not lines:
        raise ValidationError("invalid items")

    return NewOrder(
        table=table_label,
        items=lines,
        customer_note=coerce_text(customer_note),
    )


def validate_status(status: Any) -> OrderStatus:
    """Return the matching OrderStatus or raise ValidationError."""
    if status not in OrderStatus.values():
        raise ValidationError("invalid status")
    return OrderStatus(status)
