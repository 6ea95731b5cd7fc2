"""Order models."""
from typing import List

from pydantic import BaseModel


class OrderLine(BaseModel):
    """Denormalized line item copied from the menu at order time."""

    name: str
    price: float = 0.0
    qty: int = 1


class NewOrder(BaseModel):
    """Validated order, ready to be stored."""

    table: str
    items: List[OrderLine]
    customer_note: str = ""
