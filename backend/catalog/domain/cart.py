from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from catalog.domain.customer import Customer
from catalog.domain.product import Product


class CartStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CHECKED_OUT = "CHECKED_OUT"
    ABANDONED = "ABANDONED"


@dataclass
class CartItem:
    product: Product
    quantity: int = 1
    unit_price: Decimal = Decimal("0")


@dataclass
class Cart:
    id: Optional[int] = None
    customer: Optional[Customer] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[CartItem] = field(default_factory=list)
    total_price: Decimal = Decimal("0")
    status: CartStatus = CartStatus.ACTIVE

    def recalculate_total(self) -> Decimal:
        total = Decimal("0")
        for it in self.items:
            total += it.quantity * it.unit_price
        self.total_price = total
        return total
