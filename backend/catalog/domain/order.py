from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from catalog.domain.customer import Address, Customer
from catalog.domain.product import Product


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    BANK_TRANSFER = "BANK_TRANSFER"
    CASH_ON_DELIVERY = "CASH_ON_DELIVERY"


@dataclass
class OrderItem:
    product: Product
    quantity: int = 1
    # price snapshot; later catalog price changes do not touch placed orders
    price_at_purchase: Decimal = Decimal("0")


@dataclass
class Order:
    id: Optional[int] = None
    customer: Optional[Customer] = None
    order_date: Optional[datetime] = None
    status: OrderStatus = OrderStatus.PENDING
    shipping_address: Optional[Address] = None
    billing_address: Optional[Address] = None
    payment_method: Optional[PaymentMethod] = None
    items: List[OrderItem] = field(default_factory=list)
    subtotal: Decimal = Decimal("0")
    shipping_cost: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    discount_amount: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")
    tracking_information: Optional[str] = None
