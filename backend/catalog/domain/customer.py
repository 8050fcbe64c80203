from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from catalog.domain.order import Order


class MembershipTier(str, Enum):
    STANDARD = "STANDARD"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"


@dataclass
class Address:
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None


@dataclass
class Customer:
    id: Optional[int] = None
    name: str = ""
    email: str = ""
    password: Optional[str] = field(default=None, repr=False)
    address: Optional[Address] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None
    membership_tier: MembershipTier = MembershipTier.STANDARD
    order_history: List["Order"] = field(default_factory=list, repr=False)
    enabled: bool = True
