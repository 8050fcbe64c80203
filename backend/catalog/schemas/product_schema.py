# backend/catalog/schemas/product_schema.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from catalog.domain.product import Category, Product, ProductStatus

# prices go over the wire as JSON numbers, not strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: Optional[int] = None
    name: str
    description: Optional[str] = None
    parent_id: Optional[int] = None


class ProductIn(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    base_price: Decimal = Field(default=Decimal("0"), ge=0)
    current_price: Decimal = Field(ge=0)
    category_ids: List[int] = Field(default_factory=list)
    stock_quantity: int = Field(default=0, ge=0)
    status: ProductStatus = ProductStatus.ACTIVE
    image_url: Optional[str] = None
    weight: Optional[Decimal] = None
    dimensions: Optional[Decimal] = None

    def to_domain(self) -> Product:
        return Product(
            name=self.name,
            description=self.description,
            base_price=self.base_price,
            current_price=self.current_price,
            categories=[Category(id=cid) for cid in self.category_ids],
            stock_quantity=self.stock_quantity,
            status=self.status,
            image_url=self.image_url,
            weight=self.weight,
            dimensions=self.dimensions,
        )


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    description: Optional[str] = None
    base_price: Money
    current_price: Money
    categories: List[CategoryOut] = []
    stock_quantity: int
    status: ProductStatus
    image_url: Optional[str] = None
    weight: Optional[Money] = None
    dimensions: Optional[Money] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
