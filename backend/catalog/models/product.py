from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Numeric, String, Table, Text
from sqlalchemy.orm import relationship

from catalog.db import Base
from catalog.domain.product import ProductStatus
from catalog.models.category import CategoryModel

product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    base_price = Column(Numeric(12, 2), nullable=False, default=0)
    current_price = Column(Numeric(12, 2), nullable=False, default=0)
    stock_quantity = Column(Integer, nullable=False, default=0)
    status = Column(
        Enum(ProductStatus, native_enum=False, length=32),
        nullable=False,
        default=ProductStatus.ACTIVE,
    )
    image_url = Column(String(512), nullable=True)
    weight = Column(Numeric(10, 3), nullable=True)
    dimensions = Column(Numeric(10, 3), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    categories = relationship(
        CategoryModel,
        secondary=product_categories,
        back_populates="products",
        lazy="selectin",
        order_by=CategoryModel.id,
    )

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
