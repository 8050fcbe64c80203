from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from catalog.db import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=True)
    parent_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )  # self-reference; cycles are not prevented

    # post_update lets rows that point at each other be inserted in one flush
    parent = relationship("CategoryModel", remote_side=[id], post_update=True)
    products = relationship(
        "ProductModel", secondary="product_categories", back_populates="categories"
    )

    def __repr__(self):
        return f"<Category id={self.id} name={self.name}>"
