"""
Product table
"""
from sqlalchemy import Column, Integer, String, DateTime, DECIMAL, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.core.database import Base


class Product(Base):
    """
    Catalog products; `quantity` is the stock available for sale
    """
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    name = Column(String(255), nullable=False, unique=True, index=True)
    price = Column(DECIMAL(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    order_products = relationship("OrderProduct", back_populates="product")
