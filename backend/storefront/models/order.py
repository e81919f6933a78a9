"""
Order tables
"""
from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.core.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    customer_id = Column(UUID(as_uuid=False), ForeignKey("customers.id", ondelete="SET NULL"), index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="orders")
    order_products = relationship("OrderProduct", back_populates="order")


class OrderProduct(Base):
    """
    Line items of each order

    `order_id` is nullable and set to NULL when its order is deleted; it is
    added by the add_order_id_to_orders_products migration.
    """
    __tablename__ = "orders_products"

    id = Column(UUID(as_uuid=False), primary_key=True, server_default=func.gen_random_uuid())
    product_id = Column(UUID(as_uuid=False), ForeignKey("products.id", ondelete="SET NULL"), index=True)
    order_id = Column(
        UUID(as_uuid=False),
        ForeignKey("orders.id", ondelete="SET NULL", name="fk_ordersproducts_order"),
        nullable=True,
    )

    # Price captured when the order was placed
    price = Column(DECIMAL(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    order = relationship("Order", back_populates="order_products")
    product = relationship("Product", back_populates="order_products")
