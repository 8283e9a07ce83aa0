# app/models/order.py
# Модель заказа покупателя. product_id задаётся при создании и больше не меняется.
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.db.base import Base, TimestampMixin, uuid_pk

class Order(TimestampMixin, Base):
    __tablename__ = "orders"

    id = uuid_pk()
    full_name = Column(String(255), nullable=False)
    region = Column(String(255), nullable=False)
    phone_number = Column(String(64), nullable=False)
    # Без FK-ограничения в БД: заказ может ссылаться на отсутствующий товар
    product_id = Column(String(36), nullable=False, index=True)

    product = relationship(
        "Product",
        primaryjoin="foreign(Order.product_id) == Product.id",
        viewonly=True,
    )
