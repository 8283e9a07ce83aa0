# app/services/orders.py
# CRUD заказов.
import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError
from app.db.base import new_id
from app.models.order import Order
from app.schemas.order import OrderCreateRequest, OrderUpdateRequest

logger = logging.getLogger(__name__)


def get_order_or_404(db: Session, order_id: str) -> Order:
    order = db.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order not found")
    return order


def create_order(db: Session, payload: OrderCreateRequest) -> Order:
    # Существование товара не проверяется: заказ на отсутствующий товар допустим
    order = Order(
        id=new_id(),
        full_name=payload.full_name,
        region=payload.region,
        phone_number=payload.phone_number,
        product_id=payload.product_id,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info(f"Order created: {order.id} for product {order.product_id}")
    return order


def list_orders(db: Session) -> List[Order]:
    """Все заказы с товаром (или None, если товара нет), новые первыми."""
    return (
        db.query(Order)
        .options(joinedload(Order.product))
        .order_by(Order.created_at.desc())
        .all()
    )


def update_order(db: Session, order_id: str, payload: OrderUpdateRequest) -> Order:
    order = get_order_or_404(db, order_id)
    order.full_name = payload.full_name or order.full_name
    order.region = payload.region or order.region
    order.phone_number = payload.phone_number or order.phone_number
    db.commit()
    db.refresh(order)
    logger.info(f"Order updated: {order.id}")
    return order


def delete_order(db: Session, order_id: str) -> None:
    order = get_order_or_404(db, order_id)
    db.delete(order)
    db.commit()
    logger.info(f"Order deleted: {order_id}")
