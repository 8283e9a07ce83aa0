# app/api/orders.py
# Админские роуты заказов.
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core import security
from app.schemas.common import success
from app.schemas.order import OrderCreateRequest, OrderOut, OrderUpdateRequest, OrderWithProduct
from app.services import orders

router = APIRouter(dependencies=[Depends(security.get_current_admin)])

@router.post("/order/create", status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreateRequest, db: Session = Depends(security.get_db)):
    order = orders.create_order(db, payload)
    return success(OrderOut.model_validate(order))

@router.get("/orders/get/all")
def get_all_orders(db: Session = Depends(security.get_db)):
    """Заказы с краткой информацией о товаре (id, title, amount)."""
    return success([OrderWithProduct.model_validate(o) for o in orders.list_orders(db)])

@router.put("/order/update/{order_id}")
def update_order(order_id: str, payload: OrderUpdateRequest, db: Session = Depends(security.get_db)):
    order = orders.update_order(db, order_id, payload)
    return success(OrderOut.model_validate(order), message="Order updated successfully")

@router.delete("/order/delete/{order_id}")
def delete_order(order_id: str, db: Session = Depends(security.get_db)):
    orders.delete_order(db, order_id)
    return success(message="Order deleted successfully")
