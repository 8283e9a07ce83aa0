# app/schemas/order.py
# Схемы заказа.
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import RequestSchema, ResponseSchema
from app.schemas.product import ProductForOrder


class OrderCreateRequest(RequestSchema):
    full_name: str = Field(..., alias="fullName", min_length=1)
    region: str = Field(..., min_length=1)
    phone_number: str = Field(..., alias="phoneNumber", min_length=1)
    product_id: str = Field(..., alias="productId", min_length=1)


class OrderUpdateRequest(RequestSchema):
    # product_id менять нельзя
    full_name: Optional[str] = Field(None, alias="fullName", min_length=1)
    region: Optional[str] = Field(None, min_length=1)
    phone_number: Optional[str] = Field(None, alias="phoneNumber", min_length=1)


class OrderOut(ResponseSchema):
    id: str
    full_name: str
    region: str
    phone_number: str
    product_id: str
    created_at: datetime
    updated_at: datetime


class OrderWithProduct(OrderOut):
    product: Optional[ProductForOrder] = None
