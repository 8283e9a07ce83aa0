# app/schemas/product.py
# Схемы товара.
from datetime import datetime
from typing import Optional

from pydantic import Field, StrictInt

from app.schemas.common import RequestSchema, ResponseSchema


class ProductCreateForm(RequestSchema):
    # Текстовые поля multipart-формы; файл image проверяется отдельно
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    # Из формы приходят строки, поэтому здесь int нестрогий
    amount: int


class ProductUpdateRequest(RequestSchema):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    # StrictInt: JSON true/false не превращаются в 1/0
    amount: Optional[StrictInt] = None


class ProductOut(ResponseSchema):
    id: str
    title: str
    image: str
    description: str
    amount: int
    created_at: datetime
    updated_at: datetime


class ProductForOrder(ResponseSchema):
    id: str
    title: str
    amount: int


class ProductForComment(ResponseSchema):
    id: str
    title: str
    description: str
