# app/schemas/comment.py
# Схемы комментария.
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import RequestSchema, ResponseSchema
from app.schemas.product import ProductForComment


class CommentCreateRequest(RequestSchema):
    email: EmailStr
    text: str = Field(..., min_length=1)
    product_id: str = Field(..., alias="productId", min_length=1)


class CommentOut(ResponseSchema):
    id: str
    email: str
    text: str
    product_id: str
    created_at: datetime
    updated_at: datetime


class CommentWithProduct(CommentOut):
    product: Optional[ProductForComment] = None
