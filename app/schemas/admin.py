# app/schemas/admin.py
# Схемы регистрации и логина администратора.
from pydantic import Field

from app.schemas.common import RequestSchema, ResponseSchema


class AdminRegisterRequest(RequestSchema):
    secret_key: str = Field(..., alias="secretKey", min_length=1)
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminLoginRequest(RequestSchema):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminOut(ResponseSchema):
    # Хеш пароля в ответ не попадает никогда
    id: str
    username: str
