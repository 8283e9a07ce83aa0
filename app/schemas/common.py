# app/schemas/common.py
# Общий конверт ответа {status, data?, message?} и базовые классы схем.
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class RequestSchema(BaseModel):
    """Тело запроса: camelCase-поля, лишние ключи запрещены."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ResponseSchema(BaseModel):
    """Проекция ORM-объекта в ответ."""

    model_config = ConfigDict(from_attributes=True)


def success(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
