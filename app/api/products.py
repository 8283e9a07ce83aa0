# app/api/products.py
# Админские роуты товаров. Доступ только с Bearer-токеном (зависимость на уровне роутера).
from typing import AsyncIterator, Tuple

from fastapi import APIRouter, Depends, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core import security
from app.core.config import Settings, get_settings
from app.schemas.common import success
from app.schemas.product import ProductCreateForm, ProductOut, ProductUpdateRequest
from app.services import products

router = APIRouter(dependencies=[Depends(security.get_current_admin)])

# Форма разбирается вручную, поэтому схему тела для /docs описываем явно
PRODUCT_FORM_SCHEMA = {
    "type": "object",
    "required": ["title", "description", "amount", "image"],
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "amount": {"type": "integer"},
        "image": {"type": "string", "format": "binary"},
    },
}

async def product_create_form(request: Request) -> AsyncIterator[Tuple[ProductCreateForm, UploadFile]]:
    """
    Разбирает multipart-форму создания товара.
    Как и JSON-схемы, отклоняет неизвестные поля и собирает все нарушения сразу.
    """
    form = await request.form()
    try:
        fields = {}
        image = None
        for key, value in form.multi_items():
            if key == "image":
                image = value
            else:
                fields[key] = value

        errors = []
        payload = None
        try:
            payload = ProductCreateForm.model_validate(fields)
        except ValidationError as e:
            errors.extend(e.errors())
        if image is None:
            errors.append({"type": "missing", "loc": ("body", "image"), "msg": "Field required"})
        elif not isinstance(image, StarletteUploadFile):
            errors.append({"type": "file_type", "loc": ("body", "image"), "msg": "must be an uploaded file"})
        if errors:
            raise RequestValidationError(errors)
        yield payload, image
    finally:
        # Временные файлы формы закрываем после обработки запроса
        await form.close()

@router.post(
    "/product/create",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"required": True, "content": {"multipart/form-data": {"schema": PRODUCT_FORM_SCHEMA}}}},
)
def create_product(
    form: Tuple[ProductCreateForm, UploadFile] = Depends(product_create_form),
    db: Session = Depends(security.get_db),
    settings: Settings = Depends(get_settings),
):
    """Создание товара с загрузкой изображения (multipart/form-data: title, description, amount, image)."""
    payload, image = form
    product = products.create_product(
        db, payload.title, payload.description, payload.amount, image, settings.UPLOAD_DIR
    )
    return success(ProductOut.model_validate(product))

@router.get("/products/get/all")
def get_all_products(db: Session = Depends(security.get_db)):
    items = products.list_products(db)
    return success([ProductOut.model_validate(p) for p in items])

@router.put("/product/update/{product_id}")
def update_product(product_id: str, payload: ProductUpdateRequest, db: Session = Depends(security.get_db)):
    product = products.update_product(db, product_id, payload)
    return success(ProductOut.model_validate(product), message="Product updated successfully")

@router.delete("/product/delete/{product_id}")
def delete_product(
    product_id: str,
    db: Session = Depends(security.get_db),
    settings: Settings = Depends(get_settings),
):
    products.delete_product(db, product_id, settings.UPLOAD_DIR)
    return success(message="Product deleted successfully")
