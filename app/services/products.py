# app/services/products.py
# CRUD товаров и работа с файлом изображения.
import logging
from typing import List

from fastapi import UploadFile
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.db.base import new_id
from app.models.product import Product
from app.schemas.product import ProductUpdateRequest
from app.services import uploads

logger = logging.getLogger(__name__)


def get_product(db: Session, product_id: str) -> Product | None:
    return db.get(Product, product_id)


def get_product_or_404(db: Session, product_id: str) -> Product:
    product = get_product(db, product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def create_product(
    db: Session,
    title: str,
    description: str,
    amount: int,
    image: UploadFile,
    upload_dir: str,
) -> Product:
    filename = uploads.save_image(image, upload_dir)
    product = Product(id=new_id(), title=title, description=description, amount=amount, image=filename)
    db.add(product)
    try:
        db.commit()
    except Exception:
        db.rollback()
        # Строка не создана, файл больше никому не нужен
        uploads.remove_image(filename, upload_dir)
        raise
    db.refresh(product)
    logger.info(f"Product created: {product.id}")
    return product


def list_products(db: Session) -> List[Product]:
    """Все товары, новые первыми. Пустой каталог: 404 "No products found"."""
    products = db.query(Product).order_by(Product.created_at.desc()).all()
    if not products:
        raise NotFoundError("No products found")
    return products


def update_product(db: Session, product_id: str, payload: ProductUpdateRequest) -> Product:
    """
    Частичное обновление. Пустое/ложное значение (в т.ч. amount=0) заменяется старым,
    т.е. обнулить остаток через этот метод нельзя.
    """
    product = get_product_or_404(db, product_id)
    product.title = payload.title or product.title
    product.description = payload.description or product.description
    product.amount = payload.amount or product.amount
    db.commit()
    db.refresh(product)
    logger.info(f"Product updated: {product.id}")
    return product


def delete_product(db: Session, product_id: str, upload_dir: str) -> None:
    product = get_product_or_404(db, product_id)
    # Удаление файла best effort, строка удаляется в любом случае
    uploads.remove_image(product.image, upload_dir)
    db.delete(product)
    db.commit()
    logger.info(f"Product deleted: {product_id}")
