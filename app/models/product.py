# app/models/product.py
# Модель товара. Изображение хранится на диске, в таблице только имя файла.
from sqlalchemy import Column, Integer, String, Text
from app.db.base import Base, TimestampMixin, uuid_pk

class Product(TimestampMixin, Base):
    __tablename__ = "products"

    id = uuid_pk()
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    # Остаток на складе
    amount = Column(Integer, nullable=False)
    image = Column(String(255), nullable=False)
