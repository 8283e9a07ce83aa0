# app/models/comment.py
# Модель комментария к товару: только создание и чтение.
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from app.db.base import Base, TimestampMixin, uuid_pk

class Comment(TimestampMixin, Base):
    __tablename__ = "comments"

    id = uuid_pk()
    email = Column(String(255), nullable=False)
    text = Column(Text, nullable=False)
    product_id = Column(String(36), nullable=False, index=True)

    product = relationship(
        "Product",
        primaryjoin="foreign(Comment.product_id) == Product.id",
        viewonly=True,
    )
