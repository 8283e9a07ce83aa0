# app/models/admin.py
# Модель администратора: username (уникальный) и bcrypt-хеш пароля.
from sqlalchemy import Column, String
from app.db.base import Base, TimestampMixin, uuid_pk

class Admin(TimestampMixin, Base):
    __tablename__ = "admins"

    id = uuid_pk()
    username = Column(String(255), unique=True, index=True, nullable=False)
    # Только хеш, открытый пароль никогда не хранится
    password = Column(String(255), nullable=False)
