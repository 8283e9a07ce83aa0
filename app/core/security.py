# app/core/security.py
# Функции для хеширования паролей, работы с JWT и проверки доступа админа.
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.errors import ForbiddenError, NotFoundError, UnauthorizedError, UnexpectedError
from app.db.session import get_session_factory
from app.models.admin import Admin

logger = logging.getLogger(__name__)

# bcrypt с 10 раундами (cost factor 10)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)
# auto_error=False: отсутствие заголовка обрабатываем сами, чтобы вернуть 401 в нашем конверте
bearer_scheme = HTTPBearer(auto_error=False)

def get_password_hash(password: str) -> str:
    """Хешируем пароль для хранения в БД."""
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверяем пароль при логине."""
    return pwd_context.verify(plain_password, hashed_password)

def create_access_token(admin: Admin, settings: Settings, expires_delta: timedelta | None = None) -> str:
    """Создаём JWT токен с полями id и username админа."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "id": admin.id,
        "username": admin.username,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.JWT_ACCESS_TOKEN_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Проверяет подпись и срок действия токена; возвращает payload или бросает 403."""
    try:
        payload = jwt.decode(token, settings.JWT_ACCESS_TOKEN_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        raise ForbiddenError()
    if not payload.get("id"):
        raise ForbiddenError()
    return payload

def get_db(settings: Settings = Depends(get_settings)):
    """Зависимость для получения сессии БД в эндпоинтах."""
    db = get_session_factory(settings.DATABASE_URL)()
    try:
        yield db
    finally:
        db.close()

def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Admin:
    """Возвращает текущего админа по Bearer-токену или прерывает запрос (401/403/404)."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    payload = decode_access_token(credentials.credentials, settings)
    try:
        admin = db.get(Admin, str(payload["id"]))
    except SQLAlchemyError as e:
        # Хранилище недоступно: 500 без подробностей, детали только в лог
        logger.error(f"Admin lookup failed: {e}", exc_info=e)
        raise UnexpectedError()
    if admin is None:
        raise NotFoundError("Not found this admin!")
    return admin
