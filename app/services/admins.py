# app/services/admins.py
# Регистрация и аутентификация администраторов.
import hmac
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import security
from app.core.config import Settings
from app.core.errors import BadRequestError, ConflictError
from app.db.base import new_id
from app.models.admin import Admin
from app.schemas.admin import AdminLoginRequest, AdminRegisterRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def get_by_username(db: Session, username: str) -> Admin | None:
    return db.query(Admin).filter(Admin.username == username).first()


def register_admin(db: Session, payload: AdminRegisterRequest, settings: Settings) -> Admin:
    """
    Создаёт админа. Сначала проверяется общий секрет операторов, потом уникальность username.
    На неверный секрет отвечаем обезличенным "Bad request".
    """
    if not hmac.compare_digest(payload.secret_key.encode(), settings.ADMIN_SECRET_KEY.encode()):
        logger.warning("Admin registration rejected: wrong secret key")
        raise BadRequestError("Bad request")

    if get_by_username(db, payload.username):
        raise ConflictError("Username already exists")

    admin = Admin(
        id=new_id(),
        username=payload.username,
        password=security.get_password_hash(payload.password),
    )
    db.add(admin)
    try:
        db.commit()
    except IntegrityError:
        # Параллельная регистрация с тем же username
        db.rollback()
        raise ConflictError("Username already exists")
    db.refresh(admin)
    logger.info(f"Admin registered: {admin.username} ({admin.id})")
    return admin


def authenticate_admin(db: Session, payload: AdminLoginRequest) -> Admin:
    """Одинаковый ответ для неизвестного username и неверного пароля."""
    admin = get_by_username(db, payload.username)
    if admin is None or not security.verify_password(payload.password, admin.password):
        logger.info(f"Failed login attempt for username {payload.username!r}")
        raise BadRequestError(INVALID_CREDENTIALS)
    return admin
