# app/api/auth.py
# Роуты для регистрации админа и получения JWT токена.
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core import security
from app.core.config import Settings, get_settings
from app.schemas.admin import AdminLoginRequest, AdminOut, AdminRegisterRequest
from app.schemas.common import success
from app.services import admins

router = APIRouter()

@router.post("/register/admin", status_code=status.HTTP_201_CREATED)
def register(
    payload: AdminRegisterRequest,
    db: Session = Depends(security.get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Регистрация админа: secretKey + username + password.
    secretKey должен совпадать с ADMIN_SECRET_KEY.
    """
    admin = admins.register_admin(db, payload, settings)
    return success({"admin": AdminOut.model_validate(admin)})

@router.post("/login/admin")
def login(
    payload: AdminLoginRequest,
    db: Session = Depends(security.get_db),
    settings: Settings = Depends(get_settings),
):
    """Логин: возвращает token (JWT на 24 часа) и данные админа."""
    admin = admins.authenticate_admin(db, payload)
    token = security.create_access_token(admin, settings)
    return success({"token": token, "admin": AdminOut.model_validate(admin)})
