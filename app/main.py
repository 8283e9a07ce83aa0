# app/main.py
# Точка входа FastAPI. Создание таблиц выполняется в событии startup с обработкой ошибок.

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.db.session import get_engine
from app.db.base import Base
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.api import auth as auth_router
from app.api import comments as comments_router
from app.api import orders as orders_router
from app.api import products as products_router

# Импорт моделей, чтобы SQLAlchemy видел их определения
import app.models.admin
import app.models.product
import app.models.order
import app.models.comment

settings = get_settings()

# Настройка логирования
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

ADMIN_API_PREFIX = "/admin/api/v1"


def try_create_tables(retries: int = 5, delay: int = 2) -> bool:
    """
    Пытаемся создать таблицы с повторными попытками.
    Если БД недоступна, логируем ошибку и пробуем снова.

    Args:
        retries: Количество попыток подключения
        delay: Задержка между попытками в секундах

    Returns:
        True если таблицы созданы/существуют, False если все попытки исчерпаны
    """
    for attempt in range(1, retries + 1):
        try:
            logger.info(f"Creating tables ({attempt}/{retries})...")
            Base.metadata.create_all(bind=get_engine(settings.DATABASE_URL))
            logger.info("✅ Database tables created (or already exist).")
            return True
        except Exception as e:
            logger.warning(f"❌ Attempt {attempt}/{retries} failed to create tables: {e}")
            if attempt < retries:
                logger.info(f"⏳ Waiting {delay}s before retry...")
                time.sleep(delay)
    logger.error(f"❌ Could not create tables after {retries} retries.")
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Управление жизненным циклом приложения.
    Запускается при старте и завершении приложения.
    """
    # Startup
    logger.info("🚀 Catalog admin API starting up...")
    if not try_create_tables(retries=5, delay=2):
        logger.error("⚠️ Failed to create database tables. Application may not work correctly.")
        if settings.is_production:
            raise RuntimeError("Cannot start application: database tables creation failed")

    yield

    # Shutdown
    logger.info("🛑 Catalog admin API shutting down...")
    get_engine(settings.DATABASE_URL).dispose()
    logger.info("✅ Database connection closed")


def create_app() -> FastAPI:
    application = FastAPI(
        title="Catalog Admin API",
        description=(
            "Admin backend for products, orders and product comments.\n\n"
            "Auth: use the `Authorization: Bearer <token>` header for `/admin/...` routes."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # В продакшене указать конкретные домены через CORS_ORIGINS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router.router, prefix="/auth", tags=["auth"])
    application.include_router(products_router.router, prefix=ADMIN_API_PREFIX, tags=["products"])
    application.include_router(orders_router.router, prefix=ADMIN_API_PREFIX, tags=["orders"])
    application.include_router(comments_router.router, prefix=ADMIN_API_PREFIX, tags=["comments"])

    # Загруженные изображения товаров отдаются как статика
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    @application.get("/", tags=["health"])
    async def root():
        """Базовый health check."""
        return {
            "status": "ok",
            "service": "Catalog Admin API",
            "environment": settings.ENVIRONMENT,
        }

    @application.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy", "version": "1.0.0"}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower()
    )
