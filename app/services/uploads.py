# app/services/uploads.py
# Сохранение и удаление изображений товаров в UPLOAD_DIR.
import logging
import shutil
import time
import uuid
from pathlib import Path

from fastapi import UploadFile

from app.core.errors import BadRequestError

logger = logging.getLogger(__name__)

# Расширение -> допустимые Content-Type. Всё остальное (в т.ч. .html, .svg) отклоняется,
# потому что каталог отдаётся наружу через /uploads.
ALLOWED_IMAGE_TYPES = {
    ".png": {"image/png"},
    ".jpg": {"image/jpeg"},
    ".jpeg": {"image/jpeg"},
    ".gif": {"image/gif"},
    ".webp": {"image/webp"},
}


def image_suffix(original_name: str | None, content_type: str | None) -> str:
    """Расширение из белого списка, согласованное с Content-Type, иначе 400."""
    suffix = Path(original_name or "").suffix.lower()
    if content_type not in ALLOWED_IMAGE_TYPES.get(suffix, ()):
        raise BadRequestError("Only image files are allowed")
    return suffix


def generate_filename(suffix: str) -> str:
    """Серверное имя файла: <epoch-ms>-<hex><ext>; исходное имя клиента не используется."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex}{suffix}"


def save_image(upload: UploadFile, upload_dir: str) -> str:
    """Сохраняет загруженное изображение и возвращает имя файла."""
    suffix = image_suffix(upload.filename, upload.content_type)

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    filename = generate_filename(suffix)
    with open(directory / filename, "wb") as out:
        shutil.copyfileobj(upload.file, out)
    logger.info(f"Saved upload {filename}")
    return filename


def remove_image(filename: str, upload_dir: str) -> bool:
    """Удаляет файл изображения. Ошибка только логируется: строка в БД главнее файла."""
    path = Path(upload_dir) / filename
    try:
        path.unlink()
    except OSError as e:
        logger.error(f"Error deleting file {path}: {e}")
        return False
    return True
