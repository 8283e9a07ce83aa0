# app/db/session.py
# Инициализация SQLAlchemy engine и фабрики сессий.
# Поддерживает как Postgres, так и SQLite (для тестов/локального использования).
# Engine создаётся лениво по DATABASE_URL из переданных Settings, а не при импорте модуля.

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


@lru_cache
def get_engine(database_url: str) -> Engine:
    """Один engine (и пул соединений) на каждый URL базы."""
    # Для sqlite требуется connect_args; для Postgres — пустой dict
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

    # pool_pre_ping полезен для долгоживущих соединений с Postgres
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True
    )


@lru_cache
def get_session_factory(database_url: str) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(database_url))
