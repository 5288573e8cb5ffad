"""
Veritabanı bağlantısı – asyncpg / sessionmaker.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings
from app.db.base_class import Base

logger = logging.getLogger(__name__)

# asyncpg bağlantı kurulamazsa (ConnectionRefusedError, socket.gaierror) ham OSError fırlatır;
# SQLAlchemy bunları SQLAlchemyError içine sarmaz.
STORAGE_ERRORS: tuple[type[Exception], ...] = (SQLAlchemyError, OSError)

# ── SQLAlchemy Async Engine ───────────────────────────────────────────────────
# Havuz dolunca yeni istek bekler; kuyruk sınırı yok.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=0,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends ile kullanılacak async DB session generator."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables() -> None:
    """Eksik tabloları oluşturur (mevcut tablolara dokunmaz)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
