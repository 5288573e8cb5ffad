"""
Ortak test fixture'ları.

API, geçici bir SQLite veritabanına (aiosqlite, foreign key açık) bağlanan
session ile çalışır; get_db bağımlılığı override edilir. NullPool sayesinde
her event loop kendi bağlantısını açar (TestClient istek başına, testler
asyncio.run ile ayrı loop kullanır).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event, func, select, text
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.db import Base, get_db
from app.main import app
from app.models import ImageMaster, Product
from services.catalog_client import CatalogClient


def _make_engine(db_path: Path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


@pytest.fixture
def db_engine(tmp_path):
    engine = _make_engine(tmp_path / "catalog.db")

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


def _override_with(factory):
    async def _get_test_db():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db


@pytest.fixture
def api(session_factory):
    """TestClient; lifespan çalıştırılmaz (gerçek veritabanına bağlanılmaz)."""
    _override_with(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_api(tmp_path):
    """Açılamayan bir veritabanına bağlı TestClient (depolama hatası senaryoları)."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}", poolclass=NullPool
    )
    _override_with(async_sessionmaker(bind=engine, expire_on_commit=False))
    yield TestClient(app)
    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


class _UnreachableSession:
    """Sunucusuna bağlanılamayan asyncpg havuzu gibi ham OSError fırlatan session."""

    async def _refuse(self, *args, **kwargs):
        raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 1)")

    execute = get = flush = commit = _refuse

    def add(self, instance):
        pass

    async def rollback(self):
        pass


@pytest.fixture
def unreachable_api():
    """Veritabanı sunucusu kapalıyken çalışan TestClient."""

    async def _get_unreachable_db():
        yield _UnreachableSession()

    app.dependency_overrides[get_db] = _get_unreachable_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def asgi_client(session_factory):
    """Uygulamaya process içinde (ASGITransport) bağlanan CatalogClient üretici."""
    _override_with(session_factory)

    def _factory(base_url: str | None = None) -> CatalogClient:
        return CatalogClient(
            base_url or "http://testserver",
            transport=httpx.ASGITransport(app=app),
        )

    yield _factory
    app.dependency_overrides.clear()


class Seeder:
    """Testlerde doğrudan veritabanına kayıt ekler / sayar."""

    def __init__(self, factory):
        self.factory = factory

    def image(self, name_segment: str | None, image_id: int | None = None) -> int:
        async def _add():
            async with self.factory() as session:
                img = ImageMaster(image_id=image_id, name_segment=name_segment)
                session.add(img)
                await session.commit()
                return img.image_id

        return asyncio.run(_add())

    def product(self, **fields: Any) -> int:
        values = {"prod_name": "Kalem", "price": 5.0, "description": "Mavi tükenmez kalem"}
        values.update(fields)

        async def _add():
            async with self.factory() as session:
                product = Product(**values)
                session.add(product)
                await session.commit()
                return product.product_id

        return asyncio.run(_add())

    def get_product(self, product_id: int) -> Product | None:
        async def _get():
            async with self.factory() as session:
                return await session.get(Product, product_id)

        return asyncio.run(_get())

    def count_products(self) -> int:
        async def _count():
            async with self.factory() as session:
                result = await session.execute(select(func.count()).select_from(Product))
                return result.scalar_one()

        return asyncio.run(_count())

    def execute(self, sql: str) -> None:
        async def _run():
            async with self.factory() as session:
                await session.execute(text(sql))
                await session.commit()

        asyncio.run(_run())


@pytest.fixture
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)
