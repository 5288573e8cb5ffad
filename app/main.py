"""
Ürün Kataloğu – FastAPI ana giriş noktası.

Ürün tablosu üzerinde CRUD ve görsel kataloğu listeleme API'si.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import api_router
from app.api.v1.endpoints import health
from app.core.config import settings
from app.core.exceptions import CatalogException
from app.db import create_tables, engine
from app.schemas import ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

# PostgreSQL kimlik doğrulama hataları (invalid_password, invalid_authorization_specification)
_AUTH_SQLSTATES = ("28P01", "28000")


def _connection_hint(exc: BaseException) -> str | None:
    """Bağlantı hatasına göre .env için ipucu üretir."""
    seen: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in seen:
        seen.append(current)
        if getattr(current, "sqlstate", None) in _AUTH_SQLSTATES:
            return "Veritabanı kullanıcı adı ve şifresini (DB_USER, DB_PASSWORD) kontrol edin."
        if isinstance(current, OSError):
            return "Veritabanı host ve portunu (DB_HOST, DB_PORT) kontrol edin."
        current = getattr(current, "orig", None) or current.__cause__
    return None


async def _check_db() -> None:
    """Başlangıçta tek seferlik bağlantı kontrolü; hata loglanır, uygulama durdurulmaz."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Veritabanı bağlantısı hazır.")
        if settings.DB_AUTO_CREATE:
            await create_tables()
            logger.info("Tablolar hazır.")
    except Exception as e:
        logger.error("Veritabanına bağlanılamadı: %s", e)
        hint = _connection_hint(e)
        if hint:
            logger.error("İpucu: %s", hint)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Uygulama başlangıç ve kapanış işlemleri."""
    logger.info("Ürün Kataloğu API başlatılıyor...")
    await _check_db()

    yield

    logger.info("Ürün Kataloğu API kapatılıyor...")
    await engine.dispose()
    logger.info("Veritabanı bağlantıları kapatıldı.")


app = FastAPI(
    title="Ürün Kataloğu API",
    description="Ürün kataloğu bakımı: ürün CRUD işlemleri ve görsel kataloğu.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogException)
async def catalog_exception_handler(request: Request, exc: CatalogException) -> JSONResponse:
    """İş hatalarını {"error", "details"} gövdesine çevirir."""
    body = ErrorResponse(error=exc.message, details=exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bozuk JSON / sayı olmayan path id gibi hatalar 422 yerine 400 döner."""
    body = ErrorResponse(error="Invalid request", details=exc.errors())
    return JSONResponse(status_code=400, content=jsonable_encoder(body, exclude_none=True))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Çerçevenin kendi HTTP hataları (bilinmeyen yol, çözülemeyen gövde) da {"error"} gövdesiyle döner."""
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


# Statik görseller (/images/<segment>.jpg); dosya varlığı API tarafından kontrol edilmez
_images_dir = Path(settings.STATIC_IMAGES_DIR)
if _images_dir.is_dir():
    app.mount("/images", StaticFiles(directory=_images_dir), name="images")
else:
    logger.warning("Statik görsel dizini bulunamadı, /images servis edilmeyecek: %s", _images_dir)

app.include_router(health.router)
app.include_router(api_router, prefix="/api")
