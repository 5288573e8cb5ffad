"""
Uygulama ayarları – Pydantic Settings ile env yönetimi.
"""

import os
from typing import Optional
from urllib.parse import quote_plus, urlparse, urlunparse

from pydantic import ConfigDict, model_validator
from pydantic_settings import BaseSettings


def _is_running_in_docker() -> bool:
    """
    Docker konteyneri içinde çalışıp çalışmadığını tespit eder.
    RUNNING_IN_DOCKER env ile manuel override mümkündür (1=docker, 0=yerel).
    """
    override = os.environ.get("RUNNING_IN_DOCKER", "").strip()
    if override == "1":
        return True
    if override == "0":
        return False
    return os.path.exists("/.dockerenv")


_DOCKER_HOSTS = ("postgres", "db")


def _resolve_url_for_local(url: str) -> str:
    """Yerelde çalışırken compose servis host'larını (postgres, db) localhost yapar."""
    if _is_running_in_docker():
        return url
    parsed = urlparse(url)
    netloc = parsed.netloc
    if "@" in netloc:
        auth, hostport = netloc.rsplit("@", 1)
        host, sep, port = hostport.partition(":")
        new_host = "localhost" if host in _DOCKER_HOSTS else host
        new_netloc = f"{auth}@{new_host}{sep}{port}"
    else:
        host, sep, port = netloc.partition(":")
        new_host = "localhost" if host in _DOCKER_HOSTS else host
        new_netloc = f"{new_host}{sep}{port}" if port else new_host
    return urlunparse((
        parsed.scheme,
        new_netloc,
        parsed.path or "",
        parsed.params or "",
        parsed.query or "",
        parsed.fragment or "",
    ))


class Settings(BaseSettings):
    """Ortam değişkenleri ile yüklenen uygulama ayarları."""

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Veritabanı (DATABASE_URL verilmezse bu parçalardan kurulur)
    DB_HOST: str = "postgres"
    DB_PORT: int = 5432
    DB_USER: str = "user"
    DB_PASSWORD: str = "password"
    DB_DATABASE: str = "catalog"
    DATABASE_URL: Optional[str] = None
    DB_POOL_SIZE: int = 10
    DB_AUTO_CREATE: bool = True

    # Sunucu
    HOST: str = "0.0.0.0"
    PORT: int = 3002
    STATIC_IMAGES_DIR: str = "public/images"
    LOG_LEVEL: str = "INFO"

    # Konsol istemcisi
    API_BASE_URL: str = "http://localhost:3002"

    @model_validator(mode="after")
    def build_database_url(self) -> "Settings":
        """DATABASE_URL yoksa DB_* parçalarından kurar; yerelde host'u localhost yapar."""
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}"
            )
        if not _is_running_in_docker():
            self.DATABASE_URL = _resolve_url_for_local(self.DATABASE_URL)
        return self


settings = Settings()
