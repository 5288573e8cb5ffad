"""
CatalogClient – Ürün Kataloğu API'si için async HTTP istemcisi.

Önbellek ve yeniden deneme yoktur: her çağrı tek bir HTTP isteğidir,
hata olursa CatalogAPIError ile bir kez çağırana bildirilir.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class CatalogAPIError(Exception):
    """
    API çağrısı başarısız.

    server_message: Sunucunun döndürdüğü "error" alanı (yoksa None)
    status_code: HTTP durum kodu; bağlantı hatasında None
    """

    def __init__(self, server_message: str | None, status_code: int | None = None):
        self.server_message = server_message
        self.status_code = status_code
        super().__init__(server_message or f"API hatası (status={status_code})")


def _error_message(response: httpx.Response) -> str | None:
    """Hata gövdesinden "error" alanını okur."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return None


class CatalogClient:
    """Ürün ve görsel kataloğu uç noktaları."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 15.0,
    ) -> None:
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._transport = transport
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        client = await self._get_client()
        try:
            response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("[CatalogClient] %s %s bağlantı hatası: %s", method, path, e)
            raise CatalogAPIError(None) from e

        if response.is_error:
            message = _error_message(response)
            logger.warning("[CatalogClient] %s %s → %s: %s", method, path, response.status_code, message)
            raise CatalogAPIError(message, response.status_code)
        return response.json()

    # ── Ürünler ──────────────────────────────────────────────────────────────

    async def list_products(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/products")

    async def create_product(self, payload: dict[str, Any]) -> dict[str, Any]:
        """payload: {"name", "price", "description", "imageId"}"""
        return await self._request("POST", "/api/products", json=payload)

    async def update_product(self, product_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/api/products/{product_id}", json=payload)

    async def delete_product(self, product_id: int) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/products/{product_id}")

    # ── Görseller ────────────────────────────────────────────────────────────

    async def list_available_images(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/available-images")

    def absolute_url(self, path: str | None) -> str:
        """Sunucu göreli yolları (/images/...) tam URL'ye çevirir; http ile başlayanlara dokunmaz."""
        if not path:
            return ""
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"
