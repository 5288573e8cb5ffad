"""
CatalogCoordinator – istemci tarafındaki tek doğruluk noktası.

Ürün listesini, yükleme bayrağını, son hata mesajını ve aktif form modunu
(create / edit) tutar. Her başarılı değişiklikten sonra listeyi sunucudan
tekrar çeker ve create moduna döner; iyimser güncelleme yapılmaz.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from services.catalog_client import CatalogAPIError, CatalogClient
from services.product_form import ProductForm, ViewMode

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch products. Please ensure backend is running and reachable."
CONFIRM_DELETE_MESSAGE = "Are you sure you want to delete this product?"


class CatalogCoordinator:
    """Liste + tek aktif form."""

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.products: list[dict[str, Any]] = []
        self.loading = False
        self.error: str | None = None
        self.mode = ViewMode.CREATE
        self.product_to_edit: dict[str, Any] | None = None
        self.form = self._new_form()

    def _new_form(self) -> ProductForm:
        return ProductForm(
            self.client,
            mode=self.mode,
            product=self.product_to_edit,
            on_saved=self.handle_saved,
        )

    def find(self, product_id: int) -> dict[str, Any] | None:
        return next((p for p in self.products if p.get("product_id") == product_id), None)

    async def refresh(self) -> None:
        """Ürün listesini sunucudan çeker."""
        self.loading = True
        try:
            self.products = await self.client.list_products()
            self.error = None
        except CatalogAPIError as e:
            logger.warning("[Coordinator] Ürün listesi alınamadı: %s", e)
            self.error = e.server_message or FETCH_ERROR_MESSAGE
            self.products = []
        finally:
            self.loading = False

    def start_edit(self, product: dict[str, Any]) -> None:
        self.product_to_edit = product
        self.mode = ViewMode.EDIT
        self.form = self._new_form()

    def cancel_edit(self) -> None:
        self.product_to_edit = None
        self.mode = ViewMode.CREATE
        self.form = self._new_form()

    async def handle_saved(self) -> None:
        """Form başarıyla gönderildi: listeyi yenile, create moduna dön."""
        await self.refresh()
        if self.mode is ViewMode.EDIT:
            self.cancel_edit()

    async def delete(self, product_id: int, confirm: Callable[[str], bool]) -> bool:
        """Kullanıcı onaylarsa ürünü siler ve listeyi yeniler. Başarılı silmeden sonra create moduna dönülür."""
        if not confirm(CONFIRM_DELETE_MESSAGE):
            return False
        try:
            await self.client.delete_product(product_id)
        except CatalogAPIError as e:
            logger.warning("[Coordinator] Ürün %s silinemedi: %s", product_id, e)
            self.error = e.server_message or f"Failed to delete product {product_id}."
            return False
        await self.refresh()
        if self.mode is ViewMode.EDIT:
            self.cancel_edit()
        return True
