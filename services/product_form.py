"""
Ürün ekleme / düzenleme formu.

Form durumu değişmez bir değerdir (ProductFormState); her değişiklik yeni
bir durum üretir. ProductForm durumu doğrular ve tek bir create/update
çağrısıyla gönderir.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Optional

from services.catalog_client import CatalogAPIError, CatalogClient

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


_FALLBACK_SUBMIT_ERRORS = {
    ViewMode.CREATE: "Failed to add product.",
    ViewMode.EDIT: "Failed to update product.",
}


def _parse_price(raw: str) -> float | None:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class ProductFormState:
    """Ham form girdisi + doğrulama sonucu + satır içi gönderim hatası."""

    name: str = ""
    price: str = ""
    description: str = ""
    image_id: Optional[int] = None
    preview_path: str = ""
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    submit_error: Optional[str] = None

    def __post_init__(self) -> None:
        # alan hataları da salt okunur
        if not isinstance(self.errors, MappingProxyType):
            object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @classmethod
    def from_product(cls, product: dict[str, Any]) -> "ProductFormState":
        """Düzenlenecek üründen ön doldurulmuş durum."""
        price = product.get("price")
        return cls(
            name=product.get("prod_name") or "",
            price="" if price is None else str(price),
            description=product.get("description") or "",
            image_id=product.get("image_id") or None,
            preview_path=product.get("image_url") or "",
        )

    def with_changes(self, **changes: Any) -> "ProductFormState":
        return replace(self, **changes)

    def validate(self) -> "ProductFormState":
        """Alan hatalarını hesaplayıp yeni durum döndürür."""
        errors: dict[str, str] = {}
        if not self.name.strip():
            errors["name"] = "Product name is required"
        if not self.price.strip():
            errors["price"] = "Price is required"
        else:
            price = _parse_price(self.price)
            if price is None:
                errors["price"] = "Price must be a number"
            elif price < 0:
                errors["price"] = "Price cannot be negative"
        if not self.description.strip():
            errors["description"] = "Description is required"
        return replace(self, errors=MappingProxyType(errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": _parse_price(self.price),
            "description": self.description,
            "imageId": self.image_id,
        }


class ProductForm:
    """Create ya da edit modunda çalışan form denetleyicisi."""

    def __init__(
        self,
        client: CatalogClient,
        mode: ViewMode = ViewMode.CREATE,
        product: dict[str, Any] | None = None,
        on_saved: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        if mode is ViewMode.EDIT and product is None:
            raise ValueError("Edit modu için düzenlenecek ürün gerekli.")
        self.client = client
        self.mode = mode
        self.product = product
        self.on_saved = on_saved
        self.state = ProductFormState.from_product(product) if product else ProductFormState()

    @property
    def title(self) -> str:
        if self.mode is ViewMode.EDIT:
            return f"Ürünü Düzenle (ID: {self.product['product_id']})"
        return "Yeni Ürün Ekle"

    def set_fields(self, **changes: Any) -> None:
        self.state = self.state.with_changes(**changes)

    def select_image(self, image_id: int | None, preview_path: str | None) -> None:
        """ImageSelector'dan gelen seçimi uygular; None görseli kaldırır."""
        self.state = self.state.with_changes(image_id=image_id, preview_path=preview_path or "")

    async def submit(self) -> bool:
        """Doğrular ve gönderir. Hata olursa alanlar korunur, hata satır içinde gösterilir."""
        self.state = self.state.validate().with_changes(submit_error=None)
        if not self.state.is_valid:
            return False

        payload = self.state.to_payload()
        try:
            if self.mode is ViewMode.EDIT:
                await self.client.update_product(self.product["product_id"], payload)
            else:
                await self.client.create_product(payload)
        except CatalogAPIError as e:
            logger.warning("[ProductForm] %s gönderimi başarısız: %s", self.mode.value, e)
            self.state = self.state.with_changes(
                submit_error=e.server_message or _FALLBACK_SUBMIT_ERRORS[self.mode]
            )
            return False

        if self.mode is ViewMode.CREATE:
            self.state = ProductFormState()
        if self.on_saved is not None:
            await self.on_saved()
        return True
