"""Pydantic şemaları – ürün ve görsel kataloğu istek / yanıt modelleri."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductPayload(BaseModel):
    """Create/update gövdesi. Tip kontrolleri validate_product_payload'da yapılır."""
    model_config = ConfigDict(extra="ignore")

    name: Any = Field(None, description="Ürün adı (boş olamaz)")
    price: Any = Field(None, description="Fiyat (negatif olmayan sayı)")
    description: Any = Field(None, description="Ürün açıklaması (boş olamaz)")
    imageId: Any = Field(None, description="Görsel kataloğundaki image_id (opsiyonel)")


class ProductFields(BaseModel):
    """Doğrulanmış ürün alanları – tam kayıt yazımında kullanılır."""
    name: str
    price: float = Field(..., ge=0)
    description: str
    image_id: Optional[int] = None


class ProductView(BaseModel):
    """Okunan ürün + hesaplanmış image_url."""
    product_id: int
    prod_name: str
    price: float
    description: str
    image_id: Optional[int] = None
    direct_image_url: Optional[str] = None
    image_url: str


class AvailableImage(BaseModel):
    """Seçilebilir görsel."""
    id: int
    name_segment: Optional[str] = None
    preview_path: str
