"""
Ürün gövdesi doğrulama – depolamaya erişmeden önce çalışır.

Gövde gevşek tiplerle (Any) alınır; tip ve varlık kontrolleri burada,
istemciye dönecek mesajlarla birlikte yapılır.
"""

from __future__ import annotations

import math
from typing import Any

from app.core.exceptions import ValidationError
from app.schemas.product import ProductFields, ProductPayload

MISSING_FIELDS_MESSAGE = "Missing required fields: name, price, and description are required."
INVALID_PRICE_MESSAGE = "Price must be a non-negative number."
INVALID_IMAGE_ID_MESSAGE = "Image ID must be a number."


def _is_number(value: Any) -> bool:
    """JSON sayısı mı? bool (True/False) sayı sayılmaz."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_product_payload(payload: ProductPayload) -> ProductFields:
    """Create/update gövdesini doğrular; hatalıysa ValidationError fırlatır."""
    if not _is_filled_text(payload.name) or payload.price is None or not _is_filled_text(payload.description):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if not _is_number(payload.price) or payload.price < 0:
        raise ValidationError(INVALID_PRICE_MESSAGE)

    image_id = payload.imageId
    if image_id is not None:
        if not _is_number(image_id) or int(image_id) != image_id:
            raise ValidationError(INVALID_IMAGE_ID_MESSAGE)
        # 0 "görsel yok" anlamına gelir
        image_id = int(image_id) or None

    return ProductFields(
        name=payload.name,
        price=float(payload.price),
        description=payload.description,
        image_id=image_id,
    )
