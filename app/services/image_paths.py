"""
Görsel yolu türetme – ürünün görüntülenecek image_url değeri.

Değer her okumada yeniden hesaplanır, veritabanına yazılmaz.
"""

from __future__ import annotations

IMAGES_PREFIX = "/images/"
IMAGE_EXTENSION = ".jpg"
PLACEHOLDER_IMAGE_URL = f"{IMAGES_PREFIX}no_image{IMAGE_EXTENSION}"


def preview_path(name_segment: str) -> str:
    """Katalogdaki dosya adı parçasından statik dosya yolunu kurar."""
    return f"{IMAGES_PREFIX}{name_segment}{IMAGE_EXTENSION}"


def resolve_image_url(direct_image_url: str | None, name_segment: str | None) -> str:
    """
    Öncelik: doğrudan URL → katalogdaki görselin yolu → varsayılan görsel.
    Boş string'ler yok sayılır.
    """
    if direct_image_url:
        return direct_image_url
    if name_segment:
        return preview_path(name_segment)
    return PLACEHOLDER_IMAGE_URL
