"""
Uygulama servisleri – görsel yolu türetme ve gövde doğrulama.
"""

from app.services.image_paths import PLACEHOLDER_IMAGE_URL, preview_path, resolve_image_url
from app.services.validation import validate_product_payload

__all__ = [
    "PLACEHOLDER_IMAGE_URL",
    "preview_path",
    "resolve_image_url",
    "validate_product_payload",
]
