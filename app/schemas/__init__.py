from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.product import (
    AvailableImage,
    ProductFields,
    ProductPayload,
    ProductView,
)

__all__ = [
    "AvailableImage",
    "ErrorResponse",
    "MessageResponse",
    "ProductFields",
    "ProductPayload",
    "ProductView",
]
