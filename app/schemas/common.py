"""Pydantic şemaları – ortak yanıt modelleri."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Hata gövdesi; details sadece tanı bilgisi varsa döner."""
    error: str = Field(..., description="İstemciye gösterilecek hata mesajı")
    details: Optional[Any] = Field(None, description="Sürücü mesajı veya doğrulama detayları")


class MessageResponse(BaseModel):
    """Gövdesi sadece mesaj olan başarılı yanıt."""
    message: str
