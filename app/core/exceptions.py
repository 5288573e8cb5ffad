"""
Uygulama hataları – HTTP durum koduyla eşlenen iş hataları.

Tüm hatalar CatalogException'dan türer; app.main içindeki global handler
bunları {"error": ..., "details": ...} gövdesine çevirir.
"""

from typing import Any


class CatalogException(Exception):
    """Tüm katalog iş hatalarının base sınıfı.

    Attributes:
        message: İstemciye dönen açıklama
        status_code: HTTP durum kodu
        details: Tanı için ek bilgi (sürücü mesajı, doğrulama detayları)
    """

    status_code: int = 500

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(CatalogException):
    """Eksik ya da hatalı alan (depolamaya gitmeden yakalanır)."""

    status_code = 400


class NotFoundError(CatalogException):
    """Hedef kayıt yok."""

    status_code = 404


class ReferenceConflictError(CatalogException):
    """Silme, başka bir tablodaki yabancı anahtar referansı yüzünden engellendi."""

    status_code = 400


class InternalError(CatalogException):
    """Sınıflandırılmamış depolama / iç hata."""

    status_code = 500
