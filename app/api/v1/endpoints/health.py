from fastapi import APIRouter

SERVICE_NAME = "Ürün Kataloğu API"

router = APIRouter(tags=["Sistem"])


@router.get("/")
async def root() -> dict[str, str]:
    """Sunucunun ayakta olduğunu gösterir."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Sağlık kontrolü."""
    return {"status": "ok", "service": SERVICE_NAME}
