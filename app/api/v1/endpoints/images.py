import logging

from fastapi import APIRouter

from app import crud
from app.api.deps import DbSession
from app.core.exceptions import InternalError
from app.db import STORAGE_ERRORS
from app.schemas import AvailableImage, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Görseller"], responses={500: {"model": ErrorResponse}})


@router.get("/available-images", response_model=list[AvailableImage])
async def list_available_images(db: DbSession) -> list[AvailableImage]:
    """Görsel kataloğu; preview_path statik /images/ altındaki dosyayı gösterir."""
    try:
        return await crud.image.list_available(db)
    except STORAGE_ERRORS as e:
        logger.exception("Görsel kataloğu okunamadı: %s", e)
        raise InternalError("Failed to retrieve available images", details=str(e)) from e
