from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models import ImageMaster
from app.schemas import AvailableImage
from app.services.image_paths import resolve_image_url


class CRUDImage(CRUDBase[ImageMaster]):
    """Görsel kataloğu (salt okunur)."""

    async def list_available(self, db: AsyncSession) -> list[AvailableImage]:
        images = await self.get_all(db)
        return [
            AvailableImage(
                id=img.image_id,
                name_segment=img.name_segment,
                preview_path=resolve_image_url(None, img.name_segment),
            )
            for img in images
        ]


image = CRUDImage(ImageMaster)
