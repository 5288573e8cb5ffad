"""
Görsel kataloğu senkronizasyonu – statik görsel dizinindeki *.jpg dosyalarını
image_master tablosuna yazar.

API görsel kataloğunu değiştirmez; katalog bu servisle API dışından doldurulur.
Aynı dosya adı parçası zaten kayıtlıysa yeni kayıt oluşturulmaz.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import ImageMaster
from app.services.image_paths import IMAGE_EXTENSION, PLACEHOLDER_IMAGE_URL

logger = logging.getLogger(__name__)

_PLACEHOLDER_SEGMENT = Path(PLACEHOLDER_IMAGE_URL).stem


def discover_segments(directory: Path) -> list[str]:
    """Dizindeki görsellerin dosya adı parçaları (uzantısız, sıralı). Varsayılan görsel hariç."""
    if not directory.is_dir():
        raise FileNotFoundError(f"Görsel dizini bulunamadı: {directory}")
    return sorted(
        p.stem
        for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() == IMAGE_EXTENSION and p.stem != _PLACEHOLDER_SEGMENT
    )


async def sync_image_catalog(session: AsyncSession, directory: Path) -> dict[str, int]:
    """Eksik görselleri ekler; commit çağırana bırakılır."""
    stats = {"files_found": 0, "images_inserted": 0, "already_present": 0}

    segments = discover_segments(directory)
    stats["files_found"] = len(segments)
    if not segments:
        return stats

    result = await session.execute(select(ImageMaster.name_segment))
    existing = {row for row in result.scalars().all() if row}

    for segment in segments:
        if segment in existing:
            stats["already_present"] += 1
            continue
        session.add(ImageMaster(name_segment=segment))
        stats["images_inserted"] += 1
        logger.debug("Görsel eklendi: %s", segment)

    await session.flush()
    return stats
