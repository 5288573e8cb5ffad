"""
Statik görsel dizini → image_master senkronizasyonunu tetikler.

Kullanım (proje kökünden):
  PYTHONPATH=. python scripts/seed_images.py [görsel_dizini]

Dizin verilmezse STATIC_IMAGES_DIR kullanılır.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from app.core.config import settings
from app.db import create_tables
from app.db.session import async_session, engine
from app.services.image_catalog import sync_image_catalog

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


async def main(directory: Path) -> None:
    logger.info("Görsel kataloğu senkronizasyonu başlatılıyor: %s", directory)
    if settings.DB_AUTO_CREATE:
        await create_tables()

    async with async_session() as session:
        try:
            stats = await sync_image_catalog(session, directory)
            await session.commit()
            logger.info(
                "Senkronizasyon tamamlandı: files_found=%s, images_inserted=%s, already_present=%s",
                stats.get("files_found", 0),
                stats.get("images_inserted", 0),
                stats.get("already_present", 0),
            )
        except Exception as e:
            await session.rollback()
            logger.exception("Senkronizasyon hatası: %s", e)
            sys.exit(1)
        finally:
            await engine.dispose()


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(settings.STATIC_IMAGES_DIR)
    asyncio.run(main(target))
