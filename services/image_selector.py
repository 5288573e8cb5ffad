"""
ImageSelector – görsel kataloğundan seçim.

Listeyi ilk yüklemede bir kez çeker; seçilen görselin (id, preview_path)
bilgisini çağıran forma döndürür. Kendi form durumu yoktur.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.columns import Columns
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from services.catalog_client import CatalogAPIError, CatalogClient

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load available images."


class ImageSelector:
    """Seçilebilir görsel ızgarası."""

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.images: list[dict[str, Any]] = []
        self.loading = False
        self.error: str | None = None
        self._loaded = False

    async def load(self) -> list[dict[str, Any]]:
        """Görselleri sadece ilk çağrıda çeker."""
        if self._loaded:
            return self.images
        self.loading = True
        try:
            self.images = await self.client.list_available_images()
            self.error = None
        except CatalogAPIError as e:
            logger.warning("[ImageSelector] Görseller yüklenemedi: %s", e)
            self.error = e.server_message or LOAD_ERROR_MESSAGE
            self.images = []
        finally:
            self.loading = False
            self._loaded = True
        return self.images

    def find(self, image_id: int) -> dict[str, Any] | None:
        return next((img for img in self.images if img.get("id") == image_id), None)

    def choose(self, image_id: int) -> tuple[int, str]:
        """Seçilen görselin (id, preview_path) çiftini döndürür."""
        image = self.find(image_id)
        if image is None:
            raise ValueError(f"Görsel bulunamadı: {image_id}")
        return image["id"], image["preview_path"]

    def render(self, selected_id: int | None = None, label: str = "Ürün görseli seçin") -> RenderableType:
        if self.loading:
            return Text("Görseller yükleniyor...")
        if self.error:
            return Text(f"Görseller yüklenemedi: {self.error}", style="red")
        if not self.images:
            return Text("Seçilebilecek görsel yok.", style="yellow")

        cells = []
        for img in self.images:
            selected = img.get("id") == selected_id
            body = Text(f"{img.get('name_segment') or '-'}\n{self.client.absolute_url(img['preview_path'])}")
            cells.append(
                Panel(
                    body,
                    title=f"[{img['id']}]" + (" ✓" if selected else ""),
                    border_style="green" if selected else "dim",
                    expand=False,
                )
            )
        return Panel(Columns(cells), title=label)
