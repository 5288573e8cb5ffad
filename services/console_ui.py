"""
Konsol arayüzü – ürün listesi, ekleme / düzenleme formu ve görsel seçici.

Çalıştırma:
    katalog serve      # API sunucusu
    katalog ui         # etkileşimli bakım ekranı
    katalog list       # ürün tablosunu bir kez yazdırır

veya:
    python -m services.console_ui ui
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import click
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from app.core.config import settings
from services.catalog_client import CatalogAPIError, CatalogClient
from services.coordinator import CONFIRM_DELETE_MESSAGE, FETCH_ERROR_MESSAGE, CatalogCoordinator
from services.image_selector import ImageSelector
from services.product_form import ProductForm, ViewMode

logger = logging.getLogger(__name__)

console = Console()

HELP_TEXT = (
    "[bold]f[/bold] formu doldur/gönder · [bold]e <id>[/bold] düzenle · "
    "[bold]s <id>[/bold] sil · [bold]i[/bold] düzenlemeyi iptal · "
    "[bold]y[/bold] yenile · [bold]q[/bold] çıkış"
)


def _make_client(base_url: str | None) -> CatalogClient:
    return CatalogClient(base_url)


def _format_price(price: Any) -> str:
    if isinstance(price, (int, float)) and not isinstance(price, bool):
        return f"${price:.2f}"
    return "N/A"


# ── Görünümler ───────────────────────────────────────────────────────────────

def render_products(
    products: list[dict[str, Any]],
    client: CatalogClient,
    *,
    loading: bool = False,
    error: str | None = None,
) -> RenderableType:
    """Ürün listesi görünümü."""
    if loading:
        return Text("Ürünler yükleniyor...")
    if error:
        return Text(f"Hata: {error}", style="red")
    if not products:
        return Text("Ürün bulunamadı.")

    table = Table(title="Ürün Listesi", show_lines=False)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Ürün")
    table.add_column("Fiyat", justify="right")
    table.add_column("Açıklama")
    table.add_column("Görsel")
    for p in products:
        table.add_row(
            str(p.get("product_id")),
            p.get("prod_name") or "",
            _format_price(p.get("price")),
            p.get("description") or "",
            client.absolute_url(p.get("image_url")),
        )
    return table


def render_form(form: ProductForm) -> RenderableType:
    """Aktif formun anlık durumu: alanlar, alan hataları, önizleme, gönderim hatası."""
    state = form.state
    lines: list[RenderableType] = []
    if state.submit_error:
        lines.append(Text(state.submit_error, style="bold red"))
    for label, key in (("Ürün adı", "name"), ("Fiyat", "price"), ("Açıklama", "description")):
        lines.append(Text(f"{label}: {getattr(state, key) or '-'}"))
        if key in state.errors:
            lines.append(Text(f"  {state.errors[key]}", style="red"))
    if state.preview_path:
        lines.append(Text(f"Önizleme: {form.client.absolute_url(state.preview_path)}", style="green"))
    else:
        lines.append(Text("Önizleme: (görsel seçilmedi)", style="dim"))
    border = "yellow" if form.mode is ViewMode.EDIT else "blue"
    return Panel(Group(*lines), title=form.title, border_style=border)


# ── Etkileşimli döngü ────────────────────────────────────────────────────────

async def fill_form(
    form: ProductForm,
    selector: ImageSelector,
    out: Console,
    prompt: Callable[..., str] = click.prompt,
) -> bool:
    """Alanları sorar, görsel seçtirir ve formu tek çağrıyla gönderir."""
    state = form.state
    name = await asyncio.to_thread(prompt, "Ürün adı", default=state.name, show_default=bool(state.name))
    price = await asyncio.to_thread(prompt, "Fiyat", default=state.price, show_default=bool(state.price))
    description = await asyncio.to_thread(
        prompt, "Açıklama", default=state.description, show_default=bool(state.description)
    )
    form.set_fields(name=name, price=price, description=description)

    await selector.load()
    out.print(selector.render(selected_id=form.state.image_id))
    if selector.images:
        choice = await asyncio.to_thread(
            prompt, "Görsel id (boş: değiştirme, 0: görsel yok)", default="", show_default=False
        )
        choice = choice.strip()
        if choice == "0":
            form.select_image(None, None)
        elif choice:
            try:
                form.select_image(*selector.choose(int(choice)))
            except ValueError:
                out.print(f"[red]Geçersiz görsel id: {choice}[/red]")

    saved = await form.submit()
    out.print(render_form(form))
    if saved:
        out.print("[green]Kaydedildi.[/green]")
    return saved


async def run_interactive(
    client: CatalogClient,
    out: Console = console,
    prompt: Callable[..., str] = click.prompt,
    confirm: Callable[[str], bool] = click.confirm,
) -> None:
    """Bakım ekranı: liste + aktif form, komut satırından yönetilir."""
    coordinator = CatalogCoordinator(client)
    selector = ImageSelector(client)
    await coordinator.refresh()

    while True:
        out.print(render_products(coordinator.products, client, loading=coordinator.loading, error=coordinator.error))
        out.print(render_form(coordinator.form))
        out.print(HELP_TEXT)

        # click.prompt / click.confirm bloklayıcı; event loop dışında, iş parçacığında beklenir
        line = await asyncio.to_thread(prompt, "Komut", default="y", show_default=False)
        command, _, arg = line.strip().partition(" ")
        command = command.lower()

        if command == "q":
            return
        if command == "y":
            await coordinator.refresh()
        elif command == "i":
            coordinator.cancel_edit()
        elif command == "f":
            await fill_form(coordinator.form, selector, out, prompt=prompt)
        elif command in ("e", "s"):
            try:
                product_id = int(arg)
            except ValueError:
                out.print("[red]Ürün id'si gerekli (örn: e 3).[/red]")
                continue
            if command == "s":
                approved = await asyncio.to_thread(confirm, CONFIRM_DELETE_MESSAGE)
                await coordinator.delete(product_id, lambda message: approved)
                continue
            product = coordinator.find(product_id)
            if product is None:
                out.print(f"[red]Listede {product_id} id'li ürün yok.[/red]")
            else:
                coordinator.start_edit(product)
        else:
            out.print(f"[yellow]Bilinmeyen komut: {command}[/yellow]")


async def _run_ui(base_url: str | None) -> None:
    async with _make_client(base_url) as client:
        await run_interactive(client)


async def _fetch_products(base_url: str | None) -> tuple[CatalogClient, list[dict[str, Any]]]:
    async with _make_client(base_url) as client:
        return client, await client.list_products()


# ── CLI ──────────────────────────────────────────────────────────────────────

@click.group(name="katalog", help="Ürün Kataloğu – API sunucusu ve konsol bakım arayüzü")
def main():
    """CLI giriş noktası"""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


@main.command(name="serve", help="API sunucusunu başlatır")
@click.option("--host", default=settings.HOST, show_default=True)
@click.option("--port", default=settings.PORT, show_default=True, type=int)
def serve(host: str, port: int):
    import uvicorn

    console.print(f"[cyan]Sunucu: http://{host}:{port}[/cyan]")
    console.print(f"[cyan]Dokümantasyon: http://{host}:{port}/docs[/cyan]")
    uvicorn.run("app.main:app", host=host, port=port, log_level=settings.LOG_LEVEL.lower())


@main.command(name="ui", help="Etkileşimli ürün bakım ekranı")
@click.option("--base-url", default=None, help="API adresi (varsayılan: API_BASE_URL)")
def ui(base_url: str | None):
    try:
        asyncio.run(_run_ui(base_url))
    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Çıkılıyor...[/yellow]")


@main.command(name="list", help="Ürün listesini bir kez yazdırır")
@click.option("--base-url", default=None, help="API adresi (varsayılan: API_BASE_URL)")
def list_products(base_url: str | None):
    try:
        client, products = asyncio.run(_fetch_products(base_url))
    except CatalogAPIError as e:
        console.print(f"[red]Hata: {e.server_message or FETCH_ERROR_MESSAGE}[/red]")
        raise click.Abort()
    console.print(render_products(products, client))


if __name__ == "__main__":
    main()
