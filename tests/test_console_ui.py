"""Konsol arayüzü: click komutları ve etkileşimli döngü."""

import asyncio
import io
import threading

import httpx
from click.testing import CliRunner
from rich.console import Console

from services import console_ui
from services.catalog_client import CatalogClient


def _scripted(answers):
    """click.prompt yerine sıradaki cevabı döndüren fonksiyon."""
    remaining = list(answers)

    def prompt(text, default=None, **kwargs):
        value = remaining.pop(0)
        return default if value is None else value

    return prompt


def test_list_command_prints_products(asgi_client, seed, monkeypatch):
    seed.product(prod_name="Cetvel", price=7.25)
    monkeypatch.setattr(console_ui, "_make_client", asgi_client)

    result = CliRunner().invoke(console_ui.main, ["list"])

    assert result.exit_code == 0, result.output
    assert "Cetvel" in result.output
    assert "$7.25" in result.output


def test_list_command_reports_server_error(monkeypatch):
    def failing(base_url):
        return CatalogClient(
            "http://testserver",
            transport=httpx.MockTransport(lambda r: httpx.Response(500, json={"error": "Failed to retrieve products"})),
        )

    monkeypatch.setattr(console_ui, "_make_client", failing)

    result = CliRunner().invoke(console_ui.main, ["list"])

    assert result.exit_code == 1
    assert "Failed to retrieve products" in result.output


def test_interactive_create_edit_delete(asgi_client, seed):
    image_id = seed.image("kalemlik")
    out = Console(file=io.StringIO(), width=200)
    prompt = _scripted([
        "f", "Kalemlik", "35", "Metal kalemlik", str(image_id),
        "e 1",
        "f", "Büyük kalemlik", None, None, "",
        "s 1",
        "q",
    ])
    confirmations = []

    def confirm(message):
        confirmations.append(message)
        return True

    async def scenario():
        async with asgi_client() as client:
            await console_ui.run_interactive(client, out=out, prompt=prompt, confirm=confirm)

    asyncio.run(scenario())

    output = out.file.getvalue()
    assert "Kaydedildi." in output
    assert "Ürünü Düzenle (ID: 1)" in output
    assert "Büyük kalemlik" in output
    assert confirmations == ["Are you sure you want to delete this product?"]
    assert seed.count_products() == 0


def test_interactive_shows_validation_errors(asgi_client):
    out = Console(file=io.StringIO(), width=200)
    prompt = _scripted(["f", "", "-3", "Açıklama", "q"])

    async def scenario():
        async with asgi_client() as client:
            await console_ui.run_interactive(client, out=out, prompt=prompt)

    asyncio.run(scenario())

    output = out.file.getvalue()
    assert "Product name is required" in output
    assert "Price cannot be negative" in output


def test_render_products_states():
    client = CatalogClient("http://localhost:3002")
    out = Console(file=io.StringIO(), width=200)

    out.print(console_ui.render_products([], client, loading=True))
    out.print(console_ui.render_products([], client, error="Failed to retrieve products"))
    out.print(console_ui.render_products([], client))

    output = out.file.getvalue()
    assert "Ürünler yükleniyor..." in output
    assert "Hata: Failed to retrieve products" in output
    assert "Ürün bulunamadı." in output


def test_interactive_prompts_do_not_block_event_loop(asgi_client):
    threads = []

    def prompt(text, default=None, **kwargs):
        threads.append(threading.current_thread())
        return "q"

    async def scenario():
        async with asgi_client() as client:
            await console_ui.run_interactive(client, out=Console(file=io.StringIO()), prompt=prompt)

    asyncio.run(scenario())

    assert len(threads) == 1
    assert threads[0] is not threading.main_thread()
