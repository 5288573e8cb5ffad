"""Görsel kataloğu: /api/available-images ve dizin senkronizasyonu."""

import asyncio

import pytest

from app.services.image_catalog import discover_segments, sync_image_catalog


def test_available_images_ordered_by_id(api, seed):
    seed.image("img-b", image_id=2)
    seed.image("img-a", image_id=1)

    response = api.get("/api/available-images")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "name_segment": "img-a", "preview_path": "/images/img-a.jpg"},
        {"id": 2, "name_segment": "img-b", "preview_path": "/images/img-b.jpg"},
    ]


def test_available_images_storage_failure(broken_api):
    response = broken_api.get("/api/available-images")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to retrieve available images"


def test_health(api):
    assert api.get("/health").json()["status"] == "ok"
    assert api.get("/").status_code == 200


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"\xff\xd8\xff")


def test_discover_segments_skips_placeholder_and_other_files(tmp_path):
    _touch(tmp_path, "img-2.jpg", "img-1.JPG", "no_image.jpg", "notes.txt")

    assert discover_segments(tmp_path) == ["img-1", "img-2"]


def test_discover_segments_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        discover_segments(tmp_path / "yok")


def test_sync_image_catalog_is_idempotent(tmp_path, session_factory, api):
    images_dir = tmp_path / "images"
    images_dir.mkdir()
    _touch(images_dir, "lamba.jpg", "masa.jpg")

    async def _sync():
        async with session_factory() as session:
            stats = await sync_image_catalog(session, images_dir)
            await session.commit()
            return stats

    first = asyncio.run(_sync())
    second = asyncio.run(_sync())

    assert first == {"files_found": 2, "images_inserted": 2, "already_present": 0}
    assert second == {"files_found": 2, "images_inserted": 0, "already_present": 2}
    segments = [img["name_segment"] for img in api.get("/api/available-images").json()]
    assert segments == ["lamba", "masa"]
