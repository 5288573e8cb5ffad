from app.services.image_paths import PLACEHOLDER_IMAGE_URL, preview_path, resolve_image_url


def test_direct_url_wins():
    assert resolve_image_url("http://cdn.example.com/a.png", "img-1") == "http://cdn.example.com/a.png"


def test_catalog_segment_used_when_no_direct_url():
    assert resolve_image_url(None, "img-4115P733") == "/images/img-4115P733.jpg"
    assert resolve_image_url("", "img-4115P733") == "/images/img-4115P733.jpg"


def test_placeholder_when_nothing_resolves():
    assert resolve_image_url(None, None) == PLACEHOLDER_IMAGE_URL
    assert resolve_image_url("", "") == "/images/no_image.jpg"


def test_preview_path():
    assert preview_path("lamba") == "/images/lamba.jpg"
