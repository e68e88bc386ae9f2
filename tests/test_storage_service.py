"""Storage and image reference helper tests."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from modules.services import storage_service
from modules.services.storage_service import StorageService, export_filename
from modules.utils import image_utils
from modules.utils.image_utils import decode_data_url, encode_data_url, load_image


def _png_bytes(color: str = "blue") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.mark.parametrize(
    ("brand", "expected"),
    [
        ("Nexus AI", "nexus-ai-logo.png"),
        ("  Big   Data\tCo ", "big-data-co-logo.png"),
        ("   ", "brand-logo.png"),
    ],
)
def test_export_filename(brand, expected):
    assert export_filename(brand) == expected


def test_decode_data_url_rejects_plain_text():
    with pytest.raises(ValueError):
        decode_data_url("img://abc")
    with pytest.raises(ValueError):
        decode_data_url("data:image/png,rawpayload")


def test_load_image_from_data_url():
    image = load_image(encode_data_url(_png_bytes()))

    assert image.size == (4, 4)


def test_load_image_from_path(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(_png_bytes())

    assert load_image(str(path)).size == (4, 4)


def test_load_image_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(str(tmp_path / "missing.png"))


def test_load_image_from_url(monkeypatch):
    class DummyResponse:
        content = _png_bytes()

        def raise_for_status(self) -> None:
            return None

    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return DummyResponse()

    monkeypatch.setattr(image_utils.requests, "get", fake_get)

    image = load_image("https://cdn.example.com/logo.png")

    assert image.size == (4, 4)
    assert calls == [("https://cdn.example.com/logo.png", 30.0)]


def test_export_writes_brand_named_png(tmp_path):
    service = StorageService(tmp_path / "exports")

    path = service.export(encode_data_url(_png_bytes("red")), "Nexus AI")

    assert path == tmp_path / "exports" / "nexus-ai-logo.png"
    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.getpixel((0, 0)) == (255, 0, 0)


def test_save_image_forces_png_suffix(tmp_path):
    service = StorageService(tmp_path)

    path = service.save_image(Image.new("RGB", (2, 2)), "draft.jpg")

    assert path.name == "draft.png"
    assert path.exists()


def test_export_propagates_load_errors(tmp_path, monkeypatch):
    def broken(reference):
        raise OSError("unreadable")

    monkeypatch.setattr(storage_service, "load_image", broken)

    with pytest.raises(OSError):
        StorageService(tmp_path).export("img://abc", "Nexus AI")
