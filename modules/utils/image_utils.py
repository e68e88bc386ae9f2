"""Utility helpers for image references."""

from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path
from typing import Tuple

import requests
from PIL import Image

DATA_URL_PREFIX = "data:"
PLACEHOLDER_COLOR = (226, 232, 240)


def encode_data_url(data: bytes, mime_type: str = "image/png") -> str:
    """Wrap raw image bytes into a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_data_url(reference: str) -> Tuple[str, bytes]:
    """Return ``(mime_type, bytes)`` for a base64 data URL."""
    if not reference.startswith(DATA_URL_PREFIX) or "," not in reference:
        raise ValueError("Not a data URL")
    header, payload = reference[len(DATA_URL_PREFIX):].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("Only base64 data URLs are supported")
    mime_type = header[: -len(";base64")] or "application/octet-stream"
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def unavailable_placeholder(size: int = 64) -> Image.Image:
    """Neutral tile shown for history entries whose image can no longer be loaded."""
    return Image.new("RGB", (size, size), PLACEHOLDER_COLOR)


def load_image(reference: str, timeout: float = 30.0) -> Image.Image:
    """Open the image behind a data URL, http(s) URL or local path."""
    if reference.startswith(DATA_URL_PREFIX):
        _, data = decode_data_url(reference)
    elif reference.startswith(("http://", "https://")):
        response = requests.get(reference, timeout=timeout)
        response.raise_for_status()
        data = response.content
    else:
        path = Path(reference)
        if not path.exists():
            raise FileNotFoundError(f"Image not found: {reference}")
        data = path.read_bytes()

    image = Image.open(io.BytesIO(data))
    image.load()
    return image
