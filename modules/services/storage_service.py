"""File storage helpers."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from modules.utils.image_utils import load_image

logger = logging.getLogger(__name__)


def export_filename(brand_name: str) -> str:
    """File name offered when exporting a logo, e.g. ``nexus-ai-logo.png``."""
    slug = re.sub(r"\s+", "-", brand_name.strip()).lower()
    return f"{slug or 'brand'}-logo.png"


class StorageService:
    """Handle saving generated and exported logos."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def save_image(self, image: Any, name: str) -> Path:
        """Persist a PIL image as PNG and return the file path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / name
        if path.suffix.lower() != ".png":
            path = path.with_suffix(".png")
        image.save(path, format="PNG")
        return path

    def export(self, image_reference: str, brand_name: str) -> Path:
        """Write the image behind ``image_reference`` as ``<brand>-logo.png``."""
        image = load_image(image_reference)
        path = self.save_image(image, export_filename(brand_name))
        logger.info("Exported logo to %s", path)
        return path
