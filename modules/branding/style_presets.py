"""Style preset management."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from modules.branding.logo_config import LogoStyle


@dataclass(slots=True)
class StylePreset:
    """Descriptive prompt fragments for one logo style."""

    style: LogoStyle
    positive: str
    negative: str = ""


DEFAULT_PRESETS = (
    StylePreset(
        style=LogoStyle.MINIMALIST,
        positive="clean lines, generous negative space, a single simple mark",
        negative="clutter, ornament, busy details",
    ),
    StylePreset(
        style=LogoStyle.GEOMETRIC,
        positive="built from circles, squares and triangles on a precise grid",
        negative="organic shapes, hand-drawn lines",
    ),
    StylePreset(
        style=LogoStyle.ABSTRACT,
        positive="non-literal abstract form suggesting motion and ideas",
        negative="literal objects, clip art",
    ),
    StylePreset(
        style=LogoStyle.SYMBOLIC,
        positive="a recognisable icon that symbolises what the brand does",
        negative="abstract blobs, random shapes",
    ),
)


class StylePresetRegistry:
    """In-memory registry of style presets, seeded with the defaults."""

    def __init__(self) -> None:
        self._presets: Dict[LogoStyle, StylePreset] = {}
        for preset in DEFAULT_PRESETS:
            self.add(preset)

    def load_from_file(self, path: Path) -> None:
        """Override presets from a JSON list of ``{style, positive, negative}``."""
        if not path.exists():
            return
        with path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)
        for entry in data:
            self.add(
                StylePreset(
                    style=LogoStyle(entry["style"]),
                    positive=entry.get("positive", ""),
                    negative=entry.get("negative", ""),
                )
            )

    def add(self, preset: StylePreset) -> None:
        self._presets[preset.style] = preset

    def get(self, style: LogoStyle | str) -> StylePreset:
        """Retrieve the preset for ``style``."""
        try:
            return self._presets[LogoStyle(style)]
        except (KeyError, ValueError) as exc:
            raise KeyError(f"Style preset '{style}' not found") from exc
