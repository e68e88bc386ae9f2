"""Generator capability shared by all image backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from modules.branding.logo_config import LogoConfig
from modules.branding.style_presets import StylePresetRegistry

FLAT_DESIGN_BRIEF = (
    "Use flat design only: no gradients, shadows, or textures, so the mark scales "
    "across digital and print media. Place the logo centered on a plain white "
    "background. Do not add any text other than the brand name."
)


class LogoGenerator(ABC):
    """Turns a brand configuration into an image reference."""

    @abstractmethod
    async def generate(self, config: LogoConfig) -> str:
        """Return a URL, data URL or file path for the generated image."""


def build_generation_prompt(
    config: LogoConfig, registry: Optional[StylePresetRegistry] = None
) -> str:
    """Compose the detailed instruction sent to image models."""
    registry = registry or StylePresetRegistry()
    preset = registry.get(config.style)
    traits = ", ".join(config.trait_names()) or "balanced"

    parts = [
        f'Design a professional {config.style.value.lower()} logo for a brand named "{config.brand_name.strip()}".',
        f"Style: {preset.positive}." if preset.positive else "",
        f"The brand personality is {traits}.",
        f"Use {config.primary_color} as the primary color.",
        FLAT_DESIGN_BRIEF,
    ]
    return " ".join(part for part in parts if part)
