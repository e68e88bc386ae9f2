"""Pick the generator backend described by the configuration."""

from __future__ import annotations

import logging
from typing import Optional

from config.settings import AppConfig
from modules.branding.style_presets import StylePresetRegistry
from modules.generators.base import LogoGenerator

logger = logging.getLogger(__name__)


def resolve_backend(config: AppConfig) -> str:
    """Return the concrete backend name, resolving ``auto`` by available keys."""
    backend = (config.generator_backend or "auto").lower()
    if backend != "auto":
        return backend
    if config.gemini_key:
        return "gemini"
    if config.openai_key:
        return "openai"
    return "local"


def build_generator(
    config: AppConfig, registry: Optional[StylePresetRegistry] = None
) -> LogoGenerator:
    """Construct the generator backend; SDKs are imported only when selected."""
    backend = resolve_backend(config)
    logger.info("Using '%s' logo generator", backend)

    if backend == "gemini":
        from modules.generators.gemini_generator import GeminiLogoGenerator

        return GeminiLogoGenerator(
            api_key=config.gemini_key or "",
            model=config.gemini_model,
            registry=registry,
        )
    if backend == "openai":
        from modules.generators.openai_generator import OpenAILogoGenerator

        return OpenAILogoGenerator(
            api_key=config.openai_key or "",
            model=config.openai_image_model,
            size=config.openai_image_size,
            base_url=config.metadata.get("openai_base_url"),
            registry=registry,
        )
    if backend == "local":
        from modules.generators.local_generator import LocalDiffusionLogoGenerator

        return LocalDiffusionLogoGenerator(config, registry=registry)
    raise RuntimeError(f"Unknown generator backend '{backend}'")
