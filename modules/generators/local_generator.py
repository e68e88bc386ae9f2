"""Local Stable Diffusion backend for offline logo drafts."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import Any, Optional

import torch
from diffusers import StableDiffusionXLPipeline

from config.settings import AppConfig
from modules.branding.logo_config import LogoConfig
from modules.branding.style_presets import StylePresetRegistry
from modules.generators.base import LogoGenerator, build_generation_prompt
from modules.services.storage_service import StorageService

logger = logging.getLogger(__name__)

BASE_NEGATIVE_PROMPT = "photo, gradient, shadow, texture, 3d render, watermark, blurry, low quality"


class LocalDiffusionLogoGenerator(LogoGenerator):
    """Facade around a Stable Diffusion XL pipeline that saves PNG files."""

    def __init__(
        self,
        config: AppConfig,
        storage: Optional[StorageService] = None,
        registry: Optional[StylePresetRegistry] = None,
        steps: int = 4,
        guidance_scale: float = 0.0,
        size: int = 512,
    ) -> None:
        self.config = config
        self.storage = storage or StorageService(config.output_dir)
        self.registry = registry or StylePresetRegistry()
        self.steps = steps
        self.guidance_scale = guidance_scale
        self.size = size
        self._pipeline: Optional[StableDiffusionXLPipeline] = None

    def _preferred_device(self) -> str:
        return "cuda" if torch.cuda.is_available() else "cpu"

    def _preferred_dtype(self, device: str) -> torch.dtype:
        if self.config.use_fp16 and device == "cuda":
            return torch.float16
        return torch.float32

    def load_pipeline(self) -> None:
        """Lazy-load the diffusion pipeline."""
        if self._pipeline is not None:
            return

        device = self._preferred_device()
        dtype = self._preferred_dtype(device)
        cache_dir = Path(self.config.model_dir)
        cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info("Loading %s on %s", self.config.local_model_id, device)
        pipeline = StableDiffusionXLPipeline.from_pretrained(
            self.config.local_model_id,
            torch_dtype=dtype,
            cache_dir=str(cache_dir),
            use_safetensors=True,
        )
        pipeline.to(device)

        if self.config.enable_xformers:
            try:
                pipeline.enable_xformers_memory_efficient_attention()
            except Exception:  # noqa: BLE001
                logger.info("xformers unavailable, using default attention")

        if self.config.enable_vae_tiling and hasattr(pipeline, "enable_vae_tiling"):
            pipeline.enable_vae_tiling()

        self._pipeline = pipeline

    def _negative_prompt(self, config: LogoConfig) -> str:
        preset = self.registry.get(config.style)
        parts = [BASE_NEGATIVE_PROMPT]
        if preset.negative:
            parts.append(preset.negative)
        return ", ".join(parts)

    def _render(self, config: LogoConfig) -> Any:
        self.load_pipeline()
        assert self._pipeline is not None  # For type checkers

        result = self._pipeline(
            prompt=build_generation_prompt(config, self.registry),
            negative_prompt=self._negative_prompt(config),
            guidance_scale=self.guidance_scale,
            num_inference_steps=self.steps,
            height=self.size,
            width=self.size,
        )
        images = list(getattr(result, "images", []))
        if not images:
            raise RuntimeError("Pipeline returned no images")
        return images[0]

    async def generate(self, config: LogoConfig) -> str:
        image = await asyncio.to_thread(self._render, config)
        path = self.storage.save_image(image, f"logo-{int(time.time() * 1000)}.png")
        return str(path)
