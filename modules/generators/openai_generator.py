"""OpenAI Images API backend."""

from __future__ import annotations

import base64
import logging
from typing import Any, Optional

from openai import AsyncOpenAI

from modules.branding.logo_config import LogoConfig
from modules.branding.style_presets import StylePresetRegistry
from modules.generators.base import LogoGenerator, build_generation_prompt
from modules.utils.image_utils import encode_data_url

logger = logging.getLogger(__name__)


class OpenAILogoGenerator(LogoGenerator):
    """Generate logos through ``images.generate`` on an OpenAI-compatible API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-image-1",
        size: str = "1024x1024",
        base_url: Optional[str] = None,
        registry: Optional[StylePresetRegistry] = None,
    ) -> None:
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not configured")
        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if base_url:
            client_kwargs["base_url"] = base_url
        self.model = model
        self.size = size
        self.registry = registry or StylePresetRegistry()
        self._client = AsyncOpenAI(**client_kwargs)

    async def generate(self, config: LogoConfig) -> str:
        prompt = build_generation_prompt(config, self.registry)
        logger.debug("OpenAI prompt: %s", prompt)
        result = await self._client.images.generate(
            model=self.model,
            prompt=prompt,
            size=self.size,
            n=1,
        )
        data = getattr(result, "data", None) or []
        if not data:
            raise RuntimeError(f"{self.model} returned no images")

        image = data[0]
        b64_payload = getattr(image, "b64_json", None)
        if b64_payload:
            return encode_data_url(base64.b64decode(b64_payload), "image/png")
        url = getattr(image, "url", None)
        if url:
            return str(url)
        raise RuntimeError(f"{self.model} returned an image without data or url")
