"""Gemini image model backend."""

from __future__ import annotations

import base64
import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from modules.branding.logo_config import LogoConfig
from modules.branding.style_presets import StylePresetRegistry
from modules.generators.base import LogoGenerator, build_generation_prompt
from modules.utils.image_utils import encode_data_url

logger = logging.getLogger(__name__)


class GeminiLogoGenerator(LogoGenerator):
    """Generate logos with a Gemini image model and return them as data URLs."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash-image",
        registry: Optional[StylePresetRegistry] = None,
    ) -> None:
        if not api_key:
            raise RuntimeError("GEMINI_API_KEY is not configured")
        self.model = model
        self.registry = registry or StylePresetRegistry()
        self._client = genai.Client(api_key=api_key)

    async def generate(self, config: LogoConfig) -> str:
        prompt = build_generation_prompt(config, self.registry)
        logger.debug("Gemini prompt: %s", prompt)
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE", "TEXT"],
            ),
        )
        return self._extract_image(response)

    def _extract_image(self, response: Any) -> str:
        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if inline is None or not inline.data:
                    continue
                data = inline.data
                if isinstance(data, str):
                    data = base64.b64decode(data)
                return encode_data_url(data, inline.mime_type or "image/png")
        raise RuntimeError(f"{self.model} returned no image data")
