"""One-off script for debugging a real logo generation round trip."""

import asyncio

from config.settings import load_config
from modules.branding.logo_config import LogoConfig, LogoStyle
from modules.generators.factory import build_generator, resolve_backend
from modules.services.storage_service import StorageService
from modules.session.generation_session import LogoSession
from modules.utils.logging import setup_logging


async def run() -> None:
    # 1. Real configuration and backend from .env
    config = load_config()
    setup_logging(config)
    print("Backend:", resolve_backend(config))

    session = LogoSession(build_generator(config))
    brand = LogoConfig(brand_name="Nexus AI", style=LogoStyle.GEOMETRIC)
    brand.toggle_trait("Reliable")

    # 2. Single generation attempt
    logo = await session.request_generation(brand)
    if logo is None:
        print("Generation failed:", session.last_error, repr(session.last_failure.__cause__ if session.last_failure else None))
        return

    print("Prompt:", logo.prompt)
    print("Reference:", logo.image_reference[:80])

    # 3. Export the preview the same way the UI does
    path = StorageService(config.output_dir).export(logo.image_reference, brand.brand_name)
    print("Saved:", path.resolve())


if __name__ == "__main__":
    asyncio.run(run())
