"""Callback implementations for the Gradio interface."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

from config.settings import AppConfig
from modules.branding.logo_config import LogoConfig
from modules.generators.base import LogoGenerator
from modules.services.history_service import GeneratedLogo
from modules.services.storage_service import StorageService
from modules.session.generation_session import LogoSession
from modules.utils.cache import TTLCache
from modules.utils.image_utils import load_image, unavailable_placeholder

logger = logging.getLogger(__name__)

STATUS_READY = "Ready."
STATUS_PENDING = "Designing..."
STATUS_DONE = "Logo generated."
STATUS_BUSY = "A logo is already being designed."

GalleryItem = Tuple[Any, str]


def build_callbacks(
    config: AppConfig,
    generator: Optional[LogoGenerator] = None,
    storage: Optional[StorageService] = None,
    session_factory: Optional[Callable[[], LogoSession]] = None,
) -> dict[str, Any]:
    """Return a dictionary of Gradio callback functions.

    Each browser tab keeps its own ``LogoSession`` and ``LogoConfig`` in
    ``gr.State``; callbacks receive them (None on first use) and return them.
    """

    storage = storage or StorageService(config.output_dir)

    def _new_session() -> LogoSession:
        if session_factory is not None:
            return session_factory()
        if generator is None:
            raise RuntimeError("Logo generator is not configured")
        return LogoSession(generator)

    def _ensure_session(session: Optional[LogoSession]) -> LogoSession:
        return session if session is not None else _new_session()

    def _ensure_config(brand: Optional[LogoConfig]) -> LogoConfig:
        return brand if brand is not None else LogoConfig()

    # Records are immutable, so a decoded preview stays valid for its record.
    previews: TTLCache[GeneratedLogo, Any] = TTLCache()

    def _preview(logo: Optional[GeneratedLogo]) -> Any:
        if logo is None:
            return None
        cached = previews.get(logo)
        if cached is not None:
            return cached
        try:
            image = load_image(logo.image_reference)
        except Exception:  # noqa: BLE001
            logger.exception("Could not load preview for logo %s", logo.id)
            return None
        previews.set(logo, image)
        return image

    def _gallery(session: LogoSession) -> List[GalleryItem]:
        """One item per history entry so gallery positions match history positions."""
        items: List[GalleryItem] = []
        for logo in session.history:
            image = _preview(logo)
            if image is None:
                image = unavailable_placeholder()
            items.append((image, logo.prompt))
        return items

    def on_update_field(
        brand: Optional[LogoConfig], name: str, value: Any
    ) -> LogoConfig:
        brand = _ensure_config(brand)
        brand.set_field(name, value)
        return brand

    def on_toggle_trait(
        brand: Optional[LogoConfig], trait: str
    ) -> tuple[LogoConfig, bool]:
        brand = _ensure_config(brand)
        selected = brand.toggle_trait(trait)
        return brand, selected

    async def on_generate(
        session: Optional[LogoSession], brand: Optional[LogoConfig]
    ) -> tuple[LogoSession, Any, str, List[GalleryItem]]:
        session = _ensure_session(session)
        brand = _ensure_config(brand)

        if session.pending:
            return session, _preview(session.current), STATUS_BUSY, _gallery(session)

        logo = await session.request_generation(brand)
        if logo is None:
            status = f"**Error:** {session.last_error}" if session.last_error else STATUS_READY
        else:
            status = STATUS_DONE
        return session, _preview(session.current), status, _gallery(session)

    def on_select_history(
        session: Optional[LogoSession], logo_id: str
    ) -> tuple[LogoSession, Any, str]:
        session = _ensure_session(session)
        logo = session.select_from_history(logo_id)
        status = logo.prompt if logo is not None else STATUS_READY
        return session, _preview(session.current), status

    def on_select_index(
        session: Optional[LogoSession], index: Optional[int]
    ) -> tuple[LogoSession, Any, str]:
        """Gallery selection reports positions; map them to record ids."""
        session = _ensure_session(session)
        history = session.history
        if index is None or not 0 <= index < len(history):
            return session, _preview(session.current), STATUS_READY
        return on_select_history(session, history[index].id)

    def on_clear_history(
        session: Optional[LogoSession],
    ) -> tuple[LogoSession, List[GalleryItem]]:
        session = _ensure_session(session)
        session.clear_history()
        return session, []

    def on_export(
        session: Optional[LogoSession], brand: Optional[LogoConfig]
    ) -> tuple[Optional[str], str]:
        session = _ensure_session(session)
        brand = _ensure_config(brand)
        if session.current is None:
            return None, "Generate a logo before exporting."
        try:
            path = storage.export(session.current.image_reference, brand.brand_name)
        except Exception:  # noqa: BLE001
            logger.exception("Export failed for logo %s", session.current.id)
            return None, "**Error:** Failed to export logo."
        return str(path), f"Saved {path.name}"

    return {
        "on_update_field": on_update_field,
        "on_toggle_trait": on_toggle_trait,
        "on_generate": on_generate,
        "on_select_history": on_select_history,
        "on_select_index": on_select_index,
        "on_clear_history": on_clear_history,
        "on_export": on_export,
    }
