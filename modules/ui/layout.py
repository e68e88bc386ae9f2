"""Gradio layout composition for the logo generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import gradio as gr

from config.settings import AppConfig
from modules.branding.logo_config import BrandPersonality, LogoConfig, LogoStyle
from modules.branding.style_presets import StylePresetRegistry
from modules.generators.factory import build_generator
from modules.services.storage_service import StorageService
from modules.ui.callbacks import STATUS_PENDING, STATUS_READY, build_callbacks

DESIGN_BRIEF = (
    "The AI will prioritize **flat design** principles. No gradients, shadows, or "
    "textures are used to ensure maximum scalability across digital and print media."
)


def _load_style_registry(config: AppConfig) -> StylePresetRegistry:
    registry = StylePresetRegistry()
    registry.load_from_file(Path(config.assets_dir) / "styles.json")
    return registry


def _trait_variant(selected: bool) -> str:
    return "primary" if selected else "secondary"


def build_app(config: AppConfig) -> Any:
    """Compose and return the Gradio application."""
    registry = _load_style_registry(config)
    storage = StorageService(config.output_dir)
    generator = build_generator(config, registry)
    callbacks_map = build_callbacks(config, generator=generator, storage=storage)
    defaults = LogoConfig()

    with gr.Blocks(title="AutoLogo AI") as demo:
        gr.Markdown("## AutoLogo AI")
        session_state = gr.State(None)
        brand_state = gr.State(defaults)

        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### Brand Identity")
                brand_name = gr.Textbox(
                    label="Brand Name",
                    value=defaults.brand_name,
                    placeholder="e.g. Nexus AI",
                )

                gr.Markdown("Personality Traits")
                trait_buttons: dict[BrandPersonality, Any] = {}
                with gr.Row():
                    for trait in BrandPersonality:
                        trait_buttons[trait] = gr.Button(
                            trait.value,
                            size="sm",
                            variant=_trait_variant(trait in defaults.personality),
                        )

                primary_color = gr.ColorPicker(label="Primary Color", value=defaults.primary_color)
                style = gr.Radio(
                    label="Visual Style",
                    choices=[item.value for item in LogoStyle],
                    value=defaults.style.value,
                )
                generate_btn = gr.Button("Generate Concept", variant="primary")
                gr.Markdown(DESIGN_BRIEF)

            with gr.Column(scale=2):
                preview = gr.Image(label="Logo Preview", type="pil", interactive=False)
                status = gr.Markdown(STATUS_READY)
                with gr.Row():
                    export_btn = gr.Button("Export PNG")
                    export_file = gr.File(label="Download", interactive=False)

                gr.Markdown("### Iteration History")
                history_gallery = gr.Gallery(label="History", columns=4, height="auto")
                clear_btn = gr.Button("Clear all", size="sm")

        def _field_handler(name: str) -> Callable[[LogoConfig, Any], LogoConfig]:
            def _handler(brand: LogoConfig, value: Any) -> LogoConfig:
                return callbacks_map["on_update_field"](brand, name, value)

            return _handler

        brand_name.change(fn=_field_handler("brand_name"), inputs=[brand_state, brand_name], outputs=brand_state)
        primary_color.change(fn=_field_handler("primary_color"), inputs=[brand_state, primary_color], outputs=brand_state)
        style.change(fn=_field_handler("style"), inputs=[brand_state, style], outputs=brand_state)

        def _trait_handler(trait: BrandPersonality) -> Callable[[LogoConfig], tuple[LogoConfig, Any]]:
            def _handler(brand: LogoConfig) -> tuple[LogoConfig, Any]:
                brand, selected = callbacks_map["on_toggle_trait"](brand, trait)
                return brand, gr.update(variant=_trait_variant(selected))

            return _handler

        for trait, button in trait_buttons.items():
            button.click(fn=_trait_handler(trait), inputs=brand_state, outputs=[brand_state, button])

        generate_btn.click(
            fn=lambda: STATUS_PENDING,
            outputs=status,
        ).then(
            fn=callbacks_map["on_generate"],
            inputs=[session_state, brand_state],
            outputs=[session_state, preview, status, history_gallery],
        )

        def _on_gallery_select(session: Any, evt: gr.SelectData) -> tuple[Any, Any, str]:
            return callbacks_map["on_select_index"](session, evt.index)

        history_gallery.select(
            fn=_on_gallery_select,
            inputs=session_state,
            outputs=[session_state, preview, status],
        )

        clear_btn.click(
            fn=callbacks_map["on_clear_history"],
            inputs=session_state,
            outputs=[session_state, history_gallery],
        )

        export_btn.click(
            fn=callbacks_map["on_export"],
            inputs=[session_state, brand_state],
            outputs=[export_file, status],
        )

    return demo
