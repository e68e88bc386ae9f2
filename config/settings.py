"""Configuration helpers for the AutoLogo project."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

GENERATOR_BACKENDS = ("auto", "gemini", "openai", "local")


@dataclass(slots=True)
class AppConfig:
    """Centralized application configuration."""

    generator_backend: str = "auto"
    gemini_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash-image"
    openai_key: Optional[str] = None
    openai_image_model: str = "gpt-image-1"
    openai_image_size: str = "1024x1024"
    model_dir: Path = Path("models")
    local_model_id: str = "models/sdxl-turbo"
    use_fp16: bool = True
    enable_xformers: bool = True
    enable_vae_tiling: bool = True
    assets_dir: Path = Path("assets")
    output_dir: Path = Path("outputs")
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    metadata: dict[str, Any] = field(default_factory=dict)


def _parse_env_value(raw: str) -> str:
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    # Unquoted values may carry a trailing " # comment"
    return value.split(" #", 1)[0].rstrip()


def _read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, accepting an optional ``export`` prefix."""
    values: dict[str, str] = {}
    if not path.exists():
        return values

    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped.startswith("export "):
            stripped = stripped[len("export "):].lstrip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        values[key.strip()] = _parse_env_value(value)
    return values


def _load_env_file(path: Path) -> None:
    """Fill in environment variables from ``path``; the process environment wins."""
    for key, value in _read_env_file(path).items():
        os.environ.setdefault(key, value)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Return an AppConfig instance with environment-aware settings."""
    env_path = Path(config_path) if config_path else Path(".env")
    _load_env_file(env_path)

    backend = (os.getenv("LOGO_GENERATOR_BACKEND") or "auto").strip().lower()
    if backend not in GENERATOR_BACKENDS:
        raise ValueError(
            f"Unknown LOGO_GENERATOR_BACKEND '{backend}', expected one of {', '.join(GENERATOR_BACKENDS)}"
        )

    model_dir = Path(os.getenv("MODEL_DIR", "models")).expanduser().resolve()
    for env_name in ("HUGGINGFACE_HUB_CACHE", "DIFFUSERS_CACHE"):
        os.environ.setdefault(env_name, str(model_dir))
    local_model_id = os.getenv("LOCAL_MODEL_ID") or str(model_dir / "sdxl-turbo")

    metadata: dict[str, Any] = {}
    openai_base_url = os.getenv("OPENAI_BASE_URL")
    if openai_base_url:
        metadata["openai_base_url"] = openai_base_url

    return AppConfig(
        generator_backend=backend,
        gemini_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
        gemini_model=os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image"),
        openai_key=os.getenv("OPENAI_API_KEY"),
        openai_image_model=os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1"),
        openai_image_size=os.getenv("OPENAI_IMAGE_SIZE", "1024x1024"),
        model_dir=model_dir,
        local_model_id=local_model_id,
        use_fp16=_env_flag("USE_FP16", True),
        enable_xformers=_env_flag("ENABLE_XFORMERS", True),
        enable_vae_tiling=_env_flag("ENABLE_VAE_TILING", True),
        output_dir=Path(os.getenv("OUTPUT_DIR", "outputs")),
        log_dir=Path(os.getenv("LOG_DIR", "logs")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        metadata=metadata,
    )
