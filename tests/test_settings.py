"""load_config tests."""

from __future__ import annotations

import pytest

from config.settings import load_config

ENV_NAMES = (
    "LOGO_GENERATOR_BACKEND",
    "GEMINI_API_KEY",
    "API_KEY",
    "GEMINI_IMAGE_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_IMAGE_MODEL",
    "OUTPUT_DIR",
    "USE_FP16",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        # setenv first so values written by load_config are undone after the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("MODEL_DIR", str(tmp_path / "models"))
    yield


def test_defaults_without_env_file(tmp_path):
    config = load_config(str(tmp_path / "missing.env"))

    assert config.generator_backend == "auto"
    assert config.gemini_key is None
    assert config.gemini_model == "gemini-2.5-flash-image"
    assert config.openai_image_model == "gpt-image-1"
    assert config.local_model_id.endswith("sdxl-turbo")
    assert "openai_base_url" not in config.metadata


def test_env_file_populates_settings(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "# comment",
                "LOGO_GENERATOR_BACKEND=OpenAI",
                'OPENAI_API_KEY="sk-test"',
                "OPENAI_BASE_URL=https://proxy/v1",
                "OUTPUT_DIR=exports",
                "USE_FP16=false",
                "not a pair",
            ]
        ),
        encoding="utf-8",
    )
    config = load_config(str(env_file))

    assert config.generator_backend == "openai"
    assert config.openai_key == "sk-test"
    assert config.metadata["openai_base_url"] == "https://proxy/v1"
    assert str(config.output_dir) == "exports"
    assert config.use_fp16 is False


def test_api_key_fallback_for_gemini(tmp_path, monkeypatch):
    monkeypatch.setenv("API_KEY", "g-key")

    assert load_config(str(tmp_path / "none.env")).gemini_key == "g-key"


def test_unknown_backend_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("LOGO_GENERATOR_BACKEND", "midjourney")

    with pytest.raises(ValueError):
        load_config(str(tmp_path / "none.env"))


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "export GEMINI_API_KEY='from-file'",
                "OPENAI_API_KEY=sk-file  # rotated monthly",
                "LOG_LEVEL=debug",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("GEMINI_API_KEY", "from-shell")

    config = load_config(str(env_file))

    assert config.gemini_key == "from-shell"
    assert config.openai_key == "sk-file"
    assert config.log_level == "debug"
