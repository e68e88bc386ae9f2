"""LogoConfig unit tests."""

from __future__ import annotations

import pytest

from modules.branding.logo_config import BrandPersonality, LogoConfig, LogoStyle
from modules.session.errors import BRAND_NAME_REQUIRED, ValidationError


def test_defaults_match_form_initial_state():
    config = LogoConfig()

    assert config.brand_name == "Nexus AI"
    assert config.personality == [BrandPersonality.SMART, BrandPersonality.INNOVATIVE]
    assert config.primary_color == "#2563eb"
    assert config.style is LogoStyle.MINIMALIST


def test_toggle_trait_adds_then_removes():
    config = LogoConfig(personality=[])

    assert config.toggle_trait(BrandPersonality.RELIABLE) is True
    assert config.personality == [BrandPersonality.RELIABLE]
    assert config.toggle_trait("Reliable") is False
    assert config.personality == []


@pytest.mark.parametrize("toggles", [1, 2, 3, 4, 7])
def test_toggle_parity_decides_membership(toggles):
    config = LogoConfig(personality=[])
    for _ in range(toggles):
        config.toggle_trait(BrandPersonality.SCALABLE)

    assert (BrandPersonality.SCALABLE in config.personality) is (toggles % 2 == 1)
    assert len(config.personality) == len(set(config.personality))


def test_toggle_preserves_insertion_order():
    config = LogoConfig(personality=[])
    for trait in ("Scalable", "Smart", "Reliable"):
        config.toggle_trait(trait)
    config.toggle_trait("Smart")
    config.toggle_trait("Smart")

    assert config.trait_names() == ["Scalable", "Reliable", "Smart"]


def test_toggle_allows_all_and_none():
    config = LogoConfig(personality=[])
    for trait in BrandPersonality:
        config.toggle_trait(trait)
    assert len(config.personality) == 4

    for trait in BrandPersonality:
        config.toggle_trait(trait)
    assert config.personality == []


def test_toggle_rejects_unknown_trait():
    with pytest.raises(ValueError):
        LogoConfig().toggle_trait("Playful")


def test_set_field_does_not_validate_content():
    config = LogoConfig()
    config.set_field("brand_name", "   ")
    config.set_field("primary_color", "not-a-color")
    config.set_field("style", "Geometric")

    assert config.brand_name == "   "
    assert config.primary_color == "not-a-color"
    assert config.style is LogoStyle.GEOMETRIC


def test_set_field_rejects_unknown_field():
    with pytest.raises(ValueError):
        LogoConfig().set_field("personality", [])


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_validate_requires_brand_name(name):
    with pytest.raises(ValidationError) as excinfo:
        LogoConfig(brand_name=name).validate()

    assert str(excinfo.value) == BRAND_NAME_REQUIRED


def test_snapshot_is_independent():
    config = LogoConfig()
    snapshot = config.snapshot()
    config.toggle_trait("Reliable")
    config.set_field("brand_name", "Other")

    assert snapshot.brand_name == "Nexus AI"
    assert BrandPersonality.RELIABLE not in snapshot.personality
