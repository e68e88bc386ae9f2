"""Brand identity parameters edited through the form."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, List

from modules.session.errors import ValidationError


class BrandPersonality(str, Enum):
    """Personality traits a brand can project."""

    SMART = "Smart"
    RELIABLE = "Reliable"
    INNOVATIVE = "Innovative"
    SCALABLE = "Scalable"


class LogoStyle(str, Enum):
    """Visual styles supported by the generator prompt."""

    MINIMALIST = "Minimalist"
    GEOMETRIC = "Geometric"
    ABSTRACT = "Abstract"
    SYMBOLIC = "Symbolic"


EDITABLE_FIELDS = ("brand_name", "primary_color", "style")


def _default_personality() -> List[BrandPersonality]:
    return [BrandPersonality.SMART, BrandPersonality.INNOVATIVE]


@dataclass(slots=True)
class LogoConfig:
    """Current brand-identity parameters.

    Content is not validated while the user edits it; ``validate`` is called
    when a generation is requested.
    """

    brand_name: str = "Nexus AI"
    personality: List[BrandPersonality] = field(default_factory=_default_personality)
    primary_color: str = "#2563eb"
    style: LogoStyle = LogoStyle.MINIMALIST

    def __post_init__(self) -> None:
        traits: List[BrandPersonality] = []
        for trait in self.personality:
            trait = BrandPersonality(trait)
            if trait not in traits:
                traits.append(trait)
        self.personality = traits
        self.style = LogoStyle(self.style)

    def toggle_trait(self, trait: BrandPersonality | str) -> bool:
        """Add ``trait`` if absent, remove it otherwise.

        Returns True when the trait is selected after the call.
        """
        trait = BrandPersonality(trait)
        if trait in self.personality:
            self.personality = [item for item in self.personality if item is not trait]
            return False
        self.personality = [*self.personality, trait]
        return True

    def set_field(self, name: str, value: Any) -> None:
        """Replace one of the free-form fields."""
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"'{name}' is not an editable field")
        if name == "style":
            value = LogoStyle(value)
        setattr(self, name, value)

    def validate(self) -> None:
        if not self.brand_name.strip():
            raise ValidationError()

    def snapshot(self) -> "LogoConfig":
        """Return an independent copy safe to hand to a generator."""
        return replace(self, personality=list(self.personality))

    def trait_names(self) -> List[str]:
        return [trait.value for trait in self.personality]
