"""Generation history tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class GeneratedLogo:
    """One successful generation result."""

    id: str
    image_reference: str
    prompt: str
    timestamp: float


class LogoHistory:
    """Newest-first, in-memory collection of generated logos."""

    def __init__(self) -> None:
        self._records: List[GeneratedLogo] = []

    def record(self, logo: GeneratedLogo) -> None:
        """Prepend a record; ids must be unique within the history."""
        if self.find(logo.id) is not None:
            raise ValueError(f"Duplicate logo id '{logo.id}'")
        self._records.insert(0, logo)

    def find(self, logo_id: str) -> Optional[GeneratedLogo]:
        for logo in self._records:
            if logo.id == logo_id:
                return logo
        return None

    def list(self) -> List[GeneratedLogo]:
        """Return a copy of the records, newest first."""
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
