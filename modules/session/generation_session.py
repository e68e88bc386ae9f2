"""Sequential logo generation lifecycle and in-memory history."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, List, Optional

from modules.branding.logo_config import LogoConfig
from modules.generators.base import LogoGenerator
from modules.services.history_service import GeneratedLogo, LogoHistory
from modules.session.errors import GenerationError, LogoError, ValidationError

logger = logging.getLogger(__name__)

SessionListener = Callable[[str, "LogoSession"], None]


class SessionStatus(str, Enum):
    """Whether a generation call is in flight."""

    IDLE = "idle"
    PENDING = "pending"


def build_record_prompt(config: LogoConfig) -> str:
    """Short, self-describing prompt stored on each record."""
    return f"Modern {config.style.value} logo for {config.brand_name}"


class LogoSession:
    """Owns generation requests, the history and the current selection.

    Only one generation may be in flight at a time. ``current`` is a value,
    not a position in ``history``, so clearing the history leaves the last
    preview visible.
    """

    def __init__(
        self,
        generator: LogoGenerator,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.generator = generator
        self._clock = clock
        self._history = LogoHistory()
        self._listeners: List[SessionListener] = []
        self._last_id = 0
        self.status = SessionStatus.IDLE
        self.current: Optional[GeneratedLogo] = None
        self.last_error: Optional[str] = None
        self.last_failure: Optional[LogoError] = None

    @property
    def pending(self) -> bool:
        return self.status is SessionStatus.PENDING

    @property
    def history(self) -> List[GeneratedLogo]:
        return self._history.list()

    # Observers ---------------------------------------------------------------
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener(event, session)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:  # noqa: BLE001
                logger.exception("Session listener failed on '%s'", event)

    # Generation --------------------------------------------------------------
    def _next_id(self) -> str:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def _fail(self, error: LogoError, event: str) -> None:
        self.last_error = str(error)
        self.last_failure = error
        self._notify(event)

    async def request_generation(self, config: LogoConfig) -> Optional[GeneratedLogo]:
        """Generate one logo for ``config``.

        Returns the new record, or None when the attempt was ignored, rejected
        or failed; ``last_error`` explains the latter two.
        """
        if self.pending:
            logger.warning("Generation already in progress; ignoring request")
            return None

        try:
            config.validate()
        except ValidationError as exc:
            self._fail(exc, "rejected")
            return None

        snapshot = config.snapshot()
        prompt = build_record_prompt(snapshot)
        self.status = SessionStatus.PENDING
        self.last_error = None
        self.last_failure = None
        self._notify("pending")

        try:
            try:
                image_reference = await self.generator.generate(snapshot)
                if not image_reference:
                    raise RuntimeError("generator returned an empty image reference")
            except Exception as exc:  # noqa: BLE001
                logger.exception("Logo generation failed for %r", snapshot.brand_name)
                error = GenerationError()
                error.__cause__ = exc
                self.status = SessionStatus.IDLE
                self._fail(error, "failed")
                return None

            logo = GeneratedLogo(
                id=self._next_id(),
                image_reference=image_reference,
                prompt=prompt,
                timestamp=self._clock(),
            )
            self._history.record(logo)
            self.current = logo
            self.status = SessionStatus.IDLE
            logger.info("Generated logo %s: %s", logo.id, prompt)
            self._notify("generated")
            return logo
        finally:
            self.status = SessionStatus.IDLE

    # Selection ---------------------------------------------------------------
    def select_from_history(self, logo_id: str) -> Optional[GeneratedLogo]:
        """Make the history entry ``logo_id`` current; silently ignore unknown ids."""
        logo = self._history.find(logo_id)
        if logo is None:
            return None
        self.current = logo
        self._notify("selected")
        return logo

    def clear_history(self) -> None:
        self._history.clear()
        self._notify("cleared")
