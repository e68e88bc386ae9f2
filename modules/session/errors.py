"""Error taxonomy for logo generation attempts."""

from __future__ import annotations

BRAND_NAME_REQUIRED = "Please enter a brand name."
GENERATION_FAILED = "Failed to generate logo. Please try again."


class LogoError(Exception):
    """Base class for recoverable generation errors.

    ``str(error)`` is always safe to show to the user.
    """


class ValidationError(LogoError):
    """The configuration is not ready to be sent to a generator."""

    def __init__(self, message: str = BRAND_NAME_REQUIRED) -> None:
        super().__init__(message)


class GenerationError(LogoError):
    """The generator failed; the original exception is chained as ``__cause__``."""

    def __init__(self, message: str = GENERATION_FAILED) -> None:
        super().__init__(message)
