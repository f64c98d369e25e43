"""Error definitions and policy helpers for the Glossa translator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ErrorCategory(Enum):
    """Categorises runtime errors to apply policy thresholds."""

    NETWORK = auto()
    EXTRACTION = auto()


class GlossaError(Exception):
    """Base exception for all custom errors."""


class AbortRequested(GlossaError):
    """Raised when the user elects to abort processing."""


class NonInteractiveAbort(GlossaError):
    """Raised when non-interactive policy dictates termination."""


class ConfigurationError(GlossaError):
    """Raised when settings or the provider selection are invalid."""


class UnknownLanguageError(GlossaError):
    """Raised when a language name or code is not in the language table."""


class FetchError(GlossaError):
    """Raised when the translate endpoint cannot be reached or refuses."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class ErrorRecord:
    """Stores context for a handled error."""

    category: ErrorCategory
    message: str
    phrase: Optional[str] = None


class ErrorTracker:
    """Counts consecutive and total errors against the policy limits."""

    CONSECUTIVE_LIMIT = 3
    TOTAL_LIMIT = 10

    def __init__(self) -> None:
        self.last_category: Optional[ErrorCategory] = None
        self.consecutive: int = 0
        self.total: int = 0

    def register(self, category: ErrorCategory) -> tuple[int, int, bool]:
        """Register a new error and return (consecutive, total, threshold_reached)."""

        if category is self.last_category:
            self.consecutive += 1
        else:
            self.last_category = category
            self.consecutive = 1
        self.total += 1

        return (
            self.consecutive,
            self.total,
            self.consecutive >= self.CONSECUTIVE_LIMIT or self.total >= self.TOTAL_LIMIT,
        )

    def reset_consecutive(self) -> None:
        self.consecutive = 0
        self.last_category = None
