"""Core data structures for the Glossa translator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TranslationRequest:
    """A single phrase and the language pair to translate it with."""

    phrase: str
    source_language: str
    target_language: str


@dataclass
class TranslationResult:
    """Outcome of translating one request."""

    request: TranslationRequest
    text: str
    raw: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
