"""Translation provider abstractions."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any

import requests

from .configuration import DEFAULT_ENDPOINT, GlossaConfig
from .errors import ConfigurationError, FetchError
from .extractor import extract
from .structures import TranslationRequest, TranslationResult


class TranslationProvider(ABC):
    """Abstract adapter for translation providers."""

    name: str = "provider"

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate one phrase."""


class EchoTranslationProvider(TranslationProvider):
    """A provider that returns the original text (useful for testing)."""

    name = "echo"

    def translate(self, request: TranslationRequest) -> TranslationResult:
        return TranslationResult(request=request, text=request.phrase)


class GoogleGtxTranslationProvider(TranslationProvider):
    """Fetches a gtx response body over HTTP and extracts the translation."""

    name = "gtx"

    def __init__(
        self,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 15.0,
        user_agent: str = "Mozilla/5.0 (glossa)",
        session: Any = None,
        debug: bool = False,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session if session is not None else requests.Session()
        self.debug = debug

    def build_params(self, request: TranslationRequest) -> dict[str, str]:
        return {
            "client": "gtx",
            "sl": request.source_language,
            "tl": request.target_language,
            "dt": "t",
            "q": request.phrase,
        }

    def fetch_raw(self, request: TranslationRequest) -> str:
        """Return the undecoded response body for ``request``."""

        params = self.build_params(request)
        self._log_debug("provider.request.params", params)
        try:
            response = self.session.get(
                self.endpoint,
                params=params,
                headers={"User-Agent": self.user_agent, "Connection": "close"},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            raise FetchError(
                f"Translate endpoint did not answer within {self.timeout:g} seconds."
            ) from exc
        except requests.RequestException as exc:
            raise FetchError(f"Translate endpoint unreachable: {exc}") from exc

        self._log_debug("provider.response.status", response.status_code)
        if response.status_code >= 400:
            raise FetchError(
                f"Translate endpoint answered HTTP {response.status_code}.",
                status_code=response.status_code,
            )
        if not response.encoding:
            response.encoding = "utf-8"
        body = response.text
        self._log_debug("provider.response.raw", body)
        return body

    def translate(self, request: TranslationRequest) -> TranslationResult:
        raw = self.fetch_raw(request)
        text = extract(raw)
        self._log_debug("provider.response.text", text)
        return TranslationResult(request=request, text=text, raw=raw)

    def _log_debug(self, label: str, payload: Any) -> None:
        if not self.debug:
            return
        print(f"[glossa][provider-debug] {label}:\n{payload}", file=sys.stderr)


def build_provider(
    name: str | None,
    *,
    settings: GlossaConfig | None = None,
    debug: bool = False,
) -> TranslationProvider:
    """Factory to create providers by name."""

    settings = settings or GlossaConfig()
    normalized = (name or settings.GLOSSA_PROVIDER).strip().lower()
    if normalized in {"gtx", "google", "default"}:
        return GoogleGtxTranslationProvider(
            endpoint=settings.GLOSSA_ENDPOINT,
            timeout=settings.GLOSSA_TIMEOUT,
            user_agent=settings.GLOSSA_USER_AGENT,
            debug=debug,
        )
    if normalized in {"echo", "noop", "mock"}:
        return EchoTranslationProvider()
    raise ConfigurationError(f"Unknown translation provider '{name}'.")
