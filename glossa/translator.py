"""High-level orchestration for phrase translation."""

from __future__ import annotations

import pathlib
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List

from .configuration import GlossaConfig
from .errors import ErrorCategory, FetchError
from .languages import resolve_language
from .policy import ErrorPolicy, PolicyAction
from .providers import TranslationProvider, build_provider
from .structures import TranslationRequest, TranslationResult


@dataclass
class TranslationSummary:
    """Report returned after translating a set of phrases."""

    provider_name: str
    source_language: str
    target_language: str
    total_phrases: int
    translated_phrases: int
    failed_phrases: int
    total_errors: int
    elapsed_seconds: float
    results: List[TranslationResult] = field(default_factory=list)
    error_messages: List[str] = field(default_factory=list)


class TranslationRunner:
    """Translates phrases one by one with retries and the error policy."""

    def __init__(
        self,
        *,
        target_language: str | None,
        source_language: str | None = None,
        provider_name: str | None = None,
        settings: GlossaConfig | None = None,
        interactive: bool = True,
        verbose: bool = False,
        provider_debug: bool = False,
        provider: TranslationProvider | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.settings = settings or GlossaConfig()
        self.source_language = resolve_language(
            source_language or self.settings.GLOSSA_SOURCE_LANGUAGE,
            allow_auto=True,
        )
        self.target_language = resolve_language(
            target_language or self.settings.GLOSSA_TARGET_LANGUAGE
        )
        self.provider = provider or build_provider(
            provider_name, settings=self.settings, debug=provider_debug
        )
        self.verbose = verbose
        self.sleep = sleep or time.sleep

        self.error_policy = ErrorPolicy(interactive=interactive)
        self.max_retries = 3
        self.retry_backoff = [1, 4, 9]

    def run(self, phrases: Iterable[str]) -> TranslationSummary:
        start_time = time.time()
        results: List[TranslationResult] = []

        for phrase in phrases:
            if not phrase.strip():
                continue
            request = TranslationRequest(
                phrase=phrase,
                source_language=self.source_language,
                target_language=self.target_language,
            )
            result = self.translate_one(request)
            results.append(result)
            if self.verbose:
                status = "ok" if result.ok else "failed"
                print(
                    f"[{len(results)}] {self.source_language}->{self.target_language} "
                    f"{status}: {phrase!r}"
                )

        translated = sum(1 for result in results if result.ok)
        return TranslationSummary(
            provider_name=self.provider.name,
            source_language=self.source_language,
            target_language=self.target_language,
            total_phrases=len(results),
            translated_phrases=translated,
            failed_phrases=len(results) - translated,
            total_errors=len(self.error_policy.records),
            elapsed_seconds=time.time() - start_time,
            results=results,
            error_messages=[record.message for record in self.error_policy.records],
        )

    def translate_one(self, request: TranslationRequest) -> TranslationResult:
        attempt = 0
        while True:
            try:
                result = self.provider.translate(request)
            except FetchError as exc:
                attempt += 1
                if attempt <= self.max_retries:
                    wait_time = self.retry_backoff[min(attempt - 1, len(self.retry_backoff) - 1)]
                    print(
                        f"Could not reach the translate endpoint "
                        f"(attempt {attempt} of {self.max_retries}: {exc}). Retrying..."
                    )
                    self.sleep(wait_time)
                    continue

                action = self.error_policy.handle_error(
                    ErrorCategory.NETWORK,
                    f"Giving up on {request.phrase!r} after repeated failures. {exc}",
                    phrase=request.phrase,
                )
                if action is PolicyAction.RETRY:
                    attempt = 0
                    continue
                return TranslationResult(request=request, text="", error=str(exc))

            if not result.text:
                message = f"No translated text found in the response for {request.phrase!r}."
                action = self.error_policy.handle_error(
                    ErrorCategory.EXTRACTION,
                    message,
                    phrase=request.phrase,
                )
                if action is PolicyAction.RETRY:
                    attempt = 0
                    continue
                result.error = message
                return result

            self.error_policy.record_success()
            return result


def read_phrases(source: str | pathlib.Path) -> List[str]:
    """Read one phrase per non-blank line from a file, or stdin for ``-``."""

    if str(source) == "-":
        lines = sys.stdin.read().splitlines()
    else:
        path = pathlib.Path(source).expanduser()
        lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]
