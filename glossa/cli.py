"""Command line interface for the Glossa translator."""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Iterable, List, Optional

from .configuration import GlossaConfig, get_settings
from .errors import (
    AbortRequested,
    ConfigurationError,
    GlossaError,
    NonInteractiveAbort,
    UnknownLanguageError,
)
from .extractor import extract
from .languages import LANGUAGES, language_name
from .translator import TranslationRunner, TranslationSummary, read_phrases


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glossa",
        description="Translate short phrases through the Google gtx endpoint.",
    )
    parser.add_argument(
        "phrases",
        nargs="*",
        help="Phrases to translate. Each argument is translated separately.",
    )
    parser.add_argument(
        "-t",
        "--target-language",
        help="Destination language (name or code). Defaults to the configured target.",
    )
    parser.add_argument(
        "-s",
        "--source-language",
        help="Source language (name or code). Defaults to automatic detection.",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        help="Read additional phrases from a file, one per line ('-' for stdin).",
    )
    parser.add_argument(
        "-p",
        "--provider",
        help="Translation provider identifier (gtx or echo).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds for this run (overrides GLOSSA_TIMEOUT).",
    )
    parser.add_argument(
        "--extract",
        metavar="FILE",
        help="Print the text extracted from a saved raw response body and exit.",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported language names and codes.",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Disable prompts and stop automatically when errors pile up.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show per-phrase progress and a summary.",
    )
    parser.add_argument(
        "--debug-provider",
        action="store_true",
        help="Log request parameters and raw responses to stderr.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the graphical translator window.",
    )
    return parser


def execute_translation(
    *,
    phrases: List[str],
    target_language: str | None,
    source_language: str | None,
    provider: str | None,
    settings: GlossaConfig,
    non_interactive: bool,
    verbose: bool,
    provider_debug: bool,
) -> tuple[int, TranslationSummary | None, str | None]:
    """Translate ``phrases`` and return the exit code, summary, and message."""

    try:
        runner = TranslationRunner(
            target_language=target_language,
            source_language=source_language,
            provider_name=provider,
            settings=settings,
            interactive=not non_interactive,
            verbose=verbose,
            provider_debug=provider_debug,
        )
        summary = runner.run(phrases)
    except (ConfigurationError, UnknownLanguageError) as exc:
        return 1, None, str(exc)
    except NonInteractiveAbort as exc:
        return 2, None, str(exc)
    except AbortRequested:
        return 2, None, "Translation aborted at your request."
    except GlossaError as exc:
        return 1, None, str(exc)
    except KeyboardInterrupt:
        return 2, None, "Translation interrupted by user."
    except Exception as exc:
        return 1, None, (
            f"{exc}\n"
            "An unexpected error occurred. Please rerun with --verbose for more details."
        )

    return (1 if summary.failed_phrases else 0), summary, None


def print_translations(summary: TranslationSummary) -> None:
    for result in summary.results:
        if result.ok:
            print(result.text)


def print_summary(summary: TranslationSummary) -> None:
    """Output a short report once processing completes."""

    print("\nTranslation complete.", file=sys.stderr)
    print(f"  Provider:        {summary.provider_name}", file=sys.stderr)
    print(
        f"  Languages:       {language_name(summary.source_language)} -> "
        f"{language_name(summary.target_language)}",
        file=sys.stderr,
    )
    print(
        f"  Phrases:         {summary.translated_phrases} translated / "
        f"{summary.total_phrases} total ({summary.failed_phrases} failed)",
        file=sys.stderr,
    )
    print(f"  Elapsed time:    {summary.elapsed_seconds:.2f} seconds", file=sys.stderr)
    if summary.total_errors:
        print("  Notes:", file=sys.stderr)
        for message in summary.error_messages:
            print(f"    - {message}", file=sys.stderr)


def print_languages() -> None:
    for code, name in sorted(LANGUAGES.items(), key=lambda item: item[1]):
        print(f"{code:<6} {name}")


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.list_languages:
        print_languages()
        return 0

    if args.extract:
        try:
            raw = pathlib.Path(args.extract).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Could not read {args.extract}: {exc}")
            return 1
        print(extract(raw))
        return 0

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(exc)
        return 1
    if args.timeout is not None:
        if args.timeout <= 0:
            parser.error("--timeout must be a positive number of seconds")
        settings = settings.model_copy(update={"GLOSSA_TIMEOUT": args.timeout})
    provider_debug = bool(args.debug_provider or settings.GLOSSA_PROVIDER_DEBUG)

    if args.gui:
        from .gui import launch_gui

        return launch_gui(
            args=args,
            settings=settings,
            translation_executor=execute_translation,
            provider_debug=provider_debug,
        )

    phrases = list(args.phrases)
    if args.input_file:
        try:
            phrases.extend(read_phrases(args.input_file))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Could not read {args.input_file}: {exc}")
            return 1
    if not phrases:
        parser.error("provide at least one phrase or --input-file")

    exit_code, summary, message = execute_translation(
        phrases=phrases,
        target_language=args.target_language,
        source_language=args.source_language,
        provider=args.provider,
        settings=settings,
        non_interactive=args.non_interactive,
        verbose=args.verbose,
        provider_debug=provider_debug,
    )

    if message:
        print(message)
    if summary:
        print_translations(summary)
        if args.verbose:
            print_summary(summary)
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
