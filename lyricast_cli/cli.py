"""CLI for lyricast-cli - fetch song lyrics and translate them."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .config import load_config
from .i18n import I18nDiagnostics, describe_error, diagnose as diagnose_i18n
from .translation.exceptions import ClassifiedError

__all__ = ["DiagnosticReport", "diagnose", "main"]

MAX_USER_RETRIES = 3


@dataclass
class DiagnosticReport:
    """Diagnostic payload for the info command."""

    api_base_url: str
    providers: list[str]
    google_api_key_configured: bool
    libretranslate_url: str
    timeout: float
    extraction_timeout: float
    max_text_length: int
    max_chunk_size: int
    i18n: I18nDiagnostics

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Configure logging for CLI output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def diagnose(config: Optional[Dict[str, Any]] = None) -> DiagnosticReport:
    """Programmatic entry point for diagnostics."""
    config = config or load_config()
    translation = config["translation"]
    return DiagnosticReport(
        api_base_url=config["api"]["base_url"],
        providers=list(translation["providers"]),
        google_api_key_configured=bool(translation["google_api_key"]),
        libretranslate_url=translation["libretranslate_url"],
        timeout=translation["timeout"],
        extraction_timeout=config["extraction"]["timeout"],
        max_text_length=translation["max_text_length"],
        max_chunk_size=translation["max_chunk_size"],
        i18n=diagnose_i18n(),
    )


def _print_error(error: ClassifiedError) -> None:
    print(f"Error: {describe_error(error)}", file=sys.stderr)
    if error.kind.is_retryable:
        print(
            f"This may be temporary. Try again (up to {MAX_USER_RETRIES} times).",
            file=sys.stderr,
        )


# =============================================================================
# Subcommand: info
# =============================================================================

def cmd_info(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Show configuration diagnostics."""
    report = diagnose(config)

    if args.as_json:
        print(report.to_json())
        return 0

    print("lyricast-cli diagnostics:")
    print(f"  API base URL: {report.api_base_url}")
    print(f"  Providers: {', '.join(report.providers)}")
    print(f"  Google API key: {'configured' if report.google_api_key_configured else 'not set'}")
    print(f"  LibreTranslate URL: {report.libretranslate_url}")
    print(f"  Timeouts: translation={report.timeout}s extraction={report.extraction_timeout}s")
    print(f"  Limits: text={report.max_text_length} chunk={report.max_chunk_size}")
    print(f"  Messages: {report.i18n.fallback_count} fallback entries")
    return 0


# =============================================================================
# Subcommand: providers
# =============================================================================

def cmd_providers(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """List registered translation providers."""
    from .translation.metadata import ProviderMetadata

    enabled = config["translation"]["providers"]
    for provider_id, info in ProviderMetadata.get_all().items():
        if provider_id in enabled:
            status = f" (enabled, priority {enabled.index(provider_id) + 1})"
        else:
            status = ""
        key = " [API key]" if info.requires_api_key else ""
        print(f"{provider_id}: {info.display_name}{key}{status}")
    return 0


# =============================================================================
# Subcommand: languages
# =============================================================================

def cmd_languages(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """List supported target languages."""
    from .translation.catalog import get_default_languages, get_supported_languages

    if args.remote:
        languages: List[Dict[str, str]] = asyncio.run(get_supported_languages(config))
    else:
        languages = get_default_languages()

    for language in languages:
        print(f"{language['code']}: {language['name']}")
    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

def cmd_translate(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Translate text given on the command line or a file."""
    from .translation import TranslationOrchestrator

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            print(f"Error: Could not read {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        text = args.text

    orchestrator = TranslationOrchestrator.from_config(config)
    result = orchestrator.translate_sync(text, args.to, args.source)

    if args.as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0 if result.success else 1

    if not result.success:
        _print_error(result.error)
        return 1

    print(result.data.translated_text)
    print(
        f"[{result.data.source_language} -> {result.data.target_language}"
        f" via {result.data.provider}, {result.data.chunk_count} chunk(s)]",
        file=sys.stderr,
    )
    return 0


# =============================================================================
# Subcommand: lyrics
# =============================================================================

async def _lyrics_flow(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    from .extraction import ExtractionClient
    from .translation import TranslationOrchestrator

    extractor = ExtractionClient(
        config["api"]["base_url"], timeout=config["extraction"]["timeout"]
    )
    extraction = await extractor.extract_lyrics_with_retry(
        args.url,
        max_retries=args.retries,
        initial_delay=config["retry"]["initial_delay"],
    )
    if not extraction.success:
        return {"extraction": extraction, "translation": None}

    orchestrator = TranslationOrchestrator.from_config(config)
    translation = await orchestrator.translate(extraction.data.lyrics, args.to)
    return {"extraction": extraction, "translation": translation}


def cmd_lyrics(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """Extract lyrics for a video URL and translate them."""
    if args.retries is None:
        args.retries = config["retry"]["max_retries"]
    args.retries = max(1, min(args.retries, MAX_USER_RETRIES))

    outcome = asyncio.run(_lyrics_flow(args, config))
    extraction = outcome["extraction"]
    translation = outcome["translation"]

    if args.as_json:
        print(
            json.dumps(
                {
                    "extraction": extraction.to_dict(),
                    "translation": translation.to_dict() if translation else None,
                },
                ensure_ascii=False,
                indent=2,
            )
        )
        return 0 if translation is not None and translation.success else 1

    if not extraction.success:
        _print_error(extraction.error)
        return 1
    if not translation.success:
        _print_error(translation.error)
        return 1

    data = extraction.data
    header = " - ".join(part for part in (data.title, data.artist) if part)
    if header:
        print(f"# {header}\n")
    print(data.lyrics)
    print("\n---\n")
    print(translation.data.translated_text)
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lyricast-cli",
        description="Fetch song lyrics from a video URL and translate them.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # info command
    info_parser = subparsers.add_parser("info", help="Show configuration diagnostics")
    info_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    info_parser.set_defaults(func=cmd_info)

    # providers command
    providers_parser = subparsers.add_parser("providers", help="List translation providers")
    providers_parser.set_defaults(func=cmd_providers)

    # languages command
    languages_parser = subparsers.add_parser("languages", help="List supported languages")
    languages_parser.add_argument(
        "--remote",
        action="store_true",
        help="Ask the backend / LibreTranslate instead of the built-in list",
    )
    languages_parser.set_defaults(func=cmd_languages)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument(
        "text",
        nargs="?",
        help="Text to translate",
    )
    translate_parser.add_argument(
        "-f", "--file",
        help="Read the text from a file",
    )
    translate_parser.add_argument(
        "--to",
        required=True,
        help="Target language name or code (e.g. Sinhala, si)",
    )
    translate_parser.add_argument(
        "--from",
        dest="source",
        default="auto",
        help="Source language (default: auto)",
    )
    translate_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output the result envelope as JSON",
    )
    translate_parser.set_defaults(func=cmd_translate)

    # lyrics command
    lyrics_parser = subparsers.add_parser("lyrics", help="Extract and translate lyrics for a video")
    lyrics_parser.add_argument(
        "url",
        help="YouTube video URL",
    )
    lyrics_parser.add_argument(
        "--to",
        required=True,
        help="Target language name or code",
    )
    lyrics_parser.add_argument(
        "--retries",
        type=int,
        default=None,
        help=f"Extraction attempts for temporary failures (max {MAX_USER_RETRIES})",
    )
    lyrics_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output the result envelopes as JSON",
    )
    lyrics_parser.set_defaults(func=cmd_lyrics)

    args = parser.parse_args(argv)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config["logging"]["level"], verbose=args.verbose)

    # Execute the command
    return args.func(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
