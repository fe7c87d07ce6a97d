"""
翻訳オーケストレーション

複数の翻訳プロバイダ（バックエンド API, Google Cloud Translation,
LibreTranslate, deep-translator 経由の Google）を優先順位順に試行し、
失敗を ErrorKind で分類して結果エンベロープとして返す。

Usage:
    from lyricast_cli.config import load_config
    from lyricast_cli.translation import TranslationOrchestrator

    orchestrator = TranslationOrchestrator.from_config(load_config())
    result = orchestrator.translate_sync("Hello world.", "Sinhala")
    if result.success:
        print(result.data.translated_text)
    else:
        print(result.error.kind)
"""

from __future__ import annotations

from .base import BaseProvider
from .catalog import get_default_languages, get_supported_languages
from .chunking import split_text_into_chunks
from .exceptions import (
    ClassifiedError,
    ErrorKind,
    ExtractionError,
    LyricastError,
    ProviderError,
    RequestValidationError,
    TranslationError,
)
from .factory import ProviderFactory
from .lang_codes import get_language_name, resolve_language_code
from .metadata import ProviderInfo, ProviderMetadata
from .orchestrator import TranslationOrchestrator
from .result import (
    ProviderFailure,
    ProviderOutcome,
    ProviderTranslation,
    TranslationData,
    TranslationResult,
)
from .retry import NON_RETRYABLE_KINDS, retry_async, with_retry
from .validation import validate_translation_request

__all__ = [
    # Core classes
    "BaseProvider",
    "TranslationOrchestrator",
    "ProviderFactory",
    "ProviderMetadata",
    "ProviderInfo",
    # Results
    "TranslationResult",
    "TranslationData",
    "ProviderTranslation",
    "ProviderFailure",
    "ProviderOutcome",
    # Errors
    "ErrorKind",
    "ClassifiedError",
    "LyricastError",
    "TranslationError",
    "RequestValidationError",
    "ProviderError",
    "ExtractionError",
    # Text / language utilities
    "validate_translation_request",
    "split_text_into_chunks",
    "resolve_language_code",
    "get_language_name",
    "get_default_languages",
    "get_supported_languages",
    # Retry
    "NON_RETRYABLE_KINDS",
    "retry_async",
    "with_retry",
]
