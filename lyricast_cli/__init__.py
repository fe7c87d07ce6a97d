"""Canonical re-exports for the lyricast-cli public API surface.

歌詞抽出と翻訳オーケストレーションの主要シンボルを
`lyricast_cli` 直下から取得できるようにする。

- TranslationOrchestrator: プロバイダフォールバック付き翻訳
- ExtractionClient: 動画 URL からの歌詞取得
- load_config: 既定値 + 環境変数からの設定構築
- ErrorKind, ClassifiedError: エラー分類
"""

from .config import load_config
from .extraction import ExtractionClient, ExtractionResult, LyricsData, extract_video_id
from .i18n import describe_error
from .translation import (
    ClassifiedError,
    ErrorKind,
    ProviderFactory,
    TranslationOrchestrator,
    TranslationResult,
    get_default_languages,
    get_supported_languages,
    resolve_language_code,
    retry_async,
    split_text_into_chunks,
    validate_translation_request,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load_config",
    "ExtractionClient",
    "ExtractionResult",
    "LyricsData",
    "extract_video_id",
    "describe_error",
    "ClassifiedError",
    "ErrorKind",
    "ProviderFactory",
    "TranslationOrchestrator",
    "TranslationResult",
    "get_default_languages",
    "get_supported_languages",
    "resolve_language_code",
    "retry_async",
    "split_text_into_chunks",
    "validate_translation_request",
]
