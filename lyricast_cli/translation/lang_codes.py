"""
言語コード正規化ユーティリティ

フォーム入力の言語名 / コードをプロバイダ用の 2 文字コードに解決する。
表示名は既定の言語一覧を優先し、それ以外は langcodes ライブラリから取得する。
"""

from __future__ import annotations

from typing import Dict, List

import langcodes

# 言語名とコードの両方から正規コードへのマッピング
LANGUAGE_CODES: Dict[str, str] = {
    "sinhala": "si",
    "si": "si",
    "tamil": "ta",
    "ta": "ta",
    "english": "en",
    "en": "en",
    "hindi": "hi",
    "hi": "hi",
    "spanish": "es",
    "es": "es",
    "french": "fr",
    "fr": "fr",
    "german": "de",
    "de": "de",
    "italian": "it",
    "it": "it",
    "portuguese": "pt",
    "pt": "pt",
    "russian": "ru",
    "ru": "ru",
    "japanese": "ja",
    "ja": "ja",
    "korean": "ko",
    "ko": "ko",
    "chinese": "zh",
    "zh": "zh",
    "arabic": "ar",
    "ar": "ar",
    "bengali": "bn",
    "bn": "bn",
    "urdu": "ur",
    "ur": "ur",
    "thai": "th",
    "th": "th",
    "vietnamese": "vi",
    "vi": "vi",
    "indonesian": "id",
    "id": "id",
    "malay": "ms",
    "ms": "ms",
}

DEFAULT_LANGUAGES: List[Dict[str, str]] = [
    {"code": "en", "name": "English"},
    {"code": "si", "name": "Sinhala"},
    {"code": "ta", "name": "Tamil"},
    {"code": "hi", "name": "Hindi"},
    {"code": "es", "name": "Spanish"},
    {"code": "fr", "name": "French"},
    {"code": "de", "name": "German"},
    {"code": "it", "name": "Italian"},
    {"code": "pt", "name": "Portuguese"},
    {"code": "ru", "name": "Russian"},
    {"code": "ja", "name": "Japanese"},
    {"code": "ko", "name": "Korean"},
    {"code": "zh", "name": "Chinese (Simplified)"},
    {"code": "ar", "name": "Arabic"},
    {"code": "bn", "name": "Bengali"},
    {"code": "ur", "name": "Urdu"},
    {"code": "th", "name": "Thai"},
    {"code": "vi", "name": "Vietnamese"},
    {"code": "id", "name": "Indonesian"},
    {"code": "ms", "name": "Malay"},
]

AUTO = "auto"


def resolve_language_code(language: str) -> str:
    """
    言語名またはコードを正規の言語コードに解決

    テーブルにない入力はエラーにせず、小文字化してそのまま返す。

    Args:
        language: 言語名（"Sinhala"）またはコード（"SI", "si"）

    Returns:
        言語コード（"si" など）

    Examples:
        >>> resolve_language_code("Sinhala")
        'si'
        >>> resolve_language_code("SI")
        'si'
        >>> resolve_language_code("haw")
        'haw'
    """
    key = language.strip().lower()
    return LANGUAGE_CODES.get(key, key)


def resolve_source_code(language: str) -> str:
    """ソース言語を解決（"auto" はそのまま）"""
    if not language or language.strip().lower() == AUTO:
        return AUTO
    return resolve_language_code(language)


def get_language_name(code: str) -> str:
    """
    英語での言語名を取得

    Args:
        code: 言語コード

    Returns:
        言語名（例: "Sinhala"）。名前が得られない場合はコードそのもの
    """
    resolved = resolve_language_code(code)
    for entry in DEFAULT_LANGUAGES:
        if entry["code"] == resolved:
            return entry["name"]
    try:
        return langcodes.Language.get(resolved).display_name()
    except (ValueError, LookupError):
        return resolved
