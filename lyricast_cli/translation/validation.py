"""翻訳リクエストの入力検証"""

from __future__ import annotations

from typing import Any

from .exceptions import ErrorKind, RequestValidationError

DEFAULT_MAX_TEXT_LENGTH = 5000


def validate_translation_request(
    text: Any,
    target_language: Any,
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> None:
    """
    翻訳リクエストを検証

    最初に失敗した検査でエラーを送出する（エラーは蓄積しない）。

    Args:
        text: 翻訳対象テキスト
        target_language: ターゲット言語
        max_text_length: 許容する最大文字数

    Raises:
        RequestValidationError: 検証に失敗した場合
    """
    if not text or not isinstance(text, str):
        raise RequestValidationError(
            "Text is required for translation", ErrorKind.MISSING_TEXT
        )

    if not text.strip():
        raise RequestValidationError("Text cannot be empty", ErrorKind.EMPTY_TEXT)

    if len(text) > max_text_length:
        raise RequestValidationError(
            f"Text too long. Maximum {max_text_length} characters allowed",
            ErrorKind.TEXT_TOO_LONG,
        )

    if not target_language:
        raise RequestValidationError(
            "Target language is required", ErrorKind.MISSING_TARGET_LANGUAGE
        )
