"""
エラー分類と例外クラス階層

翻訳・歌詞抽出の各処理で発生するエラーを ErrorKind で分類し、
呼び出し側が種別で分岐（リトライ / フォールバック / 表示）できるようにする。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """エラー種別"""

    # 入力検証（クライアント側、リトライしない）
    MISSING_TEXT = "MISSING_TEXT"
    EMPTY_TEXT = "EMPTY_TEXT"
    TEXT_TOO_LONG = "TEXT_TOO_LONG"
    MISSING_TARGET_LANGUAGE = "MISSING_TARGET_LANGUAGE"

    # 恒久的なドメインエラー（リトライしない）
    INVALID_URL = "INVALID_URL"
    VIDEO_NOT_FOUND = "VIDEO_NOT_FOUND"
    NO_LYRICS_FOUND = "NO_LYRICS_FOUND"

    # 一時的なエラー（リトライ可能）
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    SERVER_ERROR = "SERVER_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # プロバイダ固有（次のプロバイダへフォールバック）
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    API_KEY_MISSING = "API_KEY_MISSING"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    TRANSLATION_EMPTY = "TRANSLATION_EMPTY"
    INVALID_REQUEST = "INVALID_REQUEST"
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
    GOOGLE_API_ERROR = "GOOGLE_API_ERROR"
    LIBRE_API_ERROR = "LIBRE_API_ERROR"
    HTTP_ERROR = "HTTP_ERROR"

    # 全プロバイダ失敗
    ALL_SERVICES_FAILED = "ALL_SERVICES_FAILED"

    # 分類不能
    TRANSLATION_ERROR = "TRANSLATION_ERROR"

    @property
    def is_retryable(self) -> bool:
        """一時的なエラーかどうか"""
        return self in TRANSIENT_KINDS

    @classmethod
    def parse(cls, value: Any, default: "ErrorKind") -> "ErrorKind":
        """
        外部から受け取った種別文字列を ErrorKind に変換

        Args:
            value: 種別文字列（バックエンドのレスポンスなど）
            default: 未知の値の場合に使用する種別

        Returns:
            ErrorKind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            return default


VALIDATION_KINDS = frozenset(
    {
        ErrorKind.MISSING_TEXT,
        ErrorKind.EMPTY_TEXT,
        ErrorKind.TEXT_TOO_LONG,
        ErrorKind.MISSING_TARGET_LANGUAGE,
    }
)

PERMANENT_KINDS = frozenset(
    {
        ErrorKind.INVALID_URL,
        ErrorKind.VIDEO_NOT_FOUND,
        ErrorKind.NO_LYRICS_FOUND,
    }
)

TRANSIENT_KINDS = frozenset(
    {
        ErrorKind.TIMEOUT,
        ErrorKind.NETWORK_ERROR,
        ErrorKind.RATE_LIMITED,
        ErrorKind.SERVER_ERROR,
        ErrorKind.SERVICE_UNAVAILABLE,
    }
)


@dataclass(frozen=True)
class ClassifiedError:
    """分類済みエラー"""

    message: str
    kind: ErrorKind
    status_code: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message, "kind": self.kind.value}
        if self.status_code is not None:
            payload["statusCode"] = self.status_code
        return payload


class LyricastError(Exception):
    """分類済みエラーの基底クラス"""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.TRANSLATION_ERROR,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)

    def to_error(self) -> ClassifiedError:
        """ClassifiedError に変換"""
        return ClassifiedError(
            message=self.message, kind=self.kind, status_code=self.status_code
        )


class TranslationError(LyricastError):
    """翻訳エラーの基底クラス"""

    pass


class RequestValidationError(TranslationError):
    """翻訳リクエストの入力検証エラー"""

    pass


class ProviderError(TranslationError):
    """翻訳プロバイダ呼び出しのエラー（API 失敗、タイムアウト、不正レスポンス）"""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: Optional[int] = None,
        provider: Optional[str] = None,
    ):
        self.provider = provider
        super().__init__(message, kind, status_code)


class ExtractionError(LyricastError):
    """歌詞抽出のエラー"""

    pass
