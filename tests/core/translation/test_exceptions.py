"""
エラー分類と例外クラスのテスト
"""

from __future__ import annotations

import pytest

from lyricast_cli.translation.exceptions import (
    PERMANENT_KINDS,
    TRANSIENT_KINDS,
    VALIDATION_KINDS,
    ClassifiedError,
    ErrorKind,
    ExtractionError,
    LyricastError,
    ProviderError,
    RequestValidationError,
    TranslationError,
)


class TestErrorKind:
    """ErrorKind のテスト"""

    @pytest.mark.parametrize(
        "kind",
        [
            ErrorKind.TIMEOUT,
            ErrorKind.NETWORK_ERROR,
            ErrorKind.RATE_LIMITED,
            ErrorKind.SERVER_ERROR,
            ErrorKind.SERVICE_UNAVAILABLE,
        ],
    )
    def test_transient_kinds_are_retryable(self, kind):
        """一時的なエラーはリトライ可能"""
        assert kind.is_retryable is True

    @pytest.mark.parametrize(
        "kind",
        [
            ErrorKind.MISSING_TEXT,
            ErrorKind.INVALID_URL,
            ErrorKind.QUOTA_EXCEEDED,
            ErrorKind.API_KEY_MISSING,
            ErrorKind.ALL_SERVICES_FAILED,
        ],
    )
    def test_other_kinds_are_not_retryable(self, kind):
        """一時的でないエラーはリトライ不可"""
        assert kind.is_retryable is False

    def test_kind_sets_are_disjoint(self):
        """分類集合は重ならない"""
        assert not VALIDATION_KINDS & PERMANENT_KINDS
        assert not VALIDATION_KINDS & TRANSIENT_KINDS
        assert not PERMANENT_KINDS & TRANSIENT_KINDS

    def test_parse_known_value(self):
        """既知の文字列は対応する種別になる"""
        assert ErrorKind.parse("RATE_LIMITED", ErrorKind.HTTP_ERROR) is ErrorKind.RATE_LIMITED

    def test_parse_is_case_insensitive(self):
        """小文字でも解釈できる"""
        assert ErrorKind.parse("no_lyrics_found", ErrorKind.HTTP_ERROR) is ErrorKind.NO_LYRICS_FOUND

    def test_parse_unknown_uses_default(self):
        """未知の値は既定値になる"""
        assert ErrorKind.parse("SOMETHING_ELSE", ErrorKind.HTTP_ERROR) is ErrorKind.HTTP_ERROR
        assert ErrorKind.parse(None, ErrorKind.TRANSLATION_ERROR) is ErrorKind.TRANSLATION_ERROR

    def test_str_enum_value(self):
        """文字列として比較できる"""
        assert ErrorKind.TIMEOUT == "TIMEOUT"


class TestClassifiedError:
    """ClassifiedError のテスト"""

    def test_to_dict_without_status(self):
        """ステータスコードなしの場合は statusCode を含めない"""
        error = ClassifiedError("Network error", ErrorKind.NETWORK_ERROR)
        assert error.to_dict() == {"message": "Network error", "kind": "NETWORK_ERROR"}

    def test_to_dict_with_status(self):
        """ステータスコードありの場合"""
        error = ClassifiedError("Rate limited", ErrorKind.RATE_LIMITED, 429)
        assert error.to_dict() == {
            "message": "Rate limited",
            "kind": "RATE_LIMITED",
            "statusCode": 429,
        }


class TestExceptionHierarchy:
    """例外クラス階層のテスト"""

    def test_translation_errors_share_base(self):
        """翻訳系の例外は TranslationError を継承"""
        assert issubclass(RequestValidationError, TranslationError)
        assert issubclass(ProviderError, TranslationError)
        assert issubclass(TranslationError, LyricastError)

    def test_extraction_error_is_not_translation_error(self):
        """ExtractionError は翻訳系とは別系統"""
        assert issubclass(ExtractionError, LyricastError)
        assert not issubclass(ExtractionError, TranslationError)

    def test_default_kind(self):
        """種別省略時は TRANSLATION_ERROR"""
        error = LyricastError("boom")
        assert error.kind is ErrorKind.TRANSLATION_ERROR
        assert str(error) == "boom"

    def test_provider_error_carries_provider(self):
        """ProviderError はプロバイダ名を保持"""
        error = ProviderError("quota", ErrorKind.QUOTA_EXCEEDED, 403, provider="google")
        assert error.provider == "google"
        assert error.to_error() == ClassifiedError("quota", ErrorKind.QUOTA_EXCEEDED, 403)
