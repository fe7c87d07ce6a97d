"""
GoogleFreeProvider（deep-translator 経由）のテスト
"""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest
from deep_translator.exceptions import RequestError, TooManyRequests, TranslationNotFound

from lyricast_cli.translation.exceptions import ErrorKind
from lyricast_cli.translation.impl.google_free import GoogleFreeProvider, normalize_for_google
from lyricast_cli.translation.result import ProviderFailure, ProviderTranslation

PATCH_TARGET = "lyricast_cli.translation.impl.google_free.DeepGoogleTranslator"


class TestNormalizeForGoogle:
    """normalize_for_google のテスト"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("zh", "zh-CN"),
            ("zh-cn", "zh-CN"),
            ("zh-Hans", "zh-CN"),
            ("zh-TW", "zh-TW"),
            ("zh-hant", "zh-TW"),
            ("si", "si"),
            ("ta", "ta"),
        ],
    )
    def test_normalize(self, value, expected):
        assert normalize_for_google(value) == expected


class TestGoogleFreeProviderMocked:
    """モックを使用した GoogleFreeProvider テスト"""

    def test_translate_basic(self):
        """基本翻訳テスト"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.return_value = "ආයුබෝවන්"
            provider = GoogleFreeProvider()

            outcome = asyncio.run(provider.translate("Hello", "si"))

        assert outcome == ProviderTranslation("ආයුබෝවන්", "auto", "google_free")
        mock_class.assert_called_once_with(source="auto", target="si")
        mock_class.return_value.translate.assert_called_once_with("Hello")

    def test_chinese_target_normalized(self):
        """中国語コードは Google 用に変換される"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.return_value = "你好"
            asyncio.run(GoogleFreeProvider().translate("Hello", "zh", "en"))

        mock_class.assert_called_once_with(source="en", target="zh-CN")

    def test_rate_limited(self):
        """TooManyRequests は RATE_LIMITED"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.side_effect = TooManyRequests()
            outcome = asyncio.run(GoogleFreeProvider().translate("Hello", "si"))

        assert isinstance(outcome, ProviderFailure)
        assert outcome.error.kind is ErrorKind.RATE_LIMITED
        assert outcome.error.status_code == 429

    def test_request_error(self):
        """RequestError は NETWORK_ERROR"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.side_effect = RequestError()
            outcome = asyncio.run(GoogleFreeProvider().translate("Hello", "si"))

        assert outcome.error.kind is ErrorKind.NETWORK_ERROR

    def test_translation_not_found(self):
        """TranslationNotFound は TRANSLATION_EMPTY"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.side_effect = TranslationNotFound("Hello")
            outcome = asyncio.run(GoogleFreeProvider().translate("Hello", "si"))

        assert outcome.error.kind is ErrorKind.TRANSLATION_EMPTY

    def test_empty_result(self):
        """空文字の結果は TRANSLATION_EMPTY"""
        with patch(PATCH_TARGET) as mock_class:
            mock_class.return_value.translate.return_value = ""
            outcome = asyncio.run(GoogleFreeProvider().translate("Hello", "si"))

        assert outcome.error.kind is ErrorKind.TRANSLATION_EMPTY
        assert outcome.provider == "google_free"
