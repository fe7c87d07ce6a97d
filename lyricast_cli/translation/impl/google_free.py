"""
Google Translate（キー不要）実装

deep-translator ライブラリを使用した Google Translate のラッパー。
API キーなしで動作するが、レート制限に掛かりやすい。
deep-translator は同期 API のため、スレッドで実行する。
"""

from __future__ import annotations

import asyncio

from deep_translator import GoogleTranslator as DeepGoogleTranslator
from deep_translator.exceptions import (
    InvalidSourceOrTargetLanguage,
    LanguageNotSupportedException,
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from ..base import BaseProvider
from ..exceptions import ErrorKind
from ..lang_codes import AUTO
from ..result import ProviderTranslation


def normalize_for_google(lang: str) -> str:
    """
    Google Translate 用に正規化

    Examples:
        >>> normalize_for_google("zh")
        'zh-CN'
        >>> normalize_for_google("si")
        'si'
    """
    if lang.lower() in ("zh-tw", "zh-hant"):
        return "zh-TW"
    if lang.lower() in ("zh", "zh-cn", "zh-hans"):
        return "zh-CN"
    return lang


class GoogleFreeProvider(BaseProvider):
    """
    Google Translate (via deep-translator)

    検出言語は返らないため、detected_language はリクエスト時の値になる。
    """

    display_name = "Google Translate"

    async def _translate(
        self, text: str, target_lang: str, source_lang: str
    ) -> ProviderTranslation:
        translated = await asyncio.to_thread(
            self._translate_blocking, text, target_lang, source_lang
        )
        if not translated:
            raise self._error(
                "Translation service returned empty result", ErrorKind.TRANSLATION_EMPTY
            )
        return ProviderTranslation(
            translated_text=translated,
            detected_language=source_lang,
            provider=self.get_provider_name(),
        )

    def _translate_blocking(self, text: str, target_lang: str, source_lang: str) -> str:
        source = AUTO if source_lang == AUTO else normalize_for_google(source_lang)
        try:
            translator = DeepGoogleTranslator(
                source=source, target=normalize_for_google(target_lang)
            )
            return translator.translate(text)
        except TooManyRequests as e:
            raise self._error(
                f"Rate limited: {e}", ErrorKind.RATE_LIMITED, 429
            ) from e
        except RequestError as e:
            raise self._error(
                f"API request failed: {e}", ErrorKind.NETWORK_ERROR
            ) from e
        except TranslationNotFound as e:
            raise self._error(
                f"Translation not found: {e}", ErrorKind.TRANSLATION_EMPTY
            ) from e
        except (LanguageNotSupportedException, InvalidSourceOrTargetLanguage) as e:
            raise self._error(
                f"Unsupported language: {e}", ErrorKind.INVALID_REQUEST
            ) from e

    def get_provider_name(self) -> str:
        return "google_free"
