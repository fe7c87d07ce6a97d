"""
Google Cloud Translation 実装

Cloud Translation API v2（API キー必須）を httpx で直接呼び出す。
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..base import DEFAULT_TIMEOUT, BaseProvider
from ..exceptions import ErrorKind
from ..lang_codes import AUTO
from ..result import ProviderTranslation

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"


class GoogleCloudProvider(BaseProvider):
    """
    Google Cloud Translation API v2

    API キーが未設定の場合はネットワーク呼び出しを行わず
    API_KEY_MISSING として失敗する。
    """

    display_name = "Google Translate"
    default_error_kind = ErrorKind.GOOGLE_API_ERROR
    status_overrides = {400: ErrorKind.GOOGLE_API_ERROR}
    status_messages = {
        ErrorKind.QUOTA_EXCEEDED: "Google Translate quota exceeded or invalid API key",
    }

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: str = GOOGLE_TRANSLATE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(timeout=timeout, client=client, **kwargs)
        self.api_key = api_key
        self.endpoint = endpoint

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _translate(
        self, text: str, target_lang: str, source_lang: str
    ) -> ProviderTranslation:
        if not self.api_key:
            raise self._error(
                "Google Translate API key not configured", ErrorKind.API_KEY_MISSING
            )

        payload = {"q": text, "target": target_lang, "format": "text"}
        # source を省略すると Google 側で自動検出される
        if source_lang != AUTO:
            payload["source"] = source_lang

        data = await self._post_json(
            self.endpoint, payload, params={"key": self.api_key}
        )

        try:
            translation = data["data"]["translations"][0]
            translated = translation["translatedText"]
        except (KeyError, IndexError, TypeError):
            translated = None
        if not isinstance(translated, str) or not translated:
            raise self._error(
                "Invalid response from Google Translate", ErrorKind.INVALID_RESPONSE
            )

        return ProviderTranslation(
            translated_text=translated,
            detected_language=translation.get("detectedSourceLanguage") or source_lang,
            provider=self.get_provider_name(),
        )

    def get_provider_name(self) -> str:
        return "google"
