"""
バックエンド API 実装

自前のバックエンド（/translate エンドポイント）経由の翻訳。
レスポンスは {success, data: {...}} 形式とフラット形式の両方に対応する。
"""

from __future__ import annotations

from typing import Optional

import httpx

from .. import _http
from ..base import DEFAULT_TIMEOUT, BaseProvider
from ..exceptions import ErrorKind
from ..result import ProviderTranslation

DEFAULT_API_BASE_URL = "http://localhost:3001/api"


class BackendProvider(BaseProvider):
    """
    バックエンド API プロバイダ

    Examples:
        >>> provider = BackendProvider(api_base_url="http://localhost:3001/api")
        >>> outcome = await provider.translate("Hello", "si")
    """

    display_name = "Translation"

    def __init__(
        self,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(timeout=timeout, client=client, **kwargs)
        self.api_base_url = api_base_url.rstrip("/")

    async def _translate(
        self, text: str, target_lang: str, source_lang: str
    ) -> ProviderTranslation:
        data = await self._post_json(
            f"{self.api_base_url}/translate",
            {"text": text, "target": target_lang, "source": source_lang},
        )
        if not isinstance(data, dict):
            raise self._error(
                "Invalid response from translation backend", ErrorKind.INVALID_RESPONSE
            )

        if data.get("success") is False:
            error = data.get("error") or {}
            if not isinstance(error, dict):
                error = {"message": str(error)}
            raise self._error(
                error.get("message") or "Translation failed",
                ErrorKind.parse(error.get("type"), ErrorKind.TRANSLATION_ERROR),
                _http.as_int(error.get("statusCode")),
            )

        body = data.get("data") if isinstance(data.get("data"), dict) else {}
        translated = body.get("translatedText") or data.get("translatedText")
        if not isinstance(translated, str) or not translated:
            raise self._error(
                "Translation service returned empty result", ErrorKind.TRANSLATION_EMPTY
            )

        return ProviderTranslation(
            translated_text=translated,
            detected_language=body.get("detectedLanguage")
            or data.get("detectedLanguage")
            or source_lang,
            provider=body.get("provider") or data.get("provider") or "backend",
        )

    def get_provider_name(self) -> str:
        return "backend"
