"""
LibreTranslate 実装

公開インスタンス（既定: libretranslate.de）またはセルフホストの
LibreTranslate を呼び出す。API キーは任意。
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..base import DEFAULT_TIMEOUT, BaseProvider
from ..exceptions import ErrorKind
from ..result import ProviderTranslation

DEFAULT_LIBRETRANSLATE_URL = "https://libretranslate.de"


class LibreTranslateProvider(BaseProvider):
    """LibreTranslate API"""

    display_name = "LibreTranslate"
    default_error_kind = ErrorKind.LIBRE_API_ERROR
    status_overrides = {400: ErrorKind.LIBRE_API_ERROR}
    status_messages = {
        ErrorKind.RATE_LIMITED: "Translation rate limit exceeded",
    }

    def __init__(
        self,
        url: str = DEFAULT_LIBRETRANSLATE_URL,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        super().__init__(timeout=timeout, client=client, **kwargs)
        self.url = url.rstrip("/")
        self.api_key = api_key

    async def _translate(
        self, text: str, target_lang: str, source_lang: str
    ) -> ProviderTranslation:
        payload = {
            "q": text,
            "source": source_lang,
            "target": target_lang,
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key

        data = await self._post_json(f"{self.url}/translate", payload)

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str) or not translated:
            raise self._error(
                "Invalid response from LibreTranslate", ErrorKind.INVALID_RESPONSE
            )

        return ProviderTranslation(
            translated_text=translated,
            detected_language=_detected_language(data.get("detectedLanguage"))
            or source_lang,
            provider=self.get_provider_name(),
        )

    def get_provider_name(self) -> str:
        return "libretranslate"


def _detected_language(value: Any) -> Optional[str]:
    # source=auto のときは {"language": "en", "confidence": 90} 形式で返る
    if isinstance(value, dict):
        return value.get("language")
    if isinstance(value, str):
        return value
    return None
