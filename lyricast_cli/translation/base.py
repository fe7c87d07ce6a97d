"""
翻訳プロバイダの抽象基底クラス

全てのプロバイダ実装はこの基底クラスを継承する。
公開メソッド translate() は例外を送出せず、成功 / 失敗を
ProviderTranslation / ProviderFailure として返す。
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

import httpx

from . import _http
from .exceptions import ClassifiedError, ErrorKind, ProviderError
from .lang_codes import AUTO
from .result import ProviderFailure, ProviderOutcome, ProviderTranslation

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

# ステータスごとの既定メッセージ
_STATUS_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.INVALID_REQUEST: "Invalid translation request",
    ErrorKind.QUOTA_EXCEEDED: "Translation quota exceeded or invalid API key",
    ErrorKind.SERVICE_NOT_FOUND: "Translation service not found",
    ErrorKind.RATE_LIMITED: "Translation rate limit exceeded. Please try again later",
    ErrorKind.SERVER_ERROR: "Translation server error. Please try again later",
    ErrorKind.SERVICE_UNAVAILABLE: "Translation service temporarily unavailable",
}


class BaseProvider(ABC):
    """翻訳プロバイダの抽象基底クラス"""

    #: ログやエラーメッセージに使う表示名
    display_name = "Translation"
    #: 個別のステータス表にないエラーステータスの種別
    default_error_kind = ErrorKind.HTTP_ERROR
    #: プロバイダ固有のステータス → 種別の上書き
    status_overrides: Mapping[int, ErrorKind] = {}
    #: プロバイダ固有の種別 → メッセージの上書き
    status_messages: Mapping[ErrorKind, str] = {}

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        """
        プロバイダを初期化

        Args:
            timeout: 1 回の呼び出しの制限時間（秒）
            client: 注入する httpx.AsyncClient（省略時は呼び出しごとに生成）
            **kwargs: サブクラス固有のパラメータ
        """
        self.timeout = timeout
        self._client = client

    async def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str = AUTO,
    ) -> ProviderOutcome:
        """
        テキストを翻訳

        制限時間を超えた呼び出しはキャンセルされ TIMEOUT として返る。

        Args:
            text: 翻訳対象テキスト
            target_lang: ターゲット言語コード
            source_lang: ソース言語コード、または "auto"

        Returns:
            ProviderTranslation または ProviderFailure
        """
        name = self.get_provider_name()
        try:
            return await asyncio.wait_for(
                self._translate(text, target_lang, source_lang), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            error = ClassifiedError(
                "Translation timeout. Please try again", ErrorKind.TIMEOUT
            )
        except ProviderError as e:
            error = e.to_error()
        except Exception:
            logger.exception("Unexpected error from %s provider", name)
            error = ClassifiedError(
                f"{self.display_name} service unavailable",
                ErrorKind.SERVICE_UNAVAILABLE,
            )

        logger.warning(
            "%s translation failed (%s): %s", name, error.kind.value, error.message
        )
        return ProviderFailure(provider=name, error=error)

    @abstractmethod
    async def _translate(
        self, text: str, target_lang: str, source_lang: str
    ) -> ProviderTranslation:
        """
        1 回のネットワーク呼び出しで翻訳（サブクラスで実装）

        Raises:
            ProviderError: 失敗時
        """
        ...

    @abstractmethod
    def get_provider_name(self) -> str:
        """
        プロバイダ名を取得

        Returns:
            プロバイダの識別子（例: "google", "libretranslate"）
        """
        ...

    def is_configured(self) -> bool:
        """
        必要な設定（認証情報など）が揃っているか

        認証不要のプロバイダはオーバーライド不要。
        """
        return True

    # HTTP helpers -----------------------------------------------------------

    def _error(
        self, message: str, kind: ErrorKind, status_code: Optional[int] = None
    ) -> ProviderError:
        return ProviderError(
            message, kind, status_code, provider=self.get_provider_name()
        )

    async def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """JSON を POST し、成功レスポンスの JSON を返す"""
        response = await _http.send(
            self._client,
            "POST",
            url,
            json=payload,
            params=params,
            timeout=self.timeout,
            error_cls=ProviderError,
            service=self.display_name,
        )
        if response.is_error:
            raise self._status_error(response)
        try:
            return response.json()
        except ValueError as e:
            raise self._error(
                f"Invalid response from {self.display_name}",
                ErrorKind.INVALID_RESPONSE,
                response.status_code,
            ) from e

    def _status_error(self, response: httpx.Response) -> ProviderError:
        """エラーステータスのレスポンスを分類"""
        status = response.status_code
        kind = _http.classify_status(
            status, self.default_error_kind, self.status_overrides
        )
        detail = _http.payload_message(_http.safe_json(response))
        # 400 はサーバ側のメッセージを優先する
        if kind is ErrorKind.INVALID_REQUEST and detail:
            return self._error(detail, kind, status)
        message = (
            self.status_messages.get(kind)
            or _STATUS_MESSAGES.get(kind)
            or detail
            or f"{self.display_name} API error (HTTP {status})"
        )
        return self._error(message, kind, status)
