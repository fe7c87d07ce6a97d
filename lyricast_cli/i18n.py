"""ユーザー向けエラーメッセージの解決

エラー種別ごとの表示文を ``errors.<KIND>`` キーで保持する。
ロケール別の文言はメッセージソース（キー → 文字列 or None を返す関数）を
登録して差し替える。プロバイダの生のエラーメッセージは表示しない。
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from .translation.exceptions import ClassifiedError, ErrorKind

logger = logging.getLogger(__name__)

ERROR_NAMESPACE = "errors"

DEFAULT_ERROR_MESSAGES: Dict[str, str] = {
    ErrorKind.MISSING_TEXT.value: "Please enter some text to translate.",
    ErrorKind.EMPTY_TEXT.value: "The text to translate is empty.",
    ErrorKind.TEXT_TOO_LONG.value: "The text is too long. Please shorten it and try again.",
    ErrorKind.MISSING_TARGET_LANGUAGE.value: "Please choose a target language.",
    ErrorKind.INVALID_URL.value: "That does not look like a valid YouTube link.",
    ErrorKind.VIDEO_NOT_FOUND.value: "We could not find that video.",
    ErrorKind.NO_LYRICS_FOUND.value: "No lyrics found. Please paste them manually.",
    ErrorKind.TIMEOUT.value: "The request took too long. Please try again.",
    ErrorKind.NETWORK_ERROR.value: "Network error. Please check your connection.",
    ErrorKind.RATE_LIMITED.value: "Too many requests right now. Please wait a moment and try again.",
    ErrorKind.SERVER_ERROR.value: "The server had a problem. Please try again later.",
    ErrorKind.SERVICE_UNAVAILABLE.value: "The service is temporarily unavailable. Please try again later.",
    ErrorKind.QUOTA_EXCEEDED.value: "The translation quota has been used up. Please try again later.",
    ErrorKind.API_KEY_MISSING.value: "The translation service is not configured.",
    ErrorKind.INVALID_RESPONSE.value: "The translation service returned an unexpected response.",
    ErrorKind.TRANSLATION_EMPTY.value: "The translation came back empty.",
    ErrorKind.INVALID_REQUEST.value: "The translation request was rejected.",
    ErrorKind.SERVICE_NOT_FOUND.value: "The translation service could not be reached.",
    ErrorKind.GOOGLE_API_ERROR.value: "Google Translate returned an error.",
    ErrorKind.LIBRE_API_ERROR.value: "LibreTranslate returned an error.",
    ErrorKind.HTTP_ERROR.value: "The server returned an error.",
    ErrorKind.ALL_SERVICES_FAILED.value: "All translation services are currently unavailable. Please try again later.",
    ErrorKind.TRANSLATION_ERROR.value: "Something went wrong. Please try again.",
}

GENERIC_MESSAGE = DEFAULT_ERROR_MESSAGES[ErrorKind.TRANSLATION_ERROR.value]

# キー → 表示文（未対応なら None）
MessageSource = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class TranslatorDetails:
    registered: bool
    name: Optional[str] = None
    locale: Optional[str] = None
    metadata: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class I18nDiagnostics:
    translator: TranslatorDetails
    fallback_count: int
    fallback_keys_sample: Tuple[str, ...] = ()


@dataclass
class _State:
    source: Optional[MessageSource] = None
    details: TranslatorDetails = field(default_factory=lambda: TranslatorDetails(registered=False))
    messages: Dict[str, str] = field(default_factory=dict)


class I18nManager:
    """表示メッセージを解決するマネージャ"""

    def __init__(self) -> None:
        self._state = _State()
        self.register_fallbacks(DEFAULT_ERROR_MESSAGES, namespace=ERROR_NAMESPACE)

    @contextmanager
    def preserve_state(self) -> Iterator["I18nManager"]:
        """ブロック内での登録変更を終了時に巻き戻す（テスト用）"""
        saved = replace(self._state, messages=dict(self._state.messages))
        try:
            yield self
        finally:
            self._state = saved

    def register_translator(
        self,
        source: MessageSource,
        *,
        name: Optional[str] = None,
        locale: Optional[str] = None,
        metadata: Optional[Mapping[str, object]] = None,
    ) -> None:
        """ロケール別メッセージのソースを登録"""
        self._state.source = source
        self._state.details = TranslatorDetails(
            registered=True,
            name=name or getattr(source, "__qualname__", None) or repr(source),
            locale=locale,
            metadata={str(k): str(v) for k, v in (metadata or {}).items()},
        )

    def clear_translator(self) -> None:
        self._state.source = None
        self._state.details = TranslatorDetails(registered=False)

    def register_fallbacks(self, mapping: Mapping[str, str], *, namespace: str | None = None) -> None:
        """既定メッセージを登録（namespace 指定時は ``namespace.key``）"""
        prefix = f"{namespace}." if namespace else ""
        self._state.messages.update({f"{prefix}{key}": text for key, text in mapping.items()})

    def clear_fallbacks(self) -> None:
        self._state.messages.clear()

    def get_fallback(self, key: str) -> Optional[str]:
        return self._state.messages.get(key)

    def translate(self, key: str, *, default: Optional[str] = None, **kwargs) -> str:
        """
        表示文字列を取得

        メッセージソース → 登録済みメッセージ → default → key の順に解決し、
        kwargs があれば str.format で埋め込む。
        """
        text = self._lookup_source(key)
        if text is None:
            text = self._state.messages.get(key, default or key)
        if not kwargs:
            return text
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            logger.debug("Could not format message '%s' with %s", key, sorted(kwargs))
            return text

    def describe_error(self, error: Union[ClassifiedError, ErrorKind, str]) -> str:
        """エラー種別に対応する表示メッセージを取得"""
        if isinstance(error, ClassifiedError):
            kind = error.kind
        else:
            kind = ErrorKind.parse(error, ErrorKind.TRANSLATION_ERROR)
        return self.translate(f"{ERROR_NAMESPACE}.{kind.value}", default=GENERIC_MESSAGE)

    def diagnostics(self, *, sample_size: int = 5) -> I18nDiagnostics:
        keys = tuple(self._state.messages)
        return I18nDiagnostics(
            translator=self._state.details,
            fallback_count=len(keys),
            fallback_keys_sample=keys[:sample_size],
        )

    def _lookup_source(self, key: str) -> Optional[str]:
        source = self._state.source
        if source is None:
            return None
        try:
            return source(key)
        except Exception as exc:  # pragma: no cover - ログのみ
            logger.debug("Message source failed for key '%s': %s", key, exc)
            return None


i18n = I18nManager()

translate = i18n.translate
describe_error = i18n.describe_error
register_translator = i18n.register_translator
register_fallbacks = i18n.register_fallbacks
diagnose = i18n.diagnostics

__all__ = [
    "DEFAULT_ERROR_MESSAGES",
    "I18nDiagnostics",
    "I18nManager",
    "MessageSource",
    "TranslatorDetails",
    "translate",
    "describe_error",
    "register_translator",
    "register_fallbacks",
    "diagnose",
]
