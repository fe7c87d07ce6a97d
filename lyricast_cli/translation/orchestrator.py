"""
翻訳オーケストレータ

入力検証 → チャンク分割 → チャンクごとのプロバイダフォールバック → 再結合
を行い、常に TranslationResult エンベロープを返す（例外を送出しない）。
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence

from .chunking import DEFAULT_MAX_CHUNK_SIZE, split_text_into_chunks
from .exceptions import ClassifiedError, ErrorKind, RequestValidationError
from .factory import ProviderFactory
from .lang_codes import AUTO, resolve_language_code, resolve_source_code
from .result import (
    ProviderFailure,
    ProviderTranslation,
    TranslationData,
    TranslationResult,
)
from .validation import DEFAULT_MAX_TEXT_LENGTH, validate_translation_request

if TYPE_CHECKING:
    import httpx

    from .base import BaseProvider

logger = logging.getLogger(__name__)

ALL_SERVICES_FAILED_MESSAGE = "All translation services are currently unavailable"


@dataclass
class ProviderAttemptState:
    """1 チャンク分のフォールバック状態"""

    current_provider: Optional[str] = None
    failures: List[ProviderFailure] = field(default_factory=list)
    winner: Optional[ProviderTranslation] = None


class TranslationOrchestrator:
    """
    複数プロバイダを優先順位順に試行する翻訳オーケストレータ

    Examples:
        >>> orchestrator = TranslationOrchestrator.from_config(load_config())
        >>> result = await orchestrator.translate("Hello world.", "Sinhala")
        >>> result.data.translated_text
    """

    def __init__(
        self,
        providers: Sequence[BaseProvider],
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
        max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    ):
        """
        Args:
            providers: フォールバック順のプロバイダ列（先頭が最優先）
            max_text_length: 1 リクエストの最大文字数
            max_chunk_size: 1 チャンクの最大文字数
        """
        self.providers = list(providers)
        self.max_text_length = max_text_length
        self.max_chunk_size = max_chunk_size

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> TranslationOrchestrator:
        """設定辞書からオーケストレータを作成"""
        translation = config["translation"]
        return cls(
            ProviderFactory.create_chain(config, client=client),
            max_text_length=translation["max_text_length"],
            max_chunk_size=translation["max_chunk_size"],
        )

    @property
    def provider_names(self) -> List[str]:
        return [provider.get_provider_name() for provider in self.providers]

    async def translate(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO,
    ) -> TranslationResult:
        """
        テキストを翻訳

        Args:
            text: 翻訳対象テキスト
            target_language: ターゲット言語（名前またはコード）
            source_language: ソース言語（名前、コード、または "auto"）

        Returns:
            TranslationResult（失敗も含めて常に返す）
        """
        try:
            return await self._translate(text, target_language, source_language)
        except RequestValidationError as e:
            return TranslationResult.fail(e.to_error())
        except Exception as e:
            logger.exception("Unexpected error during translation")
            return TranslationResult.fail(
                ClassifiedError(str(e) or "Translation failed", ErrorKind.TRANSLATION_ERROR)
            )

    def translate_sync(
        self,
        text: str,
        target_language: str,
        source_language: str = AUTO,
    ) -> TranslationResult:
        """同期呼び出し用のラッパー（イベントループ外から使用）"""
        return asyncio.run(self.translate(text, target_language, source_language))

    async def _translate(
        self, text: str, target_language: str, source_language: str
    ) -> TranslationResult:
        validate_translation_request(text, target_language, self.max_text_length)

        target_code = resolve_language_code(target_language)
        source_code = resolve_source_code(source_language)
        chunks = split_text_into_chunks(text, self.max_chunk_size)

        translated_chunks: List[str] = []
        detected_language = source_code
        used_provider: Optional[str] = None

        # チャンクは順番に処理する
        for index, chunk in enumerate(chunks, start=1):
            state = await self._translate_chunk(chunk, target_code, source_code)
            if state.winner is None:
                logger.error(
                    "All providers failed for chunk %d/%d: %s",
                    index,
                    len(chunks),
                    ", ".join(
                        f"{f.provider}={f.error.kind.value}" for f in state.failures
                    ),
                )
                # 途中までの翻訳結果は破棄する
                return TranslationResult.fail(
                    ClassifiedError(
                        ALL_SERVICES_FAILED_MESSAGE, ErrorKind.ALL_SERVICES_FAILED
                    )
                )

            translated_chunks.append(state.winner.translated_text)
            used_provider = state.winner.provider
            # 検出言語は最初に得られたものだけを採用する
            if detected_language == AUTO and state.winner.detected_language:
                detected_language = state.winner.detected_language

        return TranslationResult.ok(
            TranslationData(
                original_text=text,
                translated_text=" ".join(translated_chunks),
                source_language=detected_language,
                target_language=target_code,
                provider=used_provider,
                chunk_count=len(chunks),
            )
        )

    async def _translate_chunk(
        self, chunk: str, target_code: str, source_code: str
    ) -> ProviderAttemptState:
        state = ProviderAttemptState()
        for provider in self.providers:
            state.current_provider = provider.get_provider_name()
            outcome = await provider.translate(chunk, target_code, source_code)
            if isinstance(outcome, ProviderTranslation):
                state.winner = outcome
                break
            state.failures.append(outcome)
            logger.warning(
                "Provider %s failed (%s), falling back",
                outcome.provider,
                outcome.error.kind.value,
            )
        return state
