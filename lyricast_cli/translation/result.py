"""
翻訳結果のデータクラス

プロバイダ単位の結果（成功 / 失敗のタグ付きユニオン）と、
オーケストレータが呼び出し側へ返す結果エンベロープを定義する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .exceptions import ClassifiedError


@dataclass(frozen=True)
class ProviderTranslation:
    """プロバイダの翻訳成功結果"""

    translated_text: str
    detected_language: str  # 検出されたソース言語（不明ならリクエスト時の値）
    provider: str


@dataclass(frozen=True)
class ProviderFailure:
    """プロバイダの翻訳失敗結果"""

    provider: str
    error: ClassifiedError


ProviderOutcome = Union[ProviderTranslation, ProviderFailure]


@dataclass(frozen=True)
class TranslationData:
    """翻訳成功時のペイロード"""

    original_text: str
    translated_text: str
    source_language: str
    target_language: str
    provider: Optional[str]
    chunk_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalText": self.original_text,
            "translatedText": self.translated_text,
            "sourceLanguage": self.source_language,
            "targetLanguage": self.target_language,
            "provider": self.provider,
            "chunkCount": self.chunk_count,
        }


@dataclass(frozen=True)
class TranslationResult:
    """翻訳結果エンベロープ"""

    success: bool
    data: Optional[TranslationData] = None
    error: Optional[ClassifiedError] = None

    @classmethod
    def ok(cls, data: TranslationData) -> TranslationResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ClassifiedError) -> TranslationResult:
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """ワイヤ形式の辞書に変換"""
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        assert self.error is not None
        return {"success": False, "error": self.error.to_dict()}
