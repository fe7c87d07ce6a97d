"""TypedDict definitions for the lyricast-cli configuration tree."""

from __future__ import annotations

from typing import List, Literal, Optional, TypedDict

__all__ = [
    "ApiConfig",
    "TranslationConfig",
    "ExtractionConfig",
    "RetryConfig",
    "LoggingConfig",
    "CoreConfig",
]


class ApiConfig(TypedDict):
    base_url: str


class TranslationConfig(TypedDict, total=False):
    providers: List[str]
    google_api_key: Optional[str]
    libretranslate_url: str
    libretranslate_api_key: Optional[str]
    timeout: float
    max_text_length: int
    max_chunk_size: int


class ExtractionConfig(TypedDict, total=False):
    timeout: float


class RetryConfig(TypedDict, total=False):
    max_retries: int
    initial_delay: float


class LoggingConfig(TypedDict, total=False):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CoreConfig(TypedDict):
    api: ApiConfig
    translation: TranslationConfig
    extraction: ExtractionConfig
    retry: RetryConfig
    logging: LoggingConfig
