"""
翻訳プロバイダ実装

各プロバイダの実装を格納するサブパッケージ。

- backend.py: 自前バックエンド API
- google.py: Google Cloud Translation API v2（API キー必須）
- libre.py: LibreTranslate
- google_free.py: Google Translate via deep-translator（キー不要）
"""

from __future__ import annotations

from .backend import BackendProvider
from .google import GoogleCloudProvider
from .google_free import GoogleFreeProvider
from .libre import LibreTranslateProvider

__all__ = [
    "BackendProvider",
    "GoogleCloudProvider",
    "GoogleFreeProvider",
    "LibreTranslateProvider",
]
