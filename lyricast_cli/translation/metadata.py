"""
翻訳プロバイダのメタデータ管理

プロバイダの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ProviderInfo:
    """翻訳プロバイダのメタデータ"""

    provider_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.google"
    class_name: str  # e.g., "GoogleCloudProvider"
    requires_api_key: bool = False
    # コンストラクタ引数 → 設定のドット区切りパス
    config_params: Dict[str, str] = field(default_factory=dict)
    default_params: Dict[str, Any] = field(default_factory=dict)


class ProviderMetadata:
    """翻訳プロバイダのメタデータ管理"""

    _PROVIDERS: Dict[str, ProviderInfo] = {
        "backend": ProviderInfo(
            provider_id="backend",
            display_name="Lyricast backend",
            description="Translation endpoint of the lyrics backend API",
            module=".impl.backend",
            class_name="BackendProvider",
            config_params={"api_base_url": "api.base_url"},
        ),
        "google": ProviderInfo(
            provider_id="google",
            display_name="Google Cloud Translation",
            description="Google Cloud Translation API v2 (API key required)",
            module=".impl.google",
            class_name="GoogleCloudProvider",
            requires_api_key=True,
            config_params={"api_key": "translation.google_api_key"},
        ),
        "libretranslate": ProviderInfo(
            provider_id="libretranslate",
            display_name="LibreTranslate",
            description="LibreTranslate public or self-hosted instance",
            module=".impl.libre",
            class_name="LibreTranslateProvider",
            config_params={
                "url": "translation.libretranslate_url",
                "api_key": "translation.libretranslate_api_key",
            },
        ),
        "google_free": ProviderInfo(
            provider_id="google_free",
            display_name="Google Translate (keyless)",
            description="Google Translate web endpoint via deep-translator",
            module=".impl.google_free",
            class_name="GoogleFreeProvider",
        ),
    }

    @classmethod
    def get(cls, provider_id: str) -> Optional[ProviderInfo]:
        """
        プロバイダのメタデータを取得

        Args:
            provider_id: プロバイダID

        Returns:
            ProviderInfo、見つからない場合は None
        """
        return cls._PROVIDERS.get(provider_id)

    @classmethod
    def get_all(cls) -> Dict[str, ProviderInfo]:
        """全てのプロバイダメタデータを取得"""
        return cls._PROVIDERS.copy()

    @classmethod
    def list_provider_ids(cls) -> List[str]:
        """登録済みプロバイダIDのリストを取得"""
        return list(cls._PROVIDERS.keys())
