"""
翻訳プロバイダのファクトリー

ProviderFactory はメタデータからプロバイダを生成するファクトリークラス。
設定辞書からフォールバック順のプロバイダ列を組み立てる機能も持つ。
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from .metadata import ProviderInfo, ProviderMetadata

if TYPE_CHECKING:
    import httpx

    from .base import BaseProvider


class ProviderFactory:
    """翻訳プロバイダを作成するファクトリークラス"""

    @classmethod
    def create_provider(cls, provider_type: str, **provider_options) -> BaseProvider:
        """
        指定されたタイプのプロバイダを作成

        Args:
            provider_type: プロバイダタイプ
                利用可能: backend, google, libretranslate, google_free
            **provider_options: プロバイダ固有のパラメータ

        Returns:
            BaseProvider のインスタンス

        Raises:
            ValueError: 不明なプロバイダタイプが指定された場合

        Examples:
            >>> provider = ProviderFactory.create_provider(
            ...     "google", api_key="...", timeout=15.0
            ... )
        """
        metadata = _require_metadata(provider_type)

        params = {**metadata.default_params, **provider_options}

        module = importlib.import_module(metadata.module, package="lyricast_cli.translation")
        provider_class = getattr(module, metadata.class_name)
        return provider_class(**params)

    @classmethod
    def create_from_config(
        cls,
        provider_type: str,
        config: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> BaseProvider:
        """
        設定辞書からプロバイダを作成

        Args:
            provider_type: プロバイダタイプ
            config: load_config() が返す設定辞書
            client: 全プロバイダで共有する httpx.AsyncClient（任意）
        """
        metadata = _require_metadata(provider_type)

        options = {
            param: _lookup(config, path) for param, path in metadata.config_params.items()
        }
        options["timeout"] = config["translation"]["timeout"]
        if client is not None:
            options["client"] = client
        return cls.create_provider(provider_type, **options)

    @classmethod
    def create_chain(
        cls,
        config: Mapping[str, Any],
        client: Optional[httpx.AsyncClient] = None,
    ) -> List[BaseProvider]:
        """設定の translation.providers の順にプロバイダ列を作成"""
        return [
            cls.create_from_config(provider_id, config, client=client)
            for provider_id in config["translation"]["providers"]
        ]

    @classmethod
    def list_available_providers(cls) -> List[str]:
        """利用可能なプロバイダIDのリストを取得"""
        return ProviderMetadata.list_provider_ids()


def _lookup(config: Mapping[str, Any], path: str) -> Any:
    value: Any = config
    for key in path.split("."):
        value = value[key]
    return value


def _require_metadata(provider_type: str) -> ProviderInfo:
    metadata = ProviderMetadata.get(provider_type)
    if metadata is None:
        available = ProviderMetadata.list_provider_ids()
        raise ValueError(
            f"Unknown provider type: {provider_type}. Available: {available}"
        )
    return metadata
