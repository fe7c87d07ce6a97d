"""
ProviderFactory / ProviderMetadata のテスト
"""

from __future__ import annotations

import httpx
import pytest

from lyricast_cli.translation.base import BaseProvider
from lyricast_cli.translation.factory import ProviderFactory
from lyricast_cli.translation.impl.backend import BackendProvider
from lyricast_cli.translation.impl.google import GoogleCloudProvider
from lyricast_cli.translation.impl.google_free import GoogleFreeProvider
from lyricast_cli.translation.impl.libre import LibreTranslateProvider
from lyricast_cli.translation.metadata import ProviderInfo, ProviderMetadata


class TestProviderMetadata:
    """ProviderMetadata のテスト"""

    def test_registered_providers(self):
        """登録済みプロバイダ一覧"""
        assert ProviderMetadata.list_provider_ids() == [
            "backend",
            "google",
            "libretranslate",
            "google_free",
        ]

    def test_get_known(self):
        """既知のプロバイダ"""
        info = ProviderMetadata.get("google")
        assert isinstance(info, ProviderInfo)
        assert info.class_name == "GoogleCloudProvider"
        assert info.requires_api_key is True
        assert info.config_params == {"api_key": "translation.google_api_key"}

    def test_get_unknown(self):
        """未知のプロバイダは None"""
        assert ProviderMetadata.get("deepl") is None

    def test_get_all_returns_copy(self):
        """get_all はコピーを返す"""
        providers = ProviderMetadata.get_all()
        providers.pop("backend")
        assert "backend" in ProviderMetadata.get_all()


class TestProviderFactory:
    """ProviderFactory のテスト"""

    @pytest.mark.parametrize(
        "provider_type,cls",
        [
            ("backend", BackendProvider),
            ("google", GoogleCloudProvider),
            ("libretranslate", LibreTranslateProvider),
            ("google_free", GoogleFreeProvider),
        ],
    )
    def test_create_provider(self, provider_type, cls):
        """各プロバイダを生成できる"""
        provider = ProviderFactory.create_provider(provider_type)
        assert isinstance(provider, cls)
        assert isinstance(provider, BaseProvider)
        assert provider.get_provider_name() == provider_type

    def test_create_provider_with_options(self):
        """オプションはコンストラクタへ渡る"""
        provider = ProviderFactory.create_provider("google", api_key="k", timeout=3.0)
        assert provider.api_key == "k"
        assert provider.timeout == 3.0
        assert provider.is_configured() is True

    def test_unknown_provider(self):
        """未知のタイプは ValueError"""
        with pytest.raises(ValueError, match="Unknown provider type: deepl"):
            ProviderFactory.create_provider("deepl")

    def test_create_from_config(self, config):
        """設定値がコンストラクタ引数へ対応付けられる"""
        config["translation"]["libretranslate_url"] = "https://libre.internal/"
        config["translation"]["libretranslate_api_key"] = "libre-key"
        config["translation"]["timeout"] = 7.5
        client = httpx.AsyncClient()

        provider = ProviderFactory.create_from_config("libretranslate", config, client=client)

        assert provider.url == "https://libre.internal"
        assert provider.api_key == "libre-key"
        assert provider.timeout == 7.5
        assert provider._client is client

    def test_create_from_config_backend(self, config):
        config["api"]["base_url"] = "https://lyrics.example/api"

        provider = ProviderFactory.create_from_config("backend", config)

        assert provider.api_base_url == "https://lyrics.example/api"

    def test_create_chain_follows_config_order(self, config):
        """translation.providers の順にプロバイダ列を作る"""
        config["translation"]["providers"] = ["libretranslate", "google_free", "backend"]

        chain = ProviderFactory.create_chain(config)

        assert [p.get_provider_name() for p in chain] == [
            "libretranslate",
            "google_free",
            "backend",
        ]

    def test_default_chain(self, config):
        """既定の順序は backend → google → libretranslate"""
        chain = ProviderFactory.create_chain(config)
        assert [p.get_provider_name() for p in chain] == ["backend", "google", "libretranslate"]

    def test_list_available_providers(self):
        assert ProviderFactory.list_available_providers() == ProviderMetadata.list_provider_ids()
