"""
対応言語一覧の取得

バックエンド → LibreTranslate → 既定一覧の順に試し、常に一覧を返す。
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from . import _http
from .exceptions import ErrorKind, LyricastError
from .lang_codes import DEFAULT_LANGUAGES

logger = logging.getLogger(__name__)


def get_default_languages() -> List[Dict[str, str]]:
    """既定の言語一覧のコピーを返す"""
    return copy.deepcopy(DEFAULT_LANGUAGES)


async def get_supported_languages(
    config: Mapping[str, Any],
    client: Optional[httpx.AsyncClient] = None,
) -> List[Dict[str, str]]:
    """
    対応言語一覧を取得

    Args:
        config: load_config() が返す設定辞書
        client: 注入する httpx.AsyncClient（任意）

    Returns:
        {"code": ..., "name": ...} のリスト
    """
    timeout = config["translation"]["timeout"]
    sources = [
        ("backend", f"{config['api']['base_url'].rstrip('/')}/languages"),
        (
            "libretranslate",
            f"{config['translation']['libretranslate_url'].rstrip('/')}/languages",
        ),
    ]

    for name, url in sources:
        try:
            languages = await _fetch_languages(client, url, timeout)
        except LyricastError as e:
            logger.warning("%s languages endpoint failed: %s", name, e.message)
            continue
        if languages:
            return languages
        logger.warning("%s languages endpoint returned no languages", name)

    return get_default_languages()


async def _fetch_languages(
    client: Optional[httpx.AsyncClient], url: str, timeout: float
) -> List[Dict[str, str]]:
    response = await _http.send(
        client, "GET", url, timeout=timeout, error_cls=LyricastError, service="Languages"
    )
    if response.is_error:
        raise LyricastError(
            f"HTTP {response.status_code}",
            _http.classify_status(response.status_code),
            response.status_code,
        )

    payload = _http.safe_json(response)
    if not isinstance(payload, list):
        raise LyricastError("Unexpected languages payload", ErrorKind.INVALID_RESPONSE)

    return [
        {"code": str(item["code"]), "name": str(item.get("name") or item["code"])}
        for item in payload
        if isinstance(item, dict) and item.get("code")
    ]
