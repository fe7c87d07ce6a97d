"""
リトライユーティリティ

指数バックオフによるリトライ機能を提供。
主に歌詞抽出 API など、一時的に失敗しうるネットワーク呼び出しで使用。
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import AbstractSet, Any, Awaitable, Callable, Optional, TypeVar

from .exceptions import PERMANENT_KINDS, VALIDATION_KINDS, ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Awaitable[Any]])

# 恒久的・クライアント側のエラーはリトライしない
NON_RETRYABLE_KINDS: AbstractSet[ErrorKind] = VALIDATION_KINDS | PERMANENT_KINDS


def _error_kind(error: BaseException) -> Optional[ErrorKind]:
    return getattr(error, "kind", None)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    initial_delay: float = 1.0,
    non_retryable: AbstractSet[ErrorKind] = NON_RETRYABLE_KINDS,
) -> T:
    """
    指数バックオフで非同期処理をリトライ

    エラーの kind が non_retryable に含まれる場合は即座に再送出する。
    それ以外は最大 max_retries 回まで試行し、n 回目の失敗後に
    initial_delay * 2^(n-1) 秒待機する。

    Args:
        operation: 引数なしで呼び出せるコルーチン関数
        max_retries: 最大試行回数（デフォルト: 3）
        initial_delay: 初回リトライまでの待機時間（秒、デフォルト: 1.0）
        non_retryable: リトライしないエラー種別

    Returns:
        operation の戻り値

    Raises:
        最後に発生したエラー
    """
    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except Exception as e:
            if _error_kind(e) in non_retryable:
                raise
            if attempt >= attempts:
                raise
            delay = initial_delay * (2 ** (attempt - 1))
            logger.warning(
                "Operation failed (attempt %d/%d), retrying in %.1fs: %s",
                attempt,
                attempts,
                delay,
                e,
            )
            await asyncio.sleep(delay)
    raise AssertionError("unreachable")  # pragma: no cover


def with_retry(max_retries: int = 3, base_delay: float = 1.0) -> Callable[[F], F]:
    """
    指数バックオフリトライデコレータ

    retry_async と同じ方針でコルーチン関数をリトライする。

    Examples:
        >>> @with_retry(max_retries=3, base_delay=1.0)
        ... async def fetch(url):
        ...     # ネットワーク API 呼び出し
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return await retry_async(
                lambda: func(*args, **kwargs),
                max_retries=max_retries,
                initial_delay=base_delay,
            )

        return wrapper  # type: ignore[return-value]

    return decorator
