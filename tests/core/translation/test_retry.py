"""
リトライユーティリティのテスト
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, call, patch

import pytest

from lyricast_cli.translation.exceptions import ErrorKind, ExtractionError
from lyricast_cli.translation.retry import retry_async, with_retry


@pytest.fixture
def sleep_mock():
    with patch("lyricast_cli.translation.retry.asyncio.sleep", new_callable=AsyncMock) as mock:
        yield mock


class TestRetryAsync:
    """retry_async のテスト"""

    def test_success_first_attempt(self, sleep_mock):
        """初回成功時はリトライしない"""
        operation = AsyncMock(return_value="lyrics")

        assert asyncio.run(retry_async(operation)) == "lyrics"
        assert operation.await_count == 1
        sleep_mock.assert_not_awaited()

    def test_success_after_transient_failures(self, sleep_mock):
        """一時的な失敗の後に成功"""
        operation = AsyncMock(
            side_effect=[
                ExtractionError("timeout", ErrorKind.TIMEOUT),
                ExtractionError("down", ErrorKind.SERVICE_UNAVAILABLE),
                "lyrics",
            ]
        )

        assert asyncio.run(retry_async(operation, max_retries=3)) == "lyrics"
        assert operation.await_count == 3

    def test_exponential_backoff_delays(self, sleep_mock):
        """待機時間は initial_delay * 2^(n-1)"""
        operation = AsyncMock(side_effect=ExtractionError("down", ErrorKind.SERVER_ERROR))

        with pytest.raises(ExtractionError):
            asyncio.run(retry_async(operation, max_retries=4, initial_delay=0.5))

        assert operation.await_count == 4
        assert sleep_mock.await_args_list == [call(0.5), call(1.0), call(2.0)]

    def test_exhausted_reraises_last_error(self, sleep_mock):
        """試行回数を使い切ると最後のエラーを再送出"""
        operation = AsyncMock(
            side_effect=[
                ExtractionError("first", ErrorKind.TIMEOUT),
                ExtractionError("second", ErrorKind.NETWORK_ERROR),
                ExtractionError("third", ErrorKind.RATE_LIMITED),
            ]
        )

        with pytest.raises(ExtractionError, match="third") as exc_info:
            asyncio.run(retry_async(operation, max_retries=3))

        assert exc_info.value.kind is ErrorKind.RATE_LIMITED
        assert sleep_mock.await_args_list == [call(1.0), call(2.0)]

    @pytest.mark.parametrize(
        "kind",
        [
            ErrorKind.INVALID_URL,
            ErrorKind.VIDEO_NOT_FOUND,
            ErrorKind.NO_LYRICS_FOUND,
            ErrorKind.MISSING_TEXT,
        ],
    )
    def test_non_retryable_kinds_raise_immediately(self, sleep_mock, kind):
        """恒久的なエラーはリトライしない"""
        operation = AsyncMock(side_effect=ExtractionError("nope", kind))

        with pytest.raises(ExtractionError):
            asyncio.run(retry_async(operation, max_retries=3))

        assert operation.await_count == 1
        sleep_mock.assert_not_awaited()

    def test_unclassified_errors_are_retried(self, sleep_mock):
        """種別のない例外もリトライ対象"""
        operation = AsyncMock(side_effect=[RuntimeError("flaky"), "ok"])

        assert asyncio.run(retry_async(operation)) == "ok"
        assert operation.await_count == 2

    @pytest.mark.parametrize("max_retries", [0, -1, 1])
    def test_at_least_one_attempt(self, sleep_mock, max_retries):
        """max_retries が 1 以下でも 1 回は試行"""
        operation = AsyncMock(side_effect=ExtractionError("down", ErrorKind.TIMEOUT))

        with pytest.raises(ExtractionError):
            asyncio.run(retry_async(operation, max_retries=max_retries))

        assert operation.await_count == 1
        sleep_mock.assert_not_awaited()


class TestWithRetry:
    """with_retry デコレータのテスト"""

    def test_retries_decorated_coroutine(self, sleep_mock):
        """デコレートした関数がリトライされる"""
        attempts = []

        @with_retry(max_retries=3, base_delay=0.25)
        async def fetch(url, *, tag=None):
            attempts.append((url, tag))
            if len(attempts) < 2:
                raise ExtractionError("down", ErrorKind.SERVICE_UNAVAILABLE)
            return "done"

        assert asyncio.run(fetch("https://youtu.be/x", tag="a")) == "done"
        assert attempts == [("https://youtu.be/x", "a")] * 2
        sleep_mock.assert_awaited_once_with(0.25)

    def test_preserves_function_metadata(self):
        """functools.wraps でメタデータが保持される"""

        @with_retry(max_retries=3)
        async def my_function():
            """My docstring"""

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "My docstring"
