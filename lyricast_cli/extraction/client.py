"""
歌詞抽出クライアント

YouTube の動画 URL から動画 ID を取り出し、バックエンドの /lyrics
エンドポイントで歌詞・曲名・アーティストを取得する。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..translation import _http
from ..translation.exceptions import ClassifiedError, ErrorKind, ExtractionError
from ..translation.retry import retry_async

logger = logging.getLogger(__name__)

DEFAULT_EXTRACTION_TIMEOUT = 30.0

# 11 文字の動画 ID を取り出す
_VIDEO_ID_PATTERN = re.compile(
    r"^(?:https?://)?(?:(?:www|m|music)\.)?"
    r"(?:youtube\.com/(?:watch\?(?:[^#\s]*&)?v=|embed/|shorts/|v/|live/)"
    r"|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
)

_STATUS_OVERRIDES = {
    400: ErrorKind.INVALID_URL,
    403: ErrorKind.HTTP_ERROR,
    404: ErrorKind.VIDEO_NOT_FOUND,
}

_STATUS_MESSAGES = {
    ErrorKind.INVALID_URL: "Invalid YouTube URL",
    ErrorKind.VIDEO_NOT_FOUND: "Video not found",
    ErrorKind.RATE_LIMITED: "Too many requests. Please try again later",
    ErrorKind.SERVER_ERROR: "Lyrics server error. Please try again later",
    ErrorKind.SERVICE_UNAVAILABLE: "Lyrics service temporarily unavailable",
}


def extract_video_id(url: str) -> Optional[str]:
    """
    動画 URL から 11 文字の動画 ID を取得

    Examples:
        >>> extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://youtu.be/dQw4w9WgXcQ?t=10")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://example.com/watch?v=dQw4w9WgXcQ") is None
        True
    """
    if not url or not isinstance(url, str):
        return None
    match = _VIDEO_ID_PATTERN.match(url.strip())
    return match.group(1) if match else None


@dataclass(frozen=True)
class LyricsData:
    """抽出された歌詞"""

    lyrics: str
    title: Optional[str] = None
    artist: Optional[str] = None
    duration: Optional[float] = None
    video_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lyrics": self.lyrics,
            "title": self.title,
            "artist": self.artist,
            "duration": self.duration,
            "videoId": self.video_id,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """歌詞抽出の結果エンベロープ"""

    success: bool
    data: Optional[LyricsData] = None
    error: Optional[ClassifiedError] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        assert self.error is not None
        return {"success": False, "error": self.error.to_dict()}


class ExtractionClient:
    """
    歌詞抽出バックエンドのクライアント

    Examples:
        >>> client = ExtractionClient("http://localhost:3001/api")
        >>> result = await client.extract_lyrics("https://youtu.be/dQw4w9WgXcQ")
    """

    def __init__(
        self,
        api_base_url: str,
        timeout: float = DEFAULT_EXTRACTION_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def fetch_lyrics(self, url: str) -> LyricsData:
        """
        歌詞を取得

        Raises:
            ExtractionError: URL 不正、動画なし、歌詞なし、通信失敗など
        """
        video_id = extract_video_id(url)
        if video_id is None:
            raise ExtractionError("Invalid YouTube URL", ErrorKind.INVALID_URL)

        response = await _http.send(
            self._client,
            "POST",
            f"{self.api_base_url}/lyrics",
            json={"url": url, "videoId": video_id},
            timeout=self.timeout,
            error_cls=ExtractionError,
            service="Lyrics extraction",
        )

        payload = _http.safe_json(response)
        if response.is_error:
            kind = _http.classify_status(
                response.status_code, overrides=_STATUS_OVERRIDES
            )
            message = (
                _STATUS_MESSAGES.get(kind)
                or _http.payload_message(payload)
                or f"HTTP {response.status_code}"
            )
            raise ExtractionError(message, kind, response.status_code)

        if not isinstance(payload, dict):
            raise ExtractionError(
                "Invalid response from lyrics service", ErrorKind.INVALID_RESPONSE
            )

        if payload.get("success") is False:
            error = payload.get("error") or {}
            if not isinstance(error, dict):
                error = {"message": str(error)}
            raise ExtractionError(
                error.get("message") or "Lyrics extraction failed",
                ErrorKind.parse(error.get("type"), ErrorKind.HTTP_ERROR),
                _http.as_int(error.get("statusCode")),
            )

        body = payload.get("data") if isinstance(payload.get("data"), dict) else payload
        lyrics = body.get("lyrics")
        if not isinstance(lyrics, str) or not lyrics.strip():
            raise ExtractionError(
                "No lyrics found. Please paste manually.", ErrorKind.NO_LYRICS_FOUND
            )

        return LyricsData(
            lyrics=lyrics,
            title=body.get("title"),
            artist=body.get("artist"),
            duration=body.get("duration"),
            video_id=body.get("videoId") or video_id,
        )

    async def extract_lyrics(self, url: str) -> ExtractionResult:
        """歌詞を取得（例外を送出せず結果エンベロープで返す）"""
        try:
            return ExtractionResult(success=True, data=await self.fetch_lyrics(url))
        except ExtractionError as e:
            logger.warning("Lyrics extraction failed (%s): %s", e.kind.value, e.message)
            return ExtractionResult(success=False, error=e.to_error())

    async def extract_lyrics_with_retry(
        self,
        url: str,
        max_retries: int = 3,
        initial_delay: float = 1.0,
    ) -> ExtractionResult:
        """
        一時的な失敗を指数バックオフでリトライしながら歌詞を取得

        INVALID_URL / VIDEO_NOT_FOUND / NO_LYRICS_FOUND はリトライしない。
        """
        try:
            data = await retry_async(
                lambda: self.fetch_lyrics(url),
                max_retries=max_retries,
                initial_delay=initial_delay,
            )
        except ExtractionError as e:
            logger.warning("Lyrics extraction failed (%s): %s", e.kind.value, e.message)
            return ExtractionResult(success=False, error=e.to_error())
        return ExtractionResult(success=True, data=data)
