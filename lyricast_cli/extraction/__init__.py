"""Lyrics extraction client (video URL -> lyrics, title, artist)."""

from __future__ import annotations

from .client import (
    ExtractionClient,
    ExtractionResult,
    LyricsData,
    extract_video_id,
)

__all__ = [
    "ExtractionClient",
    "ExtractionResult",
    "LyricsData",
    "extract_video_id",
]
