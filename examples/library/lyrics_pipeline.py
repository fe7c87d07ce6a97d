#!/usr/bin/env python3
"""歌詞抽出 → 翻訳の一連の流れの例.

動画 URL から歌詞を取得し、指定した言語へ翻訳します。
歌詞抽出はバックエンド（LYRICAST_API_BASE_URL）が必要です。

使用方法:
    python examples/library/lyrics_pipeline.py https://youtu.be/dQw4w9WgXcQ
    python examples/library/lyrics_pipeline.py https://youtu.be/dQw4w9WgXcQ Tamil
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lyricast_cli.config import load_config  # noqa: E402
from lyricast_cli.extraction import ExtractionClient  # noqa: E402
from lyricast_cli.i18n import describe_error  # noqa: E402
from lyricast_cli.translation import TranslationOrchestrator  # noqa: E402


async def run(url: str, target: str) -> int:
    config = load_config()

    extractor = ExtractionClient(config["api"]["base_url"], timeout=config["extraction"]["timeout"])
    extraction = await extractor.extract_lyrics_with_retry(
        url,
        max_retries=config["retry"]["max_retries"],
        initial_delay=config["retry"]["initial_delay"],
    )
    if not extraction.success:
        print(f"Extraction failed: {describe_error(extraction.error)}")
        return 1

    lyrics = extraction.data
    print(f"=== {lyrics.title or 'Unknown title'} / {lyrics.artist or 'Unknown artist'} ===")
    print(lyrics.lyrics)
    print()

    orchestrator = TranslationOrchestrator.from_config(config)
    result = await orchestrator.translate(lyrics.lyrics, target)
    if not result.success:
        print(f"Translation failed: {describe_error(result.error)}")
        return 1

    print(f"=== Translation ({result.data.target_language}, via {result.data.provider}) ===")
    print(result.data.translated_text)
    return 0


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    target = sys.argv[2] if len(sys.argv) > 2 else "Sinhala"
    sys.exit(asyncio.run(run(sys.argv[1], target)))


if __name__ == "__main__":
    main()
