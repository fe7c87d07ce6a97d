#!/usr/bin/env python3
"""基本的な翻訳の例.

設定されたプロバイダ順（既定: backend → google → libretranslate）で
テキストを翻訳し、どのプロバイダが応答したかを表示します。
インターネット接続が必要です。

使用方法:
    python examples/translation/basic_translation.py

    # カスタムテキストを指定
    python examples/translation/basic_translation.py "Text to translate"

環境変数:
    LYRICAST_TARGET_LANG: ターゲット言語、デフォルト: Sinhala
    LYRICAST_PROVIDERS: プロバイダ順（例: libretranslate,google_free）
    LYRICAST_GOOGLE_TRANSLATE_KEY: Google Cloud Translation の API キー
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def main() -> None:
    """メイン処理."""
    from lyricast_cli.config import load_config
    from lyricast_cli.i18n import describe_error
    from lyricast_cli.translation import TranslationOrchestrator, get_language_name

    target_lang = os.getenv("LYRICAST_TARGET_LANG", "Sinhala")

    if len(sys.argv) > 1:
        text = sys.argv[1]
    else:
        text = "Take me home, country roads. To the place I belong."

    config = load_config()
    orchestrator = TranslationOrchestrator.from_config(config)

    print("=== Basic Translation Example ===")
    print(f"Providers: {' -> '.join(orchestrator.provider_names)}")
    print(f"Target language: {get_language_name(target_lang)}")
    print(f"Input text: {text}")
    print()

    result = orchestrator.translate_sync(text, target_lang)

    print("=== Translation Result ===")
    if not result.success:
        print(f"Error ({result.error.kind.value}): {describe_error(result.error)}")
        sys.exit(1)

    data = result.data
    print(f"Original ({data.source_language}): {data.original_text}")
    print(f"Translated ({data.target_language}): {data.translated_text}")
    print(f"Provider: {data.provider} ({data.chunk_count} chunk)")


if __name__ == "__main__":
    main()
