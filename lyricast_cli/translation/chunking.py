"""
長文テキストの分割

プロバイダのサイズ上限を超えるテキストを文単位（必要なら単語単位）で
分割する。分割結果を半角スペースで連結すると元の単語列が順序通り復元される。
"""

from __future__ import annotations

import re
from typing import Iterable, List

DEFAULT_MAX_CHUNK_SIZE = 4000

# ".", "!", "?" の直後の空白で区切る（区切り文字はどちらにも含めない）
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> List[str]:
    """テキストを文のリストに分割"""
    return [s for s in _SENTENCE_BOUNDARY.split(text.strip()) if s]


def split_text_into_chunks(
    text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE
) -> List[str]:
    """
    テキストをチャンクに分割

    上限以内のテキストはそのまま 1 要素のリストで返す。
    それ以外は文を貪欲に詰め、単独で上限を超える文だけ単語単位で詰める。
    単語の途中では分割しないため、上限より長い単語は単独のチャンクになる。

    Args:
        text: 分割対象テキスト（空でないこと）
        max_chunk_size: チャンクの最大文字数

    Returns:
        順序付きのチャンクのリスト

    Examples:
        >>> split_text_into_chunks("Hello world.", max_chunk_size=100)
        ['Hello world.']
        >>> split_text_into_chunks("One. Two. Three.", max_chunk_size=9)
        ['One. Two.', 'Three.']
    """
    if len(text) <= max_chunk_size:
        return [text]

    chunks: List[str] = []
    current = ""

    for sentence in split_sentences(text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= max_chunk_size:
            current = candidate
            continue

        if current:
            chunks.append(current)
            current = ""

        if len(sentence) <= max_chunk_size:
            current = sentence
            continue

        # 単独で上限を超える文は単語単位で詰める
        current = _pack_words(sentence.split(), max_chunk_size, chunks)

    if current:
        chunks.append(current)

    return chunks


def _pack_words(words: Iterable[str], max_chunk_size: int, chunks: List[str]) -> str:
    """単語を貪欲に詰め、確定したチャンクを chunks に追加して残りを返す"""
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chunk_size:
            current = candidate
        else:
            if current:
                chunks.append(current)
            current = word
    return current
