"""단어 앞뒤 구두점 제거."""

from __future__ import annotations

from collections.abc import Container

DEFAULT_PUNCTUATION: frozenset[str] = frozenset(".,!?;:\"'()[]{}<>")


def trim_punctuation(word: str, punctuation: Container[str] = DEFAULT_PUNCTUATION) -> str:
    """단어 앞뒤의 구두점을 제거한다.

    양 끝에서 구두점이 아닌 첫 문자를 만나면 멈추므로 단어 내부의 구두점은 유지된다.
    전부 구두점이면 빈 문자열을 반환한다.
    """
    start = 0
    end = len(word)
    while start < end and word[start] in punctuation:
        start += 1
    while end > start and word[end - 1] in punctuation:
        end -= 1
    return word[start:end]
