"""단어의 유니코드 문자 체계 판별."""

from __future__ import annotations

from enum import Enum

HANGUL_SYLLABLE_FIRST = 0xAC00  # 가
HANGUL_SYLLABLE_LAST = 0xD7A3  # 힣
ASCII_LIMIT = 0x80


class ScriptClass(str, Enum):
    """단어 단위 문자 체계 분류."""

    KOREAN = "korean"
    LATIN_ASCII = "latin_ascii"
    OTHER = "other"


def is_hangul_syllable(char: str) -> bool:
    """한글 완성형 음절(U+AC00 ~ U+D7A3)인지 확인한다."""
    return HANGUL_SYLLABLE_FIRST <= ord(char) <= HANGUL_SYLLABLE_LAST


def classify(word: str) -> ScriptClass:
    """단어의 문자 체계를 판별한다.

    한글 음절이 하나라도 있으면 KOREAN, 모든 문자가 ASCII면 LATIN_ASCII,
    그 외(빈 문자열 포함)는 OTHER를 반환한다.

    Args:
        word: 판별할 단어

    Returns:
        문자 체계 분류
    """
    if not word:
        return ScriptClass.OTHER

    all_ascii = True
    for char in word:
        if is_hangul_syllable(char):
            return ScriptClass.KOREAN
        if ord(char) >= ASCII_LIMIT:
            all_ascii = False

    return ScriptClass.LATIN_ASCII if all_ascii else ScriptClass.OTHER
