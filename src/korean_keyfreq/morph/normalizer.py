"""단어 정규화와 조사/어미 처리.

- normalize_word: 구두점 제거 후 한글 단어만 남기고 ASCII 문자를 걸러낸다.
- strip_particle: 끝에 붙은 조사를 한 번만 제거한다.
- looks_like_predicate: 동사/형용사/연결형 어미로 끝나는지 판별한다.
"""

from __future__ import annotations

from collections.abc import Container

from .korean_rules import DEFAULT_PARTICLES, DEFAULT_PREDICATE_ENDINGS
from .punctuation import DEFAULT_PUNCTUATION, trim_punctuation
from .script import ASCII_LIMIT, ScriptClass, classify
from .suffix_rules import RuleTable


def drop_ascii(word: str) -> str:
    """ASCII 문자(영문, 숫자, 기호)를 제거한다."""
    return "".join(char for char in word if ord(char) >= ASCII_LIMIT)


def normalize_word(raw: str, punctuation: Container[str] = DEFAULT_PUNCTUATION) -> str:
    """원본 토큰을 한글 단어로 정규화한다.

    한글이 아닌 토큰은 일부만 남기지 않고 통째로 버린다.

    Args:
        raw: 공백 기준으로 분리된 원본 토큰
        punctuation: 앞뒤에서 제거할 구두점 집합

    Returns:
        ASCII 문자를 제외한 한글 단어, 대상이 아니면 빈 문자열
    """
    trimmed = trim_punctuation(raw, punctuation)
    if not trimmed:
        return ""
    if classify(trimmed) is not ScriptClass.KOREAN:
        return ""
    return drop_ascii(trimmed)


def strip_particle(word: str, table: RuleTable = DEFAULT_PARTICLES) -> str:
    """끝에 붙은 조사를 제거한다.

    테이블 순서대로 처음 일치한 조사 하나만 떼고 멈춘다. 결과에 다시 적용하지 않는다.
    한글 단어가 아니면 그대로 반환한다.
    """
    if classify(word) is not ScriptClass.KOREAN:
        return word
    return table.strip(word)


def looks_like_predicate(word: str, table: RuleTable = DEFAULT_PREDICATE_ENDINGS) -> bool:
    """용언/연결형 어미로 끝나서 명사가 아닌 것으로 보이는지 확인한다."""
    return table.matches(word)
