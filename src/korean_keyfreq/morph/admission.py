"""키워드 채택 규칙.

조사 제거와 용언 어미 검사를 통과한 한글 단어를 대상으로 불용어, 최소 길이,
기능 명사 규칙을 순서대로 적용한다. 처음 결정을 내린 규칙이 결과가 된다.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from korean_keyfreq.rules import KeywordRules


class AdmissionDecision(str, Enum):
    """채택 판정 결과와 그 근거."""

    STOPWORD = "stopword"
    TOO_SHORT = "too_short"
    FUNCTION_NOUN = "function_noun"
    STRONG_NOUN = "strong_noun"
    DEFAULT = "default"

    @property
    def accepted(self) -> bool:
        return self in (AdmissionDecision.STRONG_NOUN, AdmissionDecision.DEFAULT)


def explain_admission(word: str, rules: KeywordRules) -> AdmissionDecision:
    """단어의 채택 여부를 근거와 함께 판정한다.

    Args:
        word: 조사가 제거된 한글 단어
        rules: 불용어, 기능 명사, 강한 명사 접미사를 담은 규칙 묶음

    Returns:
        판정 결과 (accepted 속성으로 채택 여부 확인)
    """
    if word in rules.stopwords:
        return AdmissionDecision.STOPWORD
    if len(word) < rules.min_length:
        return AdmissionDecision.TOO_SHORT
    if word in rules.function_nouns:
        return AdmissionDecision.FUNCTION_NOUN
    if rules.strong_noun_suffixes.matches(word):
        return AdmissionDecision.STRONG_NOUN
    # 그 외는 명사로 간주
    return AdmissionDecision.DEFAULT


def admit(word: str, rules: KeywordRules) -> bool:
    """단어를 키워드로 채택할지 판정한다."""
    return explain_admission(word, rules).accepted
