"""규칙 기반 한국어 단어 처리 모듈.

문자 체계 판별, 구두점 제거, 조사 제거, 용언 어미 판별, 키워드 채택 규칙을 제공한다.
"""

from __future__ import annotations

from .admission import AdmissionDecision, admit, explain_admission
from .normalizer import looks_like_predicate, normalize_word, strip_particle
from .punctuation import DEFAULT_PUNCTUATION, trim_punctuation
from .script import ScriptClass, classify
from .suffix_rules import RuleConfigError, RuleTable, SuffixRule

__all__ = [
    "AdmissionDecision",
    "DEFAULT_PUNCTUATION",
    "RuleConfigError",
    "RuleTable",
    "ScriptClass",
    "SuffixRule",
    "admit",
    "classify",
    "explain_admission",
    "looks_like_predicate",
    "normalize_word",
    "strip_particle",
    "trim_punctuation",
]
