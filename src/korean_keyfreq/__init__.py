"""한국어 키워드 빈도 분석 패키지.

형태소 분석기 없이 규칙 기반으로 한국어 텍스트에서 명사형 키워드를 추출하고
출현 빈도 내림차순으로 정렬한 결과를 제공한다.
"""

from __future__ import annotations

from .analysis.keyword_frequency import FrequencyEntry, KeywordPipeline, analyze_frequency
from .rules import KeywordRules, RuleConfigError, default_rules, load_rules

__all__ = [
    "FrequencyEntry",
    "KeywordPipeline",
    "KeywordRules",
    "RuleConfigError",
    "analyze_frequency",
    "default_rules",
    "load_rules",
]
